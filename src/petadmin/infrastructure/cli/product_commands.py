"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from petadmin.application.add_product import AddProductHandler
from petadmin.application.delete_product import DeleteProductHandler
from petadmin.application.dto import CatalogPageDTO
from petadmin.application.list_products import ListProductsHandler
from petadmin.application.set_product_status import SetProductStatusHandler
from petadmin.application.update_product import UpdateProductHandler
from petadmin.domain.exceptions import DomainException
from petadmin.domain.model.image_load import (
    Exhausted,
    ImageResolver,
    ImageViewKind,
    Succeeded,
)
from petadmin.domain.model.product import CurrencyType, ProductStatus, shop_name
from petadmin.domain.model.view_state import (
    FilterState,
    GroupFilter,
    PaginationState,
    SortConfig,
    SortDirection,
    StatusFilter,
)
from petadmin.domain.service.view_pipeline import SORTABLE_FIELDS
from petadmin.infrastructure.bootstrap import image_probe, product_store
from petadmin.infrastructure.config import get_settings

_CURRENCIES = [c.value for c in CurrencyType]


def _load_store():
    try:
        return product_store()
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("list")
@click.option("--search", default="", help="Substring of name or description.")
@click.option(
    "--status", "status_filter", default=StatusFilter.ALL.value,
    type=click.Choice([s.value for s in StatusFilter]), show_default=True,
)
@click.option(
    "--currency", default="all",
    type=click.Choice(["all", *_CURRENCIES]), show_default=True,
)
@click.option(
    "--group", default=GroupFilter.ALL.value,
    type=click.Choice([g.value for g in GroupFilter]), show_default=True,
)
@click.option("--pet-type", default=None, help="Pet species (only with --group pet).")
@click.option("--sort", "sort_key", default=None, type=click.Choice(sorted(SORTABLE_FIELDS)))
@click.option("--desc", is_flag=True, default=False, help="Sort descending.")
@click.option("--page", default=1, type=int, show_default=True)
@click.option("--page-size", default=None, type=click.IntRange(min=1))
def product_list(
    search: str,
    status_filter: str,
    currency: str,
    group: str,
    pet_type: str | None,
    sort_key: str | None,
    desc: bool,
    page: int,
    page_size: int | None,
) -> None:
    """List products with filters, sorting and paging."""
    filters = FilterState(
        search=search,
        status=StatusFilter(status_filter),
        currency=None if currency == "all" else CurrencyType(currency),
        group=GroupFilter(group),
        pet_type=pet_type,
    )
    sort = SortConfig(
        key=sort_key,
        direction=SortDirection.DESC if desc else SortDirection.ASC,
    )
    pagination = PaginationState(
        page_size=page_size or get_settings().page_size,
        current_page=page,
    )

    dto = ListProductsHandler(_load_store()).handle(filters, sort, pagination)
    _display_page(dto)


def _display_page(dto: CatalogPageDTO) -> None:
    """Shared formatting for a catalog page."""
    if not dto.rows:
        if dto.applied_filters:
            click.echo("No products found matching the filters.")
        else:
            click.echo("No products found.")
    else:
        click.echo(
            f"{'ID':<6} {'Name':<24} {'Type':<12} {'Group':<6} "
            f"{'Price':>8} {'Currency':<9} {'Qty':>5} {'Img':<4} {'Status'}"
        )
        click.echo("-" * 92)
        for row in dto.rows:
            img = "-" if row.image.kind == ImageViewKind.PLACEHOLDER else "yes"
            click.echo(
                f"{row.id:<6} {row.name[:24]:<24} {row.type[:12]:<12} {row.group:<6} "
                f"{row.price:>8} {row.currency_type:<9} {row.quantity:>5} {img:<4} {row.status}"
            )
        click.echo("-" * 92)

    click.echo(
        f"Showing {dto.first_index}-{dto.last_index} of {dto.total_items} "
        f"(page {dto.page}/{dto.total_pages})"
    )
    click.echo(
        f"Total: {dto.summary.total}  Active: {dto.summary.active}  "
        f"Inactive: {dto.summary.inactive}  Filters applied: {dto.applied_filters}"
    )
    if dto.search_term:
        click.echo(f'Search results for: "{dto.search_term}"')


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show every field of one product."""
    store = _load_store()
    try:
        p = store.get(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{p.id}  {p.name}")
    click.echo(f"  Type:        {p.type}  ({p.group(store.pet_types).label})")
    click.echo(f"  Shop:        {shop_name(p.shop_id)}")
    click.echo(f"  Price:       {p.price} {p.currency_type}")
    click.echo(f"  Quantity:    {p.quantity}")
    click.echo(f"  Status:      {'Active' if p.is_active else 'Inactive'}")
    if p.pet_id is not None:
        click.echo(f"  Pet ID:      {p.pet_id}")
    click.echo(f"  Image:       {p.image_url or '-'}")
    click.echo(f"  Description: {p.description or '-'}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--type", "type_", required=True, help="Product type (Food, Toy, a pet species, ...).")
@click.option("--description", required=True)
@click.option("--image-url", required=True, help="Google Drive sharing link.")
@click.option("--price", required=True, help="Price in the chosen currency.")
@click.option("--quantity", default="10", show_default=True)
@click.option("--currency", default=CurrencyType.COIN.value, type=click.Choice(_CURRENCIES), show_default=True)
@click.option("--pet-id", default=None, type=int, help="Link the product to a pet.")
def product_add(
    name: str,
    type_: str,
    description: str,
    image_url: str,
    price: str,
    quantity: str,
    currency: str,
    pet_id: int | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(_load_store())

    try:
        product = handler.handle(
            name=name,
            type=type_,
            description=description,
            image_url=image_url,
            price=price,
            quantity=quantity,
            currency_type=currency,
            pet_id=pet_id,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at "
        f"{product.price} {product.currency_type}"
    )


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None)
@click.option("--type", "type_", default=None)
@click.option("--description", default=None)
@click.option("--image-url", default=None)
@click.option("--price", default=None)
@click.option("--quantity", default=None)
@click.option("--currency", default=None, type=click.Choice(_CURRENCIES))
def product_update(
    product_id: int,
    name: str | None,
    type_: str | None,
    description: str | None,
    image_url: str | None,
    price: str | None,
    quantity: str | None,
    currency: str | None,
) -> None:
    """Edit a product; omitted fields keep their value."""
    handler = UpdateProductHandler(_load_store())

    try:
        product = handler.handle(
            product_id,
            name=name,
            type=type_,
            description=description,
            image_url=image_url,
            price=price,
            quantity=quantity,
            currency_type=currency,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' updated.")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
def product_delete(product_id: int, yes: bool) -> None:
    """Delete a product."""
    store = _load_store()
    if not yes:
        click.confirm(f"Delete product #{product_id}?", abort=True)

    try:
        DeleteProductHandler(store).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")


@click.command("status")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--set", "new_status", required=True, type=click.Choice(["active", "inactive"]))
def product_status(product_id: int, new_status: str) -> None:
    """Enable or disable a product."""
    status = ProductStatus.ACTIVE if new_status == "active" else ProductStatus.INACTIVE
    handler = SetProductStatusHandler(_load_store())

    try:
        handler.handle(product_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    state = "activated" if status == ProductStatus.ACTIVE else "disabled"
    click.echo(f"Product #{product_id} {state}.")


@click.command("image")
@click.option("--id", "product_id", type=int, default=None, help="Product whose image to check.")
@click.option("--url", default=None, help="Check an arbitrary image reference instead.")
@click.option("--no-fetch", is_flag=True, default=False, help="Only print the candidate URLs.")
def product_image(product_id: int | None, url: str | None, no_fetch: bool) -> None:
    """Show the fallback URLs for an image and find the first that loads."""
    if (product_id is None) == (url is None):
        raise click.UsageError("Pass exactly one of --id or --url.")

    if product_id is not None:
        try:
            url = _load_store().get(product_id).image_url
        except DomainException as exc:
            raise click.ClickException(str(exc))

    resolver = ImageResolver.for_reference(url)
    if resolver is None:
        click.echo("No image reference; a placeholder is shown.")
        return

    for index, candidate in enumerate(resolver.candidates, start=1):
        click.echo(f"  {index}. {candidate}")
    if no_fetch:
        return

    state = image_probe().resolve(resolver)
    if isinstance(state, Succeeded):
        click.echo(f"Loaded candidate {state.cursor + 1}: {resolver.current_url}")
    elif isinstance(state, Exhausted):
        raise click.ClickException(
            f"All {len(resolver.candidates)} image URLs failed. "
            f"Open the original link: {resolver.reference}"
        )
