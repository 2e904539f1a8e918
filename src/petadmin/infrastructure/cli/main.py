import click

from petadmin.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_image,
    product_list,
    product_show,
    product_status,
    product_update,
)
from petadmin.infrastructure.config import get_settings
from petadmin.infrastructure.logging_config import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
def cli(verbose: bool) -> None:
    """petadmin — pet-game shop catalog administration"""
    configure_logging(get_settings().log_level, verbose=verbose)


@cli.group()
def product() -> None:
    """Manage shop products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_image)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_status)
product.add_command(product_update)
