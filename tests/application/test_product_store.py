"""Integration tests for ProductStore.

Uses the in-memory fake collaborator — no network.
"""

import pytest

from petadmin.application.product_store import ProductStore
from petadmin.domain.exceptions import ApiError, EntityNotFoundError
from petadmin.domain.model.pet import Pet
from petadmin.domain.model.product import DEFAULT_PET_TYPES, ProductStatus
from petadmin.domain.model.product_draft import ProductDraft
from tests.fakes import FakeProductRepository, make_product


def _setup(products=None, pets=None) -> tuple[ProductStore, FakeProductRepository]:
    if products is None:
        products = [make_product(1, "Kibble"), make_product(2, "Ball", type="Toy")]
    repo = FakeProductRepository(products, pets)
    store = ProductStore(repo)
    store.refresh()
    repo.calls.clear()
    return store, repo


def _draft(name="Tuna Snack"):
    return ProductDraft.create(
        name=name,
        type="Food",
        description="Fishy",
        image_url="https://drive.google.com/file/d/XYZ/view",
        price=25,
        quantity=10,
    )


class TestLoading:

    def test_refresh_seeds_collection(self):
        store, _ = _setup()
        assert [p.id for p in store.products] == [1, 2]

    def test_get_and_find_by_name(self):
        store, _ = _setup()
        assert store.get(2).name == "Ball"
        assert store.find_by_name("  kibble ").id == 1
        assert store.find_by_name("Nope") is None

    def test_get_unknown_raises(self):
        store, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="#99"):
            store.get(99)

    def test_pet_types_from_pets(self):
        store, _ = _setup(pets=[Pet(1, "Rex", "Dog"), Pet(2, "Tom", "Cat")])
        assert store.pet_types == DEFAULT_PET_TYPES
        store.refresh_pets()
        assert store.pet_types == ("Cat", "Dog")

    def test_products_is_a_snapshot(self):
        store, _ = _setup()
        snapshot = store.products
        store.delete(1)
        assert [p.id for p in snapshot] == [1, 2]


class TestMutations:

    def test_create_goes_to_backend_then_refreshes(self):
        store, repo = _setup()
        product = store.create(_draft())
        assert repo.calls == ["create", "list_all"]
        assert store.get(product.id).name == "Tuna Snack"

    def test_update_refreshes(self):
        store, repo = _setup()
        store.update(1, _draft("Premium Kibble"))
        assert repo.calls == ["update", "list_all"]
        assert store.get(1).name == "Premium Kibble"

    def test_delete_refreshes(self):
        store, repo = _setup()
        store.delete(2)
        assert repo.calls == ["delete", "list_all"]
        assert [p.id for p in store.products] == [1]

    def test_set_status_refreshes(self):
        store, repo = _setup()
        store.set_status(1, ProductStatus.INACTIVE)
        assert repo.calls == ["set_status", "list_all"]
        assert store.get(1).status == ProductStatus.INACTIVE


class TestFailures:

    @pytest.mark.parametrize(
        "call",
        [
            lambda s: s.create(_draft()),
            lambda s: s.update(1, _draft("Other")),
            lambda s: s.delete(1),
            lambda s: s.set_status(1, ProductStatus.INACTIVE),
        ],
        ids=["create", "update", "delete", "set_status"],
    )
    def test_rejected_mutation_leaves_collection_untouched(self, call):
        store, repo = _setup()
        before = store.products
        repo.fail_next = {"create", "update", "delete", "set_status"}
        with pytest.raises(ApiError):
            call(store)
        assert store.products == before
        assert "list_all" not in repo.calls

    def test_failed_refresh_keeps_previous_collection(self):
        store, repo = _setup()
        repo.fail_next.add("list_all")
        with pytest.raises(ApiError):
            store.refresh()
        assert [p.id for p in store.products] == [1, 2]


class TestListeners:

    def test_listener_notified_on_refresh(self):
        store, _ = _setup()
        seen = []
        store.subscribe(lambda: seen.append(len(store.products)))
        store.delete(1)
        assert seen == [1]

    def test_unsubscribe(self):
        store, _ = _setup()
        seen = []
        unsubscribe = store.subscribe(lambda: seen.append(True))
        unsubscribe()
        unsubscribe()
        store.refresh()
        assert seen == []
