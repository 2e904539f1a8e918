"""Tests for the JSON-file collaborator, against a temporary directory."""

import json

import pytest

from petadmin.domain.exceptions import EntityNotFoundError
from petadmin.domain.model.product import ProductStatus
from petadmin.domain.model.product_draft import ProductDraft
from petadmin.infrastructure.persistence.json_product_repository import JsonProductRepository


def _draft(name="Kibble", quantity=10):
    return ProductDraft.create(
        name=name,
        type="Food",
        description="Dry food",
        image_url="https://drive.google.com/file/d/XYZ/view",
        price=25,
        quantity=quantity,
    )


@pytest.fixture
def repo(tmp_path):
    return JsonProductRepository(tmp_path / "products.json", tmp_path / "pets.json")


class TestJsonProductRepository:

    def test_creates_empty_files(self, tmp_path, repo):
        assert (tmp_path / "products.json").read_text() == "[]"
        assert repo.list_all() == []
        assert repo.list_pets() == []

    def test_create_assigns_sequential_ids(self, repo):
        first = repo.create(_draft("Kibble"))
        second = repo.create(_draft("Tuna"))
        assert (first.id, second.id) == (1, 2)
        assert [p.name for p in repo.list_all()] == ["Kibble", "Tuna"]

    def test_persists_camel_case(self, tmp_path, repo):
        repo.create(_draft())
        raw = json.loads((tmp_path / "products.json").read_text())
        assert raw[0]["shopProductId"] == 1
        assert raw[0]["currencyType"] == "Coin"

    def test_survives_reopen(self, tmp_path, repo):
        repo.create(_draft())
        reopened = JsonProductRepository(tmp_path / "products.json", tmp_path / "pets.json")
        assert reopened.list_all()[0].name == "Kibble"

    def test_update(self, repo):
        product = repo.create(_draft())
        updated = repo.update(product.id, _draft("Premium Kibble", quantity=0))
        assert updated.name == "Premium Kibble"
        assert repo.list_all()[0].status == ProductStatus.INACTIVE

    def test_set_status_and_delete(self, repo):
        product = repo.create(_draft())
        assert repo.set_status(product.id, ProductStatus.INACTIVE).status == ProductStatus.INACTIVE
        repo.delete(product.id)
        assert repo.list_all() == []

    @pytest.mark.parametrize(
        "call",
        [
            lambda r: r.update(9, _draft()),
            lambda r: r.delete(9),
            lambda r: r.set_status(9, ProductStatus.ACTIVE),
        ],
        ids=["update", "delete", "set_status"],
    )
    def test_unknown_id(self, repo, call):
        with pytest.raises(EntityNotFoundError, match="#9"):
            call(repo)

    def test_reads_pets(self, tmp_path, repo):
        (tmp_path / "pets.json").write_text(
            json.dumps([{"petId": 1, "name": "Rex", "petType": "Dog", "petStatus": 1}])
        )
        assert [p.type for p in repo.list_pets()] == ["Dog"]
