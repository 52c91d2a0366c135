"""Unit tests for ProductDjangoRepository.

Covers:
- get_by_id / get_by_name, including malformed IDs.
- list ordering and look-up filters.
- save and hard delete.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from modules.products.models import Product, ProductStatus
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)


class TestGetById:
    def test_found(self, repo, sample_product):
        assert repo.get_by_id(str(sample_product.id)) == sample_product

    def test_missing_returns_none(self, repo):
        assert repo.get_by_id(str(uuid.uuid4())) is None

    def test_malformed_id_returns_none(self, repo):
        assert repo.get_by_id("not-a-uuid") is None


class TestGetByName:
    def test_found(self, repo, sample_product):
        assert repo.get_by_name(sample_product.name) == sample_product

    def test_exact_match_only(self, repo, sample_product):
        assert repo.get_by_name(sample_product.name.lower()) is None


class TestList:
    def test_empty(self, repo):
        assert repo.list() == []

    def test_newest_first(self, repo, make_product):
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        make_product(name="first", created_at=base)
        make_product(name="third", created_at=base + timedelta(hours=2))
        make_product(name="second", created_at=base + timedelta(hours=1))
        assert [p.name for p in repo.list()] == ["third", "second", "first"]

    def test_filters(self, repo, make_product):
        make_product(name="Blue Mouse")
        make_product(name="Red Keyboard", status=ProductStatus.SOLD_OUT)
        assert [p.name for p in repo.list({"name__icontains": "mouse"})] == [
            "Blue Mouse"
        ]
        assert [p.name for p in repo.list({"status__exact": "SOLD_OUT"})] == [
            "Red Keyboard"
        ]


class TestSave:
    def test_persists_new_product(self, repo):
        product = Product(
            name="Hub", description="7-in-1", manager="Park", password="pw"
        )
        saved = repo.save(product)
        assert Product.objects.filter(id=saved.id).exists()

    def test_updates_existing(self, repo, sample_product):
        sample_product.name = "Renamed"
        repo.save(sample_product)
        sample_product.refresh_from_db()
        assert sample_product.name == "Renamed"


class TestDelete:
    def test_removes_row(self, repo, sample_product):
        assert repo.delete(str(sample_product.id)) is True
        assert not Product.objects.filter(id=sample_product.id).exists()

    def test_missing_returns_false(self, repo):
        assert repo.delete(str(uuid.uuid4())) is False

    def test_malformed_id_returns_false(self, repo):
        assert repo.delete("not-a-uuid") is False
