"""Unit tests for ProductDjangoRepository.

Covers:
- create / find_by_id round trip, duplicate ids.
- find_all ordering, pagination and sort validation.
- update / delete, including misses.
- Database failures wrapped in RepositoryError.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from django.db import OperationalError

from modules.products.entities import Product
from modules.products.exceptions import (
    ProductAlreadyExists,
    ProductNotFound,
    RepositoryError,
)
from modules.products.models import ProductRecord
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.unit

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


@pytest.fixture()
def stored(repo):
    """Five products created one minute apart: P1 (oldest) .. P5 (newest)."""
    products = []
    for idx in range(1, 6):
        product = Product.new(f"P{idx}", float(idx))
        product = Product(
            id=product.id,
            name=product.name,
            price=product.price,
            created_at=BASE_TIME + timedelta(minutes=idx),
        )
        repo.create(product)
        products.append(product)
    return products


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)


# ===========================================================================
# create / find_by_id
# ===========================================================================


class TestCreate:
    def test_persists_product(self, repo):
        product = Product.new("Widget", 19.99)

        repo.create(product)

        assert ProductRecord.objects.filter(id=product.id).exists()

    def test_round_trip(self, repo):
        product = Product.new("Widget", 19.99)
        repo.create(product)

        found = repo.find_by_id(str(product.id))

        assert found == product

    def test_duplicate_id_raises(self, repo):
        product = Product.new("Widget", 19.99)
        repo.create(product)

        with pytest.raises(ProductAlreadyExists):
            repo.create(product)

    def test_database_failure_raises_repository_error(self, repo):
        with patch.object(
            ProductRecord.objects, "create", side_effect=OperationalError("down")
        ):
            with pytest.raises(RepositoryError):
                repo.create(Product.new("Widget", 19.99))


class TestFindById:
    def test_missing_raises_not_found(self, repo):
        with pytest.raises(ProductNotFound):
            repo.find_by_id("00000000-0000-0000-0000-000000000000")

    def test_malformed_id_raises_not_found(self, repo):
        with pytest.raises(ProductNotFound):
            repo.find_by_id("not-a-uuid")


# ===========================================================================
# find_all
# ===========================================================================


class TestFindAll:
    def test_desc_returns_newest_first(self, repo, stored):
        result = repo.find_all(0, 0, "desc")
        assert [p.name for p in result] == ["P5", "P4", "P3", "P2", "P1"]

    def test_asc_returns_oldest_first(self, repo, stored):
        result = repo.find_all(0, 0, "asc")
        assert [p.name for p in result] == ["P1", "P2", "P3", "P4", "P5"]

    def test_sort_is_case_insensitive(self, repo, stored):
        result = repo.find_all(0, 0, "ASC")
        assert result[0].name == "P1"

    def test_paginates_when_page_and_limit_set(self, repo, stored):
        assert [p.name for p in repo.find_all(1, 2, "asc")] == ["P1", "P2"]
        assert [p.name for p in repo.find_all(2, 2, "asc")] == ["P3", "P4"]
        assert [p.name for p in repo.find_all(3, 2, "asc")] == ["P5"]

    def test_page_past_the_end_is_empty(self, repo, stored):
        assert repo.find_all(10, 2, "asc") == []

    @pytest.mark.parametrize("page,limit", [(0, 0), (0, 2), (2, 0), (-1, 2)])
    def test_returns_everything_without_full_pagination(self, repo, stored, page, limit):
        assert len(repo.find_all(page, limit, "desc")) == 5

    def test_invalid_sort_raises(self, repo, stored):
        with pytest.raises(RepositoryError):
            repo.find_all(0, 0, "sideways")

    def test_empty_store(self, repo):
        assert repo.find_all(0, 0, "desc") == []


# ===========================================================================
# update / delete
# ===========================================================================


class TestUpdate:
    def test_replaces_name_and_price(self, repo, stored):
        original = stored[0]
        replacement = Product(
            id=original.id,
            name="Renamed",
            price=42.0,
            created_at=datetime.now(timezone.utc),
        )

        repo.update(replacement)

        found = repo.find_by_id(str(original.id))
        assert found.name == "Renamed"
        assert found.price == 42.0
        assert found.created_at == original.created_at

    def test_missing_raises_not_found(self, repo):
        with pytest.raises(ProductNotFound):
            repo.update(Product.new("Ghost", 1.0))


class TestDelete:
    def test_removes_product(self, repo, stored):
        repo.delete(stored[0])

        with pytest.raises(ProductNotFound):
            repo.find_by_id(str(stored[0].id))
        assert ProductRecord.objects.count() == 4

    def test_missing_raises_not_found(self, repo):
        with pytest.raises(ProductNotFound):
            repo.delete(Product.new("Ghost", 1.0))
