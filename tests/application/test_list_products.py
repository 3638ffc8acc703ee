"""Integration tests for the ListProducts use case."""

import pytest

from catalog.application.list_products import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ListProductsHandler,
    normalize_paging,
)
from catalog.domain.exceptions import ListFailedError
from tests.fakes import BrokenProductRepository, SpyProductRepository, make_product


def _setup(n: int = 25) -> SpyProductRepository:
    return SpyProductRepository(
        [make_product(name=f"Product {i}", sku=f"SKU-{i:03d}") for i in range(1, n + 1)]
    )


class TestNormalizePaging:

    @pytest.mark.parametrize(
        "page, page_size, expected",
        [
            (0, 10, (0, 10)),
            (3, 1, (3, 1)),
            (2, MAX_PAGE_SIZE, (2, MAX_PAGE_SIZE)),
            (-1, 500, (DEFAULT_PAGE, DEFAULT_PAGE_SIZE)),
            (1, 0, (1, DEFAULT_PAGE_SIZE)),
            (1, MAX_PAGE_SIZE + 1, (1, DEFAULT_PAGE_SIZE)),
            (None, None, (DEFAULT_PAGE, DEFAULT_PAGE_SIZE)),
        ],
    )
    def test_out_of_range_falls_back_to_defaults(self, page, page_size, expected):
        assert normalize_paging(page, page_size) == expected


class TestListProducts:

    def test_first_page(self):
        repo = _setup()
        result = ListProductsHandler(repo).handle()
        assert result.total == 25
        assert result.page == 0
        assert result.page_size == 10
        assert [p.id for p in result.products] == list(range(1, 11))

    def test_last_partial_page(self):
        repo = _setup()
        result = ListProductsHandler(repo).handle(page=2, page_size=10)
        assert [p.sku for p in result.products] == [f"SKU-{i:03d}" for i in range(21, 26)]
        assert result.total == 25

    def test_page_past_the_end_is_empty(self):
        repo = _setup()
        result = ListProductsHandler(repo).handle(page=9, page_size=10)
        assert result.products == []
        assert result.total == 25

    def test_out_of_range_never_reaches_repository(self):
        repo = _setup()
        result = ListProductsHandler(repo).handle(page=-1, page_size=500)
        assert result.page == 0
        assert result.page_size == 10
        assert ("list", 10, 0) in repo.calls

    def test_empty_catalog(self):
        repo = SpyProductRepository()
        result = ListProductsHandler(repo).handle()
        assert result.total == 0
        assert result.products == []

    def test_projection_includes_flags(self):
        repo = _setup(1)
        item = ListProductsHandler(repo).handle().products[0]
        assert item.is_active and item.is_in_stock and item.is_available

    def test_storage_failure_wrapped(self):
        repo = BrokenProductRepository(failing={"list"})
        with pytest.raises(ListFailedError):
            ListProductsHandler(repo).handle()
