"""Integration tests for the product lookup use cases."""

import pytest

from catalog.application.show_product import GetProductByIdHandler, GetProductBySkuHandler
from catalog.domain.exceptions import LookupFailedError, ProductNotFoundError
from tests.fakes import BrokenProductRepository, SpyProductRepository, make_product


def _setup() -> SpyProductRepository:
    return SpyProductRepository([
        make_product(name="Widget", sku="WID-001"),
        make_product(name="Gadget", sku="GAD-002"),
    ])


class TestGetProductById:

    def test_returns_projection(self):
        repo = _setup()
        dto = GetProductByIdHandler(repo).handle(2)
        assert dto.id == 2
        assert dto.name == "Gadget"
        assert dto.is_available

    def test_not_found_passes_through(self):
        repo = _setup()
        with pytest.raises(ProductNotFoundError):
            GetProductByIdHandler(repo).handle(999)

    def test_storage_failure_wrapped(self):
        repo = BrokenProductRepository(failing={"get_by_id"})
        with pytest.raises(LookupFailedError):
            GetProductByIdHandler(repo).handle(1)


class TestGetProductBySku:

    def test_lookup_is_normalized(self):
        repo = _setup()
        dto = GetProductBySkuHandler(repo).handle(" wid-001 ")
        assert dto.sku == "WID-001"
        assert ("get_by_sku", "WID-001") in repo.calls

    def test_not_found_passes_through(self):
        repo = _setup()
        with pytest.raises(ProductNotFoundError):
            GetProductBySkuHandler(repo).handle("NOPE-1")

    def test_storage_failure_wrapped(self):
        repo = BrokenProductRepository(failing={"get_by_sku"})
        with pytest.raises(LookupFailedError):
            GetProductBySkuHandler(repo).handle("WID-001")
