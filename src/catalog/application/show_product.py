"""Application service: Show Product use cases (queries by ID or SKU)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.application.port_calls import port_call
from catalog.domain.exceptions import LookupFailedError
from catalog.domain.repository.product_repository import ProductRepository


class GetProductByIdHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO:
        with port_call(LookupFailedError):
            product = self._product_repo.get_by_id(product_id)
        return ProductDTO.from_product(product)


class GetProductBySkuHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, sku: str) -> ProductDTO:
        """Look a product up by SKU.

        SKUs are stored upper-cased, so the lookup key is normalized the
        same way: ``" iph15-128gb "`` finds ``IPH15-128GB``.
        """
        with port_call(LookupFailedError):
            product = self._product_repo.get_by_sku((sku or "").strip().upper())
        return ProductDTO.from_product(product)
