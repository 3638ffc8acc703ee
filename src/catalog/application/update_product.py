"""Application service: Update Product use cases.

Covers the partial update of any field plus the single-field stock and
price updates. Every successful call ends with the repository's
``update`` so no change is reported that was not persisted.
"""

from __future__ import annotations

from decimal import Decimal

from catalog.application.dto import ProductChanges, ProductDTO
from catalog.application.port_calls import load_for_update, save_update
from catalog.domain.exceptions import (
    InvalidPriceError,
    InvalidQuantityError,
    ValidationError,
)
from catalog.domain.model.product import Product, validate_price, validate_stock
from catalog.domain.repository.product_repository import ProductRepository


def _apply_price(product: Product, price: str | float | int | Decimal) -> None:
    try:
        product.update_price(price)
    except InvalidPriceError as exc:
        raise ValidationError(exc.message, field="price") from exc


def _apply_stock(product: Product, stock: int) -> None:
    try:
        product.update_stock(stock)
    except InvalidQuantityError as exc:
        raise ValidationError(exc.message, field="stock") from exc


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, changes: ProductChanges) -> ProductDTO:
        """Apply only the fields present in ``changes``."""
        product = load_for_update(self._product_repo, product_id)

        # Every supplied field is validated before any of them is assigned.
        price = validate_price(changes.price) if changes.price is not None else None
        if changes.stock is not None:
            validate_stock(changes.stock)

        product.update_details(
            name=changes.name,
            description=changes.description,
            category=changes.category,
            brand=changes.brand,
        )
        if price is not None:
            product.update_price(price)
        if changes.stock is not None:
            product.update_stock(changes.stock)

        updated = save_update(self._product_repo, product)
        return ProductDTO.from_product(updated)


class UpdateProductStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, stock: int) -> ProductDTO:
        """Replace a product's stock level."""
        product = load_for_update(self._product_repo, product_id)
        _apply_stock(product, stock)
        updated = save_update(self._product_repo, product)
        return ProductDTO.from_product(updated)


class UpdateProductPriceHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, price: str | float | int | Decimal) -> ProductDTO:
        """Change a product's price."""
        product = load_for_update(self._product_repo, product_id)
        _apply_price(product, price)
        updated = save_update(self._product_repo, product)
        return ProductDTO.from_product(updated)
