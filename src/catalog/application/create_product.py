"""Application service: Create Product use case."""

from __future__ import annotations

from catalog.application.dto import CreateProductRequest, ProductDTO
from catalog.application.port_calls import port_call
from catalog.domain.exceptions import (
    AlreadyExistsError,
    CreateFailedError,
    ExistenceCheckFailedError,
)
from catalog.domain.model.product import Product, validate_sku
from catalog.domain.repository.product_repository import ProductRepository


class CreateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, request: CreateProductRequest) -> ProductDTO:
        """Register a new product in the catalog.

        Steps:
        1. Check the SKU shape before touching storage (cheap, fails fast).
        2. Reject SKUs that are already taken.
        3. Let the Product aggregate validate every field.
        4. Persist and return a DTO carrying the assigned ID.
        """
        sku = validate_sku(request.sku)

        with port_call(ExistenceCheckFailedError):
            exists = self._product_repo.exists_by_sku(sku)
        if exists:
            raise AlreadyExistsError(sku)

        product = Product.create(
            name=request.name,
            description=request.description,
            sku=sku,
            category=request.category,
            brand=request.brand,
            price=request.price,
            stock=request.stock,
        )

        # The repository still rejects a duplicate that slipped in between
        # the existence check and this call.
        with port_call(CreateFailedError):
            created = self._product_repo.create(product)

        return ProductDTO.from_product(created)
