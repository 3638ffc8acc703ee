"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from decimal import Decimal

from catalog.domain.model.product import Product


@dataclass(frozen=True)
class CreateProductRequest:
    """Input: everything needed to register a new product."""

    name: str
    sku: str
    price: str | float | int | Decimal
    category: str
    description: str = ""
    brand: str = ""
    stock: int = 0


@dataclass(frozen=True)
class ProductChanges:
    """Input: a partial update. ``None`` means "not supplied"."""

    name: str | None = None
    description: str | None = None
    category: str | None = None
    brand: str | None = None
    price: str | float | int | Decimal | None = None
    stock: int | None = None

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


@dataclass(frozen=True)
class ProductDTO:
    """Output: the read-only projection of a product."""

    id: int
    name: str
    description: str
    sku: str
    price: Decimal
    category: str
    brand: str
    stock: int
    status: str
    is_active: bool
    is_in_stock: bool
    is_available: bool
    created_at: datetime
    updated_at: datetime
    display_price: str

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            description=product.description,
            sku=product.sku,
            price=product.price.amount,
            category=product.category,
            brand=product.brand,
            stock=product.stock,
            status=product.status.value,
            is_active=product.is_active,
            is_in_stock=product.is_in_stock,
            is_available=product.is_available,
            created_at=product.created_at,
            updated_at=product.updated_at,  # type: ignore[arg-type]
            display_price=str(product.price),
        )

    def to_dict(self) -> dict:
        """JSON-ready mapping: decimal as string, timestamps as ISO-8601."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "sku": self.sku,
            "price": str(self.price),
            "category": self.category,
            "brand": self.brand,
            "stock": self.stock,
            "status": self.status,
            "is_active": self.is_active,
            "is_in_stock": self.is_in_stock,
            "is_available": self.is_available,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass(frozen=True)
class ProductListDTO:
    """Output: one page of products plus the paging it was cut with."""

    products: list[ProductDTO]
    total: int
    page: int
    page_size: int

    def to_dict(self) -> dict:
        return {
            "products": [p.to_dict() for p in self.products],
            "total": self.total,
            "page": self.page,
            "page_size": self.page_size,
        }
