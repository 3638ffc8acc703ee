"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (in-memory, JSON, SQL)
live in the infrastructure layer.

Implementations signal the conditions the domain understands with
domain exceptions (``ProductNotFoundError``, ``AlreadyExistsError``).
Anything else they raise is treated as an opaque storage failure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def create(self, product: Product) -> Product:
        """Persist a new product and return it with its assigned ID.

        Raises AlreadyExistsError if the SKU is already taken.
        """

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product:
        """Return a product by its ID or raise ProductNotFoundError."""

    @abstractmethod
    def get_by_sku(self, sku: str) -> Product:
        """Return a product by its (normalized) SKU or raise ProductNotFoundError."""

    @abstractmethod
    def exists_by_sku(self, sku: str) -> bool:
        """Return True if a product with this SKU is stored."""

    @abstractmethod
    def update(self, product: Product) -> Product:
        """Persist changes to an existing product.

        Raises ProductNotFoundError if the product was never created.
        """

    @abstractmethod
    def list(self, limit: int, offset: int) -> list[Product]:
        """Return at most ``limit`` products ordered by ID, skipping ``offset``."""

    @abstractmethod
    def count(self) -> int:
        """Return the total number of stored products."""
