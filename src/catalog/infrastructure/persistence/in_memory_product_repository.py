"""Dict-backed implementation of ProductRepository.

Keeps everything in process memory. Products are copied on the way in
and on the way out, so a caller mutating a loaded product never changes
what is stored until it calls ``update``.
"""

from __future__ import annotations

import copy

from catalog.domain.exceptions import AlreadyExistsError, ProductNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1
        for p in products or []:
            self.create(p)

    # --- ProductRepository interface ------------------------------------------

    def create(self, product: Product) -> Product:
        if self.exists_by_sku(product.sku):
            raise AlreadyExistsError(product.sku)
        stored = copy.deepcopy(product)
        if stored.id is None:
            stored.id = self._next_id
        self._next_id = max(self._next_id, stored.id) + 1
        self._store[stored.id] = stored
        return copy.deepcopy(stored)

    def get_by_id(self, product_id: int) -> Product:
        try:
            return copy.deepcopy(self._store[product_id])
        except KeyError:
            raise ProductNotFoundError(f"Product #{product_id} not found") from None

    def get_by_sku(self, sku: str) -> Product:
        for p in self._store.values():
            if p.sku == sku:
                return copy.deepcopy(p)
        raise ProductNotFoundError(f"Product with SKU '{sku}' not found")

    def exists_by_sku(self, sku: str) -> bool:
        return any(p.sku == sku for p in self._store.values())

    def update(self, product: Product) -> Product:
        if product.id is None or product.id not in self._store:
            raise ProductNotFoundError(f"Product #{product.id} not found")
        for other in self._store.values():
            if other.sku == product.sku and other.id != product.id:
                raise AlreadyExistsError(product.sku)
        self._store[product.id] = copy.deepcopy(product)
        return copy.deepcopy(product)

    def list(self, limit: int, offset: int) -> list[Product]:
        ordered = sorted(self._store.values(), key=lambda p: p.id)
        return [copy.deepcopy(p) for p in ordered[offset:offset + limit]]

    def count(self) -> int:
        return len(self._store)
