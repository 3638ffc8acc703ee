"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from catalog.domain.exceptions import AlreadyExistsError, ProductNotFoundError
from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def create(self, product: Product) -> Product:
        records = self._load_raw()
        if any(raw["sku"] == product.sku for raw in records):
            raise AlreadyExistsError(product.sku)

        next_id = max((raw["id"] for raw in records), default=0) + 1
        raw = self._to_raw(product)
        raw["id"] = next_id
        records.append(raw)
        self._persist_raw(records)
        return self._to_domain(raw)

    def get_by_id(self, product_id: int) -> Product:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        raise ProductNotFoundError(f"Product #{product_id} not found")

    def get_by_sku(self, sku: str) -> Product:
        for raw in self._load_raw():
            if raw["sku"] == sku:
                return self._to_domain(raw)
        raise ProductNotFoundError(f"Product with SKU '{sku}' not found")

    def exists_by_sku(self, sku: str) -> bool:
        return any(raw["sku"] == sku for raw in self._load_raw())

    def update(self, product: Product) -> Product:
        records = self._load_raw()
        index = None
        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                index = i
            elif raw["sku"] == product.sku:
                raise AlreadyExistsError(product.sku)
        if index is None:
            raise ProductNotFoundError(f"Product #{product.id} not found")

        records[index] = self._to_raw(product)
        self._persist_raw(records)
        return self._to_domain(records[index])

    def list(self, limit: int, offset: int) -> list[Product]:
        records = sorted(self._load_raw(), key=lambda raw: raw["id"])
        return [self._to_domain(raw) for raw in records[offset:offset + limit]]

    def count(self) -> int:
        return len(self._load_raw())

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "sku": product.sku,
            "price": str(product.price.amount),
            "category": product.category,
            "brand": product.brand,
            "stock": product.stock,
            "status": product.status.value,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),  # type: ignore[union-attr]
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            sku=raw["sku"],
            price=Money(Decimal(raw["price"])),
            category=raw["category"],
            brand=raw.get("brand", ""),
            stock=raw.get("stock", 0),
            status=ProductStatus(raw.get("status", ProductStatus.ACTIVE.value)),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
