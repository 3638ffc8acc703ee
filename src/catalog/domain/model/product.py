"""Product aggregate.

Products are the only aggregate of the catalog. They own their
invariants: every mutation goes through a named method that validates
its input first and leaves the product untouched when it fails.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum

from catalog.domain.exceptions import (
    InsufficientStockError,
    InvalidPriceError,
    InvalidQuantityError,
    ValidationError,
)
from catalog.domain.model.value_objects import Money


class ProductStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    DISCONTINUED = "discontinued"


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 255
SKU_MIN_LENGTH = 3
SKU_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 1000
CATEGORY_MAX_LENGTH = 100
BRAND_MAX_LENGTH = 100

_TICK = timedelta(microseconds=1)


def _now() -> datetime:
    return datetime.now(timezone.utc)


# --- Field validators ---------------------------------------------------------
# Each returns the normalized value or raises ValidationError for its field.


def validate_name(name: str) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("product name is required", field="name")
    if len(name) < NAME_MIN_LENGTH:
        raise ValidationError(
            f"product name must be at least {NAME_MIN_LENGTH} characters long",
            field="name",
        )
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(
            f"product name must be at most {NAME_MAX_LENGTH} characters long",
            field="name",
        )
    return name


def validate_sku(sku: str) -> str:
    """Check the SKU shape and return it trimmed and upper-cased."""
    sku = (sku or "").strip()
    if not sku:
        raise ValidationError("SKU is required", field="sku")
    if len(sku) < SKU_MIN_LENGTH:
        raise ValidationError(
            f"SKU must be at least {SKU_MIN_LENGTH} characters long", field="sku"
        )
    if len(sku) > SKU_MAX_LENGTH:
        raise ValidationError(
            f"SKU must be at most {SKU_MAX_LENGTH} characters long", field="sku"
        )
    return sku.upper()


def validate_price(price: str | float | int | Decimal | Money) -> Money:
    if isinstance(price, Money):
        return price
    try:
        return Money.of(price)
    except InvalidPriceError as exc:
        raise ValidationError(exc.message, field="price") from exc


def validate_stock(stock: int) -> int:
    if not isinstance(stock, int) or isinstance(stock, bool):
        raise ValidationError("stock must be an integer", field="stock")
    if stock < 0:
        raise ValidationError("stock cannot be negative", field="stock")
    return stock


def validate_category(category: str) -> str:
    category = (category or "").strip()
    if not category:
        raise ValidationError("category is required", field="category")
    if len(category) > CATEGORY_MAX_LENGTH:
        raise ValidationError(
            f"category must be at most {CATEGORY_MAX_LENGTH} characters long",
            field="category",
        )
    return category


def _validate_optional_text(value: str | None, field_name: str, max_length: int) -> str:
    value = (value or "").strip()
    if len(value) > max_length:
        raise ValidationError(
            f"{field_name} must be at most {max_length} characters long",
            field=field_name,
        )
    return value


def validate_description(description: str | None) -> str:
    return _validate_optional_text(description, "description", DESCRIPTION_MAX_LENGTH)


def validate_brand(brand: str | None) -> str:
    return _validate_optional_text(brand, "brand", BRAND_MAX_LENGTH)


@dataclass
class Product:
    """A product in the catalog.

    Use the ``Product.create()`` factory for new products; it enforces
    all business rules. The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted products without re-validating.

    Invariants:
    - ``stock`` is never negative
    - ``price`` stays within ``[0, 999999.99]``
    - ``updated_at`` strictly increases on every successful mutation
    """

    id: int | None
    name: str
    sku: str
    price: Money
    category: str
    description: str = ""
    brand: str = ""
    stock: int = 0
    status: ProductStatus = ProductStatus.ACTIVE
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.created_at

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        description: str | None,
        sku: str,
        category: str,
        brand: str | None,
        price: str | float | int | Decimal | Money,
        stock: int,
    ) -> Product:
        """Create a new, active product.

        Fields are checked in a fixed order (name, sku, price, stock,
        category, then the optional description and brand) so the same
        bad input always reports the same field.
        """
        clean_name = validate_name(name)
        clean_sku = validate_sku(sku)
        clean_price = validate_price(price)
        clean_stock = validate_stock(stock)
        clean_category = validate_category(category)
        clean_description = validate_description(description)
        clean_brand = validate_brand(brand)

        now = _now()
        return Product(
            id=None,
            name=clean_name,
            sku=clean_sku,
            price=clean_price,
            category=clean_category,
            description=clean_description,
            brand=clean_brand,
            stock=clean_stock,
            status=ProductStatus.ACTIVE,
            created_at=now,
            updated_at=now,
        )

    # --- Predicates -----------------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self.status == ProductStatus.ACTIVE

    @property
    def is_in_stock(self) -> bool:
        return self.stock > 0

    @property
    def is_available(self) -> bool:
        """Active and in stock, i.e. can be sold right now."""
        return self.is_active and self.is_in_stock

    # --- State transitions ----------------------------------------------------

    def activate(self) -> None:
        self._set_status(ProductStatus.ACTIVE)

    def deactivate(self) -> None:
        self._set_status(ProductStatus.INACTIVE)

    def discontinue(self) -> None:
        self._set_status(ProductStatus.DISCONTINUED)

    # --- Stock ----------------------------------------------------------------

    def update_stock(self, quantity: int) -> None:
        """Replace the stock level outright."""
        self._check_quantity(quantity)
        if quantity < 0:
            raise InvalidQuantityError("stock quantity cannot be negative", field="stock")
        self.stock = quantity
        self._touch()

    def reduce_stock(self, quantity: int) -> None:
        self._check_quantity(quantity)
        if quantity <= 0:
            raise InvalidQuantityError("reduction quantity must be positive", field="stock")
        if quantity > self.stock:
            raise InsufficientStockError(
                f"insufficient stock for {self.sku} "
                f"(need {quantity}, have {self.stock})",
                field="stock",
            )
        self.stock -= quantity
        self._touch()

    def add_stock(self, quantity: int) -> None:
        self._check_quantity(quantity)
        if quantity <= 0:
            raise InvalidQuantityError("addition quantity must be positive", field="stock")
        self.stock += quantity
        self._touch()

    # --- Price ----------------------------------------------------------------

    def update_price(self, new_price: str | float | int | Decimal | Money) -> None:
        """Change the product price.

        The upper bound applies here as well as at creation, so a product
        can never hold a price the factory would have rejected.
        """
        if not isinstance(new_price, Money):
            new_price = Money.of(new_price)
        self.price = new_price
        self._touch()

    # --- Descriptive fields ---------------------------------------------------

    def update_details(
        self,
        name: str | None = None,
        description: str | None = None,
        category: str | None = None,
        brand: str | None = None,
    ) -> None:
        """Overwrite the supplied descriptive fields.

        ``None`` means "leave as is". Everything is validated before
        anything is assigned.
        """
        changes: dict[str, str] = {}
        if name is not None:
            changes["name"] = validate_name(name)
        if description is not None:
            changes["description"] = validate_description(description)
        if category is not None:
            changes["category"] = validate_category(category)
        if brand is not None:
            changes["brand"] = validate_brand(brand)

        if not changes:
            return
        for attr, value in changes.items():
            setattr(self, attr, value)
        self._touch()

    # --- Internal helpers -----------------------------------------------------

    def _set_status(self, status: ProductStatus) -> None:
        self.status = status
        self._touch()

    def _touch(self) -> None:
        now = _now()
        previous = self.updated_at or self.created_at
        if now <= previous:
            now = previous + _TICK
        self.updated_at = now

    @staticmethod
    def _check_quantity(quantity: int) -> None:
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise InvalidQuantityError(
                f"quantity must be an integer, got {type(quantity).__name__}",
                field="stock",
            )
