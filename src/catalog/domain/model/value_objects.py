"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from catalog.domain.exceptions import InvalidPriceError

MAX_PRICE = Decimal("999999.99")
CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Monetary amount in the catalog currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations. The bounds are the catalog
    price bounds: ``0 <= amount <= MAX_PRICE``, in whole cents.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidPriceError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidPriceError(f"Price must be a finite number, got {self.amount}")
        if self.amount < Decimal("0"):
            raise InvalidPriceError("price cannot be negative")
        if self.amount > MAX_PRICE:
            raise InvalidPriceError("price cannot exceed 999,999.99")
        if self.amount != self.amount.quantize(CENT):
            raise InvalidPriceError("price cannot have more than 2 decimal places")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:,.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise InvalidPriceError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidPriceError(f"Invalid money amount: {amount!r}") from exc
