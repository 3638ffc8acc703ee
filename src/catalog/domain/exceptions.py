"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each class carries a stable ``code`` that outer layers map to exit codes or
response statuses.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    code = "DOMAIN_ERROR"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def __str__(self) -> str:
        if self.field:
            return f"{self.message} (field: {self.field})"
        return self.message


class ValidationError(DomainException):
    """A business rule or invariant was violated on a field value."""

    code = "VALIDATION_ERROR"


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    code = "NOT_FOUND"


class ProductNotFoundError(EntityNotFoundError):

    code = "PRODUCT_NOT_FOUND"

    def __init__(self, message: str = "Product not found") -> None:
        super().__init__(message)


class AlreadyExistsError(DomainException):
    """Another product already uses the same SKU."""

    code = "PRODUCT_ALREADY_EXISTS"

    def __init__(self, sku: str) -> None:
        super().__init__(f"Product with SKU '{sku}' already exists", field="sku")
        self.sku = sku


# --- Entity arithmetic preconditions -----------------------------------------


class InvalidQuantityError(DomainException):
    code = "INVALID_QUANTITY"


class InsufficientStockError(DomainException):
    code = "INSUFFICIENT_STOCK"


class InvalidPriceError(DomainException):
    code = "INVALID_PRICE"


# --- Wrapped persistence failures --------------------------------------------


class ProductOperationError(DomainException):
    """A persistence call failed for a reason the domain does not recognise.

    The original exception is always chained as ``__cause__`` so nothing
    is lost for debugging, but callers only ever see this stable kind.
    """

    code = "FAILED_TO_PROCESS_PRODUCT"
    summary = "failed to process product"

    def __init__(self, detail: str | None = None) -> None:
        message = f"{self.summary}: {detail}" if detail else self.summary
        super().__init__(message)


class ExistenceCheckFailedError(ProductOperationError):
    code = "FAILED_TO_CHECK_PRODUCT_EXISTENCE"
    summary = "failed to check product existence"


class CreateFailedError(ProductOperationError):
    code = "FAILED_TO_CREATE_PRODUCT"
    summary = "failed to create product"


class UpdateFailedError(ProductOperationError):
    code = "FAILED_TO_UPDATE_PRODUCT"
    summary = "failed to update product"


class LookupFailedError(ProductOperationError):
    code = "FAILED_TO_GET_PRODUCT"
    summary = "failed to get product"


class ListFailedError(ProductOperationError):
    code = "FAILED_TO_LIST_PRODUCTS"
    summary = "failed to list products"
