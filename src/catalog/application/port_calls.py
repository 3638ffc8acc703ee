"""Helpers shared by the use cases for talking to the repository.

Repository failures the domain understands (not found, duplicate SKU)
pass through untouched; any other exception is wrapped into the
operation's failure kind so callers never see storage-engine errors.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from catalog.domain.exceptions import (
    DomainException,
    ProductOperationError,
    UpdateFailedError,
)
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


@contextmanager
def port_call(failure: type[ProductOperationError]) -> Iterator[None]:
    try:
        yield
    except DomainException:
        raise
    except Exception as exc:
        raise failure(str(exc) or type(exc).__name__) from exc


def load_for_update(repo: ProductRepository, product_id: int) -> Product:
    with port_call(UpdateFailedError):
        return repo.get_by_id(product_id)


def save_update(repo: ProductRepository, product: Product) -> Product:
    with port_call(UpdateFailedError):
        return repo.update(product)
