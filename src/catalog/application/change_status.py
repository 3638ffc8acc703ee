"""Application services: product lifecycle transitions.

Each transition is its own use case (activate, deactivate, discontinue).
Any status may be reached from any other; the handlers only load,
transition and persist.
"""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.application.port_calls import load_for_update, save_update
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class _StatusChangeHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO:
        product = load_for_update(self._product_repo, product_id)
        self._transition(product)
        updated = save_update(self._product_repo, product)
        return ProductDTO.from_product(updated)

    def _transition(self, product: Product) -> None:
        raise NotImplementedError


class ActivateProductHandler(_StatusChangeHandler):

    def _transition(self, product: Product) -> None:
        product.activate()


class DeactivateProductHandler(_StatusChangeHandler):

    def _transition(self, product: Product) -> None:
        product.deactivate()


class DiscontinueProductHandler(_StatusChangeHandler):

    def _transition(self, product: Product) -> None:
        product.discontinue()
