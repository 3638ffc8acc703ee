"""Application service: List Products use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO, ProductListDTO
from catalog.application.port_calls import port_call
from catalog.domain.exceptions import ListFailedError
from catalog.domain.repository.product_repository import ProductRepository

# ---------------------------------------------------------------------------
# Pagination bounds
# ---------------------------------------------------------------------------
DEFAULT_PAGE = 0
DEFAULT_PAGE_SIZE = 10
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100


def normalize_paging(page: int | None, page_size: int | None) -> tuple[int, int]:
    """Replace out-of-range paging with the defaults.

    Pages are zero-based. A negative page falls back to ``DEFAULT_PAGE``
    and a page size outside ``[MIN_PAGE_SIZE, MAX_PAGE_SIZE]`` falls back
    to ``DEFAULT_PAGE_SIZE`` (it is not clamped to the nearest bound).
    """
    if page is None or page < 0:
        page = DEFAULT_PAGE
    if page_size is None or not MIN_PAGE_SIZE <= page_size <= MAX_PAGE_SIZE:
        page_size = DEFAULT_PAGE_SIZE
    return page, page_size


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        page: int | None = DEFAULT_PAGE,
        page_size: int | None = DEFAULT_PAGE_SIZE,
    ) -> ProductListDTO:
        page, page_size = normalize_paging(page, page_size)

        with port_call(ListFailedError):
            total = self._product_repo.count()
            products = self._product_repo.list(limit=page_size, offset=page * page_size)

        return ProductListDTO(
            products=[ProductDTO.from_product(p) for p in products],
            total=total,
            page=page,
            page_size=page_size,
        )
