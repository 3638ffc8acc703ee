"""CLI commands for the Product aggregate."""

from __future__ import annotations

import json

import click
import structlog

from catalog.application.change_status import (
    ActivateProductHandler,
    DeactivateProductHandler,
    DiscontinueProductHandler,
)
from catalog.application.create_product import CreateProductHandler
from catalog.application.dto import (
    CreateProductRequest,
    ProductChanges,
    ProductDTO,
    ProductListDTO,
)
from catalog.application.list_products import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    ListProductsHandler,
)
from catalog.application.show_product import GetProductByIdHandler, GetProductBySkuHandler
from catalog.application.update_product import (
    UpdateProductHandler,
    UpdateProductPriceHandler,
    UpdateProductStockHandler,
)
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_repository

logger = structlog.get_logger(__name__)

json_option = click.option(
    "--json", "as_json", is_flag=True, default=False, help="Print the product as JSON."
)


def _fail(command: str, exc: DomainException) -> click.ClickException:
    logger.warning("product.command_failed", command=command, code=exc.code, error=str(exc))
    return click.ClickException(f"{exc.code}: {exc}")


def _display_product(dto: ProductDTO, as_json: bool) -> None:
    """Shared formatting for displaying a single product."""
    if as_json:
        click.echo(json.dumps(dto.to_dict(), indent=2))
        return

    click.echo(f"Product #{dto.id}  {dto.sku}  (status={dto.status})")
    click.echo(f"Name:      {dto.name}")
    if dto.description:
        click.echo(f"About:     {dto.description}")
    click.echo(f"Category:  {dto.category}")
    if dto.brand:
        click.echo(f"Brand:     {dto.brand}")
    click.echo(f"Price:     {dto.display_price}")
    click.echo(f"Stock:     {dto.stock}")
    click.echo(f"Available: {'yes' if dto.is_available else 'no'}")
    click.echo(f"Updated:   {dto.updated_at.strftime('%Y-%m-%d %H:%M UTC')}")


def _display_list(page: ProductListDTO, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(page.to_dict(), indent=2))
        return

    if not page.products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'SKU':<16} {'Name':<24} {'Price':>12} {'Stock':>7} {'Status':<12}")
    click.echo("-" * 82)
    for p in page.products:
                click.echo(
            f"{p.id:<6} {p.sku:<16} {p.name:<24} {p.display_price:>12} {p.stock:>7} {p.status:<12}"
        )
    click.echo(f"Page {page.page} ({page.page_size} per page), {page.total} products total")


@click.command("create")
@click.option("--name", required=True, help="Product name.")
@click.option("--sku", required=True, help="Stock keeping unit (unique).")
@click.option("--price", required=True, help="Price (e.g. 999.99).")
@click.option("--category", required=True, help="Category.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--brand", default="", help="Brand.")
@click.option("--stock", default=0, type=int, help="Units in stock.")
@json_option
def product_create(
    name: str,
    sku: str,
    price: str,
    category: str,
    description: str,
    brand: str,
    stock: int,
    as_json: bool,
) -> None:
    """Add a new product to the catalog."""
    handler = CreateProductHandler(product_repo=product_repository())
    request = CreateProductRequest(
        name=name,
        sku=sku,
        price=price,
        category=category,
        description=description,
        brand=brand,
        stock=stock,
    )

    try:
        dto = handler.handle(request)
    except DomainException as exc:
        raise _fail("create", exc)

    logger.info("product.created", product_id=dto.id, sku=dto.sku)
    if as_json:
        _display_product(dto, as_json=True)
    else:
        click.echo(f"Product #{dto.id} '{dto.name}' ({dto.sku}) added at {dto.display_price}")


@click.command("show")
@click.option("--id", "product_id", type=int, default=None, help="Product ID.")
@click.option("--sku", default=None, help="Product SKU.")
@json_option
def product_show(product_id: int | None, sku: str | None, as_json: bool) -> None:
    """Show a product by ID or by SKU."""
    if (product_id is None) == (sku is None):
        raise click.UsageError("Pass exactly one of --id or --sku.")

    repo = product_repository()
    try:
        if product_id is not None:
            dto = GetProductByIdHandler(repo).handle(product_id)
        else:
            dto = GetProductBySkuHandler(repo).handle(sku)  # type: ignore[arg-type]
    except DomainException as exc:
        raise _fail("show", exc)

    _display_product(dto, as_json)


@click.command("list")
@click.option("--page", default=DEFAULT_PAGE, type=int, help="Zero-based page number.")
@click.option("--page-size", default=DEFAULT_PAGE_SIZE, type=int, help="Products per page (1-100).")
@json_option
def product_list(page: int, page_size: int, as_json: bool) -> None:
    """List the products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository())

    try:
        result = handler.handle(page=page, page_size=page_size)
    except DomainException as exc:
        raise _fail("list", exc)

    _display_list(result, as_json)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--category", default=None, help="New category.")
@click.option("--brand", default=None, help="New brand.")
@click.option("--price", default=None, help="New price.")
@click.option("--stock", default=None, type=int, help="New stock level.")
@json_option
def product_update(
    product_id: int,
    name: str | None,
    description: str | None,
    category: str | None,
    brand: str | None,
    price: str | None,
    stock: int | None,
    as_json: bool,
) -> None:
    """Update any subset of a product's fields."""
    changes = ProductChanges(
        name=name,
        description=description,
        category=category,
        brand=brand,
        price=price,
        stock=stock,
    )
    if changes.is_empty:
        raise click.UsageError("Nothing to update; pass at least one field option.")

    handler = UpdateProductHandler(product_repo=product_repository())
    try:
        dto = handler.handle(product_id, changes)
    except DomainException as exc:
        raise _fail("update", exc)

    logger.info("product.updated", product_id=product_id)
    _display_product(dto, as_json)


@click.command("set-stock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--stock", required=True, type=int, help="New stock level.")
@json_option
def product_set_stock(product_id: int, stock: int, as_json: bool) -> None:
    """Replace a product's stock level."""
    handler = UpdateProductStockHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id, stock)
    except DomainException as exc:
        raise _fail("set-stock", exc)

    if as_json:
        _display_product(dto, as_json=True)
    else:
        click.echo(f"Product #{product_id} stock set to {dto.stock}")


@click.command("set-price")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@json_option
def product_set_price(product_id: int, price: str, as_json: bool) -> None:
    """Change a product's price."""
    handler = UpdateProductPriceHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id, price)
    except DomainException as exc:
        raise _fail("set-price", exc)

    if as_json:
        _display_product(dto, as_json=True)
    else:
        click.echo(f"Product #{product_id} price updated to {dto.display_price}")


def _status_command(name: str, handler_cls, past_tense: str, help_text: str) -> click.Command:
    @click.command(name, help=help_text)
    @click.option("--id", "product_id", required=True, type=int, help="Product ID.")
    @json_option
    def command(product_id: int, as_json: bool) -> None:
        handler = handler_cls(product_repo=product_repository())
        try:
            dto = handler.handle(product_id)
        except DomainException as exc:
            raise _fail(name, exc)

        logger.info("product.status_changed", product_id=product_id, status=dto.status)
        if as_json:
            _display_product(dto, as_json=True)
        else:
            click.echo(f"Product #{product_id} {past_tense}.")

    return command


product_activate = _status_command(
    "activate", ActivateProductHandler, "activated", "Mark a product as active."
)
product_deactivate = _status_command(
    "deactivate", DeactivateProductHandler, "deactivated", "Take a product off sale."
)
product_discontinue = _status_command(
    "discontinue", DiscontinueProductHandler, "discontinued", "Retire a product for good."
)
