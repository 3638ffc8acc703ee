import click

from catalog.infrastructure.cli.product_commands import (
    product_activate,
    product_create,
    product_deactivate,
    product_discontinue,
    product_list,
    product_set_price,
    product_set_stock,
    product_show,
    product_update,
)
from catalog.infrastructure.config import get_settings
from catalog.infrastructure.logging_setup import configure_logging


@click.group()
def cli() -> None:
    """Catalog: product catalog management"""
    configure_logging(get_settings())


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_activate)
product.add_command(product_create)
product.add_command(product_deactivate)
product.add_command(product_discontinue)
product.add_command(product_list)
product.add_command(product_set_price)
product.add_command(product_set_stock)
product.add_command(product_show)
product.add_command(product_update)
