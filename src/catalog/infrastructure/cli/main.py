import click

from catalog.infrastructure.cli.category_commands import category_add, category_list
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_edit,
    product_list,
    product_show,
)
from catalog.infrastructure.config import get_settings
from catalog.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """Catalog: products and categories"""
    configure_logging(get_settings())


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def category() -> None:
    """Manage categories."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_edit)
product.add_command(product_list)
product.add_command(product_show)
category.add_command(category_add)
category.add_command(category_list)
