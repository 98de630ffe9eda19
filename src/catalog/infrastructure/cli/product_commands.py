"""CLI commands for the Product aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from catalog.application.dto import ProductDraft, ProductDTO, ProductEdit
from catalog.domain.exceptions import CollaboratorError, DomainException
from catalog.domain.model.uploaded_file import UploadedFile
from catalog.infrastructure.bootstrap import product_service


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product #{dto.id}")
    click.echo(f"  Name:     {dto.name}")
    click.echo(f"  Price:    {dto.price}")
    click.echo(f"  Category: {dto.category}")
    click.echo(f"  Image:    {dto.image or '-'}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    try:
        products = product_service().find_all()
    except CollaboratorError as exc:
        raise click.ClickException(f"Backend failure: {exc}")

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}  {'Category':<15}")
    click.echo("-" * 55)
    for p in map(ProductDTO.from_product, products):
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10}  {p.category:<15}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show details of a single product."""
    try:
        product = product_service().get(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except CollaboratorError as exc:
        raise click.ClickException(f"Backend failure: {exc}")

    _display_product(ProductDTO.from_product(product))


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 49.99).")
@click.option("--category", "category_id", required=True, type=int, help="Category ID.")
@click.option(
    "--image",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Image file to attach.",
)
def product_add(name: str, price: str, category_id: int, image: Path | None) -> None:
    """Add a new product to the catalog."""
    draft = ProductDraft(name=name, price=price, category_id=category_id)
    upload = UploadedFile(image.name, image.read_bytes()) if image else None

    try:
        product = product_service().create(draft, upload)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except CollaboratorError as exc:
        raise click.ClickException(f"Backend failure: {exc}")

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")
    if product.image:
        click.echo(f"Image: {product.image}")


@click.command("edit")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="New name.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def product_edit(product_id: int, name: str, price: str) -> None:
    """Change a product's name and price."""
    try:
        product = product_service().edit(product_id, ProductEdit(name=name, price=price))
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except CollaboratorError as exc:
        raise click.ClickException(f"Backend failure: {exc}")

    click.echo(f"Product #{product.id} updated: '{product.name}' at {product.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Remove a product from the catalog."""
    try:
        product_service().delete(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except CollaboratorError as exc:
        raise click.ClickException(f"Backend failure: {exc}")

    click.echo(f"Product #{product_id} deleted.")
