"""CLI commands for categories."""

from __future__ import annotations

import click

from catalog.domain.exceptions import CollaboratorError, DomainException
from catalog.infrastructure.bootstrap import category_service


@click.command("add")
@click.option("--name", required=True, help="Category name.")
def category_add(name: str) -> None:
    """Register a new category."""
    try:
        category = category_service().add(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except CollaboratorError as exc:
        raise click.ClickException(f"Backend failure: {exc}")

    click.echo(f"Category #{category.id} '{category.name}' added")


@click.command("list")
def category_list() -> None:
    """List all categories."""
    try:
        categories = category_service().find_all()
    except CollaboratorError as exc:
        raise click.ClickException(f"Backend failure: {exc}")

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20}")
    click.echo("-" * 27)
    for c in categories:
        click.echo(f"{c.id:<6} {c.name:<20}")
