"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from burgerbuilder.domain.exceptions import DomainException
from burgerbuilder.domain.model.catalog import Category
from burgerbuilder.infrastructure.bootstrap import order_session


@click.command("menu")
@click.option(
    "--category",
    type=click.Choice([c.value for c in Category]),
    default=None,
    help="Only show one category.",
)
def menu(category: str | None) -> None:
    """List everything that can be ordered."""
    try:
        session = order_session()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    entries = session.menu(Category(category) if category else None)
    if not entries:
        click.echo("No items found.")
        return

    click.echo(f"{'ID':<14} {'Name':<22} {'Category':<10} {'Price':>10}")
    click.echo("-" * 59)
    for e in entries:
        click.echo(f"{e.id:<14} {e.name:<22} {e.category:<10} {e.price:>10}")
