"""CLI commands for building and sending an order."""

from __future__ import annotations

import click

from burgerbuilder.application.order_session import OrderSession
from burgerbuilder.domain.exceptions import DomainException
from burgerbuilder.infrastructure.bootstrap import (
    message_transport,
    order_session,
    submit_order_handler,
)
from burgerbuilder.infrastructure.config import DEFAULT_BASE_ID, PAYMENT_OPTIONS


def _parse_addons(raw: str) -> list[str]:
    """Parse 'bacon,cheese,bacon' into a list of catalog ids."""
    return [part.strip() for part in raw.split(",") if part.strip()]


def _parse_drink(raw: str) -> tuple[str, int]:
    """Parse 'coke:2' (or just 'coke') into (id, quantity)."""
    if ":" not in raw:
        return raw.strip(), 1
    entry_id, qty_str = raw.rsplit(":", 1)
    try:
        qty = int(qty_str)
    except ValueError:
        raise click.BadParameter(
            f"Invalid quantity '{qty_str}' for drink '{entry_id}'."
        )
    return entry_id.strip(), qty


def _display_cart(session: OrderSession) -> None:
    click.echo(f"  {'Item':<34} {'Qty':>4} {'Total':>10}")
    click.echo(f"  {'-'*50}")
    for line in session.cart_lines():
        click.echo(f"  {line.name:<34} {line.quantity:>4} {line.line_total:>10}")
        if line.addons:
            click.echo(f"    + {', '.join(line.addons)}")
    click.echo(f"  {'-'*50}")
    click.echo(f"  {'Order Total':<39} {session.cart_total():>10}")


@click.command("order")
@click.option("--customer", required=True, help="Customer name.")
@click.option(
    "--payment",
    default="",
    help=f"Payment method, e.g. {', '.join(PAYMENT_OPTIONS)}.",
)
@click.option(
    "--burger",
    "burgers",
    multiple=True,
    help="One burger per flag, add-ons as 'bacon,cheese' ('' for plain).",
)
@click.option("--base", default=DEFAULT_BASE_ID, show_default=True, help="Base item for burgers.")
@click.option("--drink", "drinks", multiple=True, help="Drink as 'coke' or 'coke:2'.")
@click.option(
    "--send/--dry-run",
    default=False,
    help="Open WhatsApp with the order, or just print it (default).",
)
def order(
    customer: str,
    payment: str,
    burgers: tuple[str, ...],
    base: str,
    drinks: tuple[str, ...],
    send: bool,
) -> None:
    """Build an order and hand it to WhatsApp."""
    drink_specs = [_parse_drink(raw) for raw in drinks]

    try:
        session = order_session()
        for raw in burgers:
            session.start_composition(base)
            for addon in _parse_addons(raw):
                session.add_to_composition(addon)
            session.finalize_composition()
        for entry_id, qty in drink_specs:
            session.add_simple_to_cart(entry_id, qty)

        _display_cart(session)
        click.echo()

        handler = submit_order_handler(message_transport(dry_run=not send))
        handler.handle(session, customer, payment)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if send:
        click.echo("Order sent to WhatsApp.")
