"""Domain service: Order Formatter.

Turns a finalized cart plus customer metadata into the text that is
handed to the message transport.  The output depends only on the
arguments, so resending the same order yields byte-identical text.
"""

from __future__ import annotations

from dataclasses import dataclass

from burgerbuilder.domain.exceptions import MissingCustomerName
from burgerbuilder.domain.model.cart import Cart


@dataclass(frozen=True)
class OrderLabels:
    """Fixed strings of the order message."""

    header: str = "*Novo Pedido - Santto Hambúrguer*"
    customer: str = "*Cliente:*"
    items: str = "*Itens do Pedido:*"
    payment: str = "*Forma de Pagamento:*"
    total: str = "*Total:*"
    payment_fallback: str = "A combinar"
    addon_indent: str = "  + "


def format_order(
    cart: Cart,
    customer_name: str,
    payment_preference: str | None = None,
    labels: OrderLabels = OrderLabels(),
) -> str:
    """Render the order summary.

    Layout::

        header
        customer line
        <blank>
        items label
        - 2x Name (R$12.00)
          + Addon, Addon
        <blank>
        payment line
        total line
    """
    name = (customer_name or "").strip()
    if not name:
        raise MissingCustomerName("Customer name is required to send the order")

    out = [
        labels.header,
        f"{labels.customer} {name}",
        "",
        labels.items,
    ]
    for line in cart.lines:
        out.append(f"- {line.quantity}x {line.name} ({line.line_total})")
        if line.addons:
            names = ", ".join(s.entry.name for s in line.addons)
            out.append(f"{labels.addon_indent}{names}")

    payment = (payment_preference or "").strip() or labels.payment_fallback
    out.append("")
    out.append(f"{labels.payment} {payment}")
    out.append(f"{labels.total} {cart.total}")
    return "\n".join(out)
