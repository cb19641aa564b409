"""Application service: Submit Order use case.

Formats the cart and hands the text to the message transport.  The text
is built in full before the hand-off, so later edits to the session
cannot change a message already in flight.
"""

from __future__ import annotations

import logging

from burgerbuilder.application.order_session import OrderSession
from burgerbuilder.domain.exceptions import ValidationError
from burgerbuilder.domain.port.message_transport import MessageTransport

logger = logging.getLogger(__name__)


class SubmitOrderHandler:

    def __init__(self, transport: MessageTransport, destination: str) -> None:
        self._transport = transport
        self._destination = destination

    def handle(
        self,
        session: OrderSession,
        customer_name: str,
        payment_preference: str | None = None,
    ) -> str:
        """Send the order and return the exact text that was sent."""
        if session.cart_is_empty:
            raise ValidationError("Cannot send an empty order")

        text = session.format_order(customer_name, payment_preference)
        logger.info(
            "Submitting order for %s (%s) to %s",
            customer_name.strip(), session.cart_total(), self._destination,
        )
        self._transport.send(self._destination, text)
        return text
