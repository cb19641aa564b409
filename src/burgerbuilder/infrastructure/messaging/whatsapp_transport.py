"""Transport that opens a pre-filled WhatsApp chat with the order."""

from __future__ import annotations

import logging
from typing import Callable
from urllib.parse import quote

import click

from burgerbuilder.domain.port.message_transport import MessageTransport
from burgerbuilder.infrastructure.config import WHATSAPP_URL

logger = logging.getLogger(__name__)


def build_whatsapp_url(destination: str, text: str) -> str:
    digits = "".join(ch for ch in destination if ch.isdigit())
    return WHATSAPP_URL.format(destination=digits, text=quote(text, safe=""))


class WhatsAppTransport(MessageTransport):

    def __init__(self, launcher: Callable[[str], object] = click.launch) -> None:
        self._launch = launcher

    def send(self, destination: str, text: str) -> None:
        url = build_whatsapp_url(destination, text)
        logger.info("Opening WhatsApp compose for %s", destination)
        self._launch(url)
