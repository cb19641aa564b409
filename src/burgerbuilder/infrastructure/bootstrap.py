"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from burgerbuilder.application.order_session import OrderSession
from burgerbuilder.application.submit_order import SubmitOrderHandler
from burgerbuilder.domain.model.catalog import Catalog
from burgerbuilder.domain.port.catalog_provider import CatalogProvider
from burgerbuilder.domain.port.message_transport import MessageTransport
from burgerbuilder.domain.service.order_formatter import OrderLabels
from burgerbuilder.infrastructure import config
from burgerbuilder.infrastructure.messaging.console_transport import ConsoleTransport
from burgerbuilder.infrastructure.messaging.whatsapp_transport import WhatsAppTransport
from burgerbuilder.infrastructure.persistence.builtin_catalog_provider import (
    BuiltinCatalogProvider,
)
from burgerbuilder.infrastructure.persistence.json_catalog_provider import (
    JsonCatalogProvider,
)


def catalog_provider(path: Path | None = None) -> CatalogProvider:
    """JSON catalog if one exists, otherwise the built-in menu."""
    path = path or config.CATALOG_FILE
    if path.exists():
        return JsonCatalogProvider(path)
    return BuiltinCatalogProvider()


def order_labels() -> OrderLabels:
    return OrderLabels(header=f"*Novo Pedido - {config.STORE_NAME}*")


def order_session(catalog: Catalog | None = None) -> OrderSession:
    if catalog is None:
        catalog = catalog_provider().load()
    return OrderSession(catalog, labels=order_labels())


def message_transport(dry_run: bool = False) -> MessageTransport:
    return ConsoleTransport() if dry_run else WhatsAppTransport()


def submit_order_handler(transport: MessageTransport) -> SubmitOrderHandler:
    return SubmitOrderHandler(transport, config.ORDER_DESTINATION)
