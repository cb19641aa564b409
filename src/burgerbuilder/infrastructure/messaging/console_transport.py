"""Transport that prints the order instead of sending it (dry run)."""

from __future__ import annotations

import click

from burgerbuilder.domain.port.message_transport import MessageTransport


class ConsoleTransport(MessageTransport):

    def send(self, destination: str, text: str) -> None:
        click.echo(f"To: {destination}")
        click.echo(text)
