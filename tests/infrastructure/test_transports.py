"""Tests for the message transports."""

from urllib.parse import parse_qs, urlparse

from burgerbuilder.infrastructure.messaging.console_transport import ConsoleTransport
from burgerbuilder.infrastructure.messaging.whatsapp_transport import (
    WhatsAppTransport,
    build_whatsapp_url,
)


class TestWhatsAppUrl:

    def test_encodes_text_and_destination(self):
        url = build_whatsapp_url("+55 (91) 98449-7134", "*Cliente:* Maria\nR$29.00")
        parsed = urlparse(url)

        assert parsed.netloc == "wa.me"
        assert parsed.path == "/5591984497134"
        assert parse_qs(parsed.query)["text"] == ["*Cliente:* Maria\nR$29.00"]

    def test_non_ascii_survives(self):
        url = build_whatsapp_url("55", "Hambúrguer & Guaraná")
        assert " " not in url
        assert parse_qs(urlparse(url).query)["text"] == ["Hambúrguer & Guaraná"]


class TestWhatsAppTransport:

    def test_launches_url(self):
        launched = []
        transport = WhatsAppTransport(launcher=launched.append)

        transport.send("5591984497134", "oi")

        assert launched == ["https://wa.me/5591984497134?text=oi"]


class TestConsoleTransport:

    def test_echoes_message(self, capsys):
        ConsoleTransport().send("5591984497134", "*Total:* R$6.00")
        out = capsys.readouterr().out
        assert "To: 5591984497134" in out
        assert "*Total:* R$6.00" in out
