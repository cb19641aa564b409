"""Abstract hand-off point for a finished order message."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MessageTransport(ABC):

    @abstractmethod
    def send(self, destination: str, text: str) -> None:
        """Dispatch *text* to *destination*.

        Fire-and-forget: delivery success is not reported back.
        """
