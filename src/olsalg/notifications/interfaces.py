"""Protocols for message delivery."""

from __future__ import annotations

from typing import Protocol


class Notifier(Protocol):
    """Contract implemented by delivery adapters."""

    async def send(self, content: str) -> None:
        """Deliver ``content`` or raise ``NotificationError``."""


__all__ = ["Notifier"]
