"""Notifier that only logs messages."""

from __future__ import annotations

import logging


class LogNotifier:
    """Writes messages to the log instead of delivering them."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self.sent: list[str] = []

    async def send(self, content: str) -> None:
        self.sent.append(content)
        self._logger.info("olsalg_message content=%r", content)


__all__ = ["LogNotifier"]
