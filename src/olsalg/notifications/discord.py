"""Discord webhook delivery."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from .exceptions import NotificationError

logger = logging.getLogger(__name__)


class DiscordWebhookNotifier:
    """POSTs a message as ``{"content": ...}`` to a Discord webhook, once."""

    def __init__(
        self,
        url: str,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        if not url:
            msg = "DISCORD_WEBHOOK_URL is not configured"
            raise NotificationError(msg)
        self._url = url
        self._client = client
        self._timeout = timeout

    async def send(self, content: str) -> None:
        async with self._client_scope() as client:
            try:
                response = await client.post(self._url, json={"content": content})
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                msg = (
                    "Failed to send Discord message: "
                    f"{exc.response.status_code} {exc.response.reason_phrase}"
                )
                raise NotificationError(msg) from exc
            except httpx.HTTPError as exc:
                msg = "Failed to send Discord message"
                raise NotificationError(msg) from exc
        logger.info("discord_webhook_sent status=%s", response.status_code)

    @asynccontextmanager
    async def _client_scope(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            yield client


__all__ = ["DiscordWebhookNotifier"]
