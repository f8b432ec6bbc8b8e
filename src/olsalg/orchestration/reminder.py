"""Daily reminder run: compose today's message and deliver it."""

from __future__ import annotations

import logging
from datetime import datetime

from olsalg.messages import MessageComposer
from olsalg.notifications import Notifier
from olsalg.utils import ensure_oslo


class DailyReminder:
    """Performs one compose-and-send cycle for a supplied instant."""

    def __init__(
        self,
        composer: MessageComposer,
        notifier: Notifier,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._composer = composer
        self._notifier = notifier
        self._logger = logger or logging.getLogger(__name__)

    def preview(self, now: datetime) -> str:
        return self._composer.compose(ensure_oslo(now))

    async def run(self, now: datetime) -> str:
        """Compose the message for ``now`` and send it when non-empty.

        Delivery failures propagate as ``NotificationError``; nothing is retried.
        """

        local = ensure_oslo(now)
        message = self._composer.compose(local)
        if not message:
            self._logger.info("olsalg_reminder_skipped day=%s", local.date().isoformat())
            return message
        self._logger.info(
            "olsalg_reminder_send day=%s notifier=%s",
            local.date().isoformat(),
            self._notifier.__class__.__name__,
        )
        await self._notifier.send(message)
        return message


__all__ = ["DailyReminder"]
