"""Service container wiring application components."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from olsalg.config import AppSettings
from olsalg.messages import MessageComposer
from olsalg.notifications import DiscordWebhookNotifier, LogNotifier, Notifier
from olsalg.orchestration import DailyReminder
from olsalg.scheduling import ClosingTimeResolver, NorwegianHolidayCalendar

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates constructed services with shared configuration."""

    settings: AppSettings
    holiday_calendar: NorwegianHolidayCalendar
    closing_resolver: ClosingTimeResolver
    composer: MessageComposer
    notifier: Notifier
    reminder: DailyReminder


def build_notifier(settings: AppSettings) -> Notifier:
    if not settings.discord_webhook_url:
        logger.warning("DISCORD_WEBHOOK_URL is not set; messages will only be logged")
        return LogNotifier()
    return DiscordWebhookNotifier(
        settings.discord_webhook_url,
        timeout=settings.webhook_timeout,
    )


def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()
    holiday_calendar = NorwegianHolidayCalendar()
    closing_resolver = ClosingTimeResolver(holiday_calendar)
    composer = MessageComposer(closing_resolver)
    notifier = build_notifier(resolved_settings)
    reminder = DailyReminder(composer, notifier)

    return ServiceContainer(
        settings=resolved_settings,
        holiday_calendar=holiday_calendar,
        closing_resolver=closing_resolver,
        composer=composer,
        notifier=notifier,
        reminder=reminder,
    )


__all__ = ["ServiceContainer", "build_container", "build_notifier"]
