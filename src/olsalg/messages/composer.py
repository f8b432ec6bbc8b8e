"""Compose the daily ølsalg status message."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from olsalg.domain import TimestampStyle
from olsalg.scheduling import ClosingTimeResolver
from olsalg.utils import OSLO, ensure_oslo

from .timestamps import format_timestamp

SUNDAY_LABEL = "Søndag"
ATTENTION = "**NB!⚠️**"
BROADCAST = "@everyone"


class MessageComposer:
    """Turns closing decisions for today and tomorrow into Discord text."""

    def __init__(self, resolver: ClosingTimeResolver | None = None) -> None:
        self._resolver = resolver or ClosingTimeResolver()
        self._calendar = self._resolver.calendar

    def compose(self, now: datetime) -> str:
        """Status line for the day of ``now`` plus an optional warning for tomorrow."""

        today = ensure_oslo(now).date()
        message = self.today_line(today)
        if today == date.max:
            return message
        warning = self.tomorrow_warning(today + timedelta(days=1))
        if warning:
            message += "\n" + warning
        return message

    def today_line(self, today: date) -> str:
        closing = self._resolver.closing_time(today)
        instant = closing.at(today, OSLO)
        if instant is None:
            return f"Det er ikke ølsalg i dag ({self._day_label(today)})"
        return (
            f"Ølsalget stenger kl. {format_timestamp(instant, TimestampStyle.SHORT_TIME)}! "
            f"({format_timestamp(instant, TimestampStyle.RELATIVE_TIME)})"
        )

    def tomorrow_warning(self, tomorrow: date) -> str | None:
        if self.is_regular_day(tomorrow):
            return None

        instant = self._resolver.closing_time(tomorrow).at(tomorrow, OSLO)
        if instant is not None:
            return (
                f"{BROADCAST} {ATTENTION} I morgen stenger ølsalget kl. "
                f"{format_timestamp(instant, TimestampStyle.SHORT_TIME)} "
                f"({self._day_label(tomorrow)})"
            )

        # A plain Sunday has no name and needs no warning.
        name = self._calendar.holiday_name(tomorrow)
        if name:
            return f"{ATTENTION} Det er ikke ølsalg i morgen ({name})"
        return None

    def is_regular_day(self, target: date) -> bool:
        """True when both the resolved and the ordinary closing hour exist and agree."""

        closing_hour = self._resolver.closing_time(target).hour
        ordinary_hour = self._resolver.ordinary_closing_time(target).hour
        if closing_hour is None or ordinary_hour is None:
            return False
        return closing_hour == ordinary_hour

    def message_for(self, moment: datetime) -> str | None:
        """Closed notice or a one-hour warning for ``moment``, else None."""

        local = ensure_oslo(moment)
        day = local.date()
        if self._calendar.is_holiday(day):
            return f"Det er ikke ølsalg {day:%d.%m} ({self._day_label(day)})"

        closing = self._resolver.closing_time(day).at(day, OSLO)
        if closing is None:
            return None

        warning = closing - timedelta(hours=1)
        if local.hour != warning.hour:
            return None
        return f"Ølsalget stenger om en time! (kl. {closing:%H:%M})"

    def _day_label(self, target: date) -> str:
        return self._calendar.holiday_name(target) or SUNDAY_LABEL


__all__ = ["MessageComposer"]
