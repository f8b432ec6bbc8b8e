"""Value objects produced by the holiday calendar and closing-time resolver."""

from __future__ import annotations

from datetime import date, datetime, time, tzinfo

from .base import DomainModel


class ClosingDecision(DomainModel):
    """Either no sale for the day, or the time of day sales close."""

    closes_at: time | None = None

    @classmethod
    def no_sale(cls) -> ClosingDecision:
        return cls()

    @classmethod
    def closing_at(cls, hour: int, minute: int = 0) -> ClosingDecision:
        return cls(closes_at=time(hour, minute))

    @property
    def is_no_sale(self) -> bool:
        return self.closes_at is None

    @property
    def hour(self) -> int | None:
        return self.closes_at.hour if self.closes_at is not None else None

    @property
    def minute(self) -> int | None:
        return self.closes_at.minute if self.closes_at is not None else None

    def at(self, day: date, zone: tzinfo) -> datetime | None:
        """Return the closing instant on ``day`` in ``zone``, if sales happen."""

        if self.closes_at is None:
            return None
        return datetime.combine(day, self.closes_at, tzinfo=zone)

    def __str__(self) -> str:
        if self.closes_at is None:
            return "no sale"
        return self.closes_at.strftime("%H:%M")


class HolidayInfo(DomainModel):
    """Holiday name and sale-prohibition flag for one calendar date."""

    day: date
    name: str | None = None
    is_holiday: bool = False
