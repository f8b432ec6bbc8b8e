"""Norwegian holiday calendar anchored on Easter Sunday."""

from __future__ import annotations

from datetime import date, timedelta
from functools import lru_cache

from olsalg.domain import HolidayInfo

from .easter import easter_sunday

_SUNDAY = 7


class NorwegianHolidayCalendar:
    """Holiday flags and Norwegian day names derived from one Easter anchor per year.

    The set of named days and the set of holidays overlap but are not equal:
    Julaften and Nyttårsaften carry names without being holidays, while every
    Sunday is a holiday without carrying a name.
    """

    def easter_sunday(self, year: int) -> date:
        return _cached_easter(year)

    def ascension_day(self, year: int) -> date:
        return self.easter_sunday(year) + timedelta(days=39)

    def pentecost_sunday(self, year: int) -> date:
        return self.easter_sunday(year) + timedelta(days=49)

    def is_wednesday_before_maundy_thursday(self, target: date) -> bool:
        return target == self.easter_sunday(target.year) - timedelta(days=4)

    def is_easter_eve(self, target: date) -> bool:
        return target == self.easter_sunday(target.year) - timedelta(days=1)

    def is_day_before_ascension(self, target: date) -> bool:
        return target == self.ascension_day(target.year) - timedelta(days=1)

    def is_pentecost_eve(self, target: date) -> bool:
        return target == self.pentecost_sunday(target.year) - timedelta(days=1)

    def is_holiday(self, target: date) -> bool:
        """Return True for public holidays and Sundays."""

        if target.isoweekday() == _SUNDAY:
            return True
        return target in self._holidays(target.year)

    def holiday_name(self, target: date) -> str | None:
        for day, name in self._named_days_by_priority(target.year):
            if day == target:
                return name
        return None

    def info(self, target: date) -> HolidayInfo:
        return HolidayInfo(
            day=target,
            name=self.holiday_name(target),
            is_holiday=self.is_holiday(target),
        )

    def named_days(self, year: int) -> list[tuple[date, str]]:
        """Return every named day of ``year`` in calendar order."""

        seen: dict[date, str] = {}
        for day, name in self._named_days_by_priority(year):
            seen.setdefault(day, name)
        return sorted(seen.items())

    def _holidays(self, year: int) -> frozenset[date]:
        easter = self.easter_sunday(year)
        return frozenset(
            {
                date(year, 1, 1),  # Nyttårsdag
                easter - timedelta(days=3),  # Skjærtorsdag
                easter - timedelta(days=2),  # Langfredag
                easter,  # 1. påskedag
                easter + timedelta(days=1),  # 2. påskedag
                date(year, 5, 1),  # Arbeidernes dag
                date(year, 5, 17),  # Grunnlovsdag
                easter + timedelta(days=39),  # Kristi himmelfartsdag
                easter + timedelta(days=49),  # 1. pinsedag
                easter + timedelta(days=50),  # 2. pinsedag
                date(year, 12, 25),  # 1. juledag
                date(year, 12, 26),  # 2. juledag
            }
        )

    def _named_days_by_priority(self, year: int) -> tuple[tuple[date, str], ...]:
        # Moveable feasts can land on 1 and 17 May; the fixed names win there.
        easter = self.easter_sunday(year)
        return (
            (date(year, 1, 1), "1. Nyttårsdag"),
            (easter - timedelta(days=4), "Onsdag før skjærtorsdag"),
            (easter - timedelta(days=3), "Skjærtorsdag"),
            (easter - timedelta(days=2), "Langfredag"),
            (easter - timedelta(days=1), "Påskeaften"),
            (easter, "1. påskedag"),
            (easter + timedelta(days=1), "2. påskedag"),
            (date(year, 5, 1), "Arbeidernes dag"),
            (date(year, 5, 17), "Grunnlovsdag"),
            (easter + timedelta(days=39), "Kristi himmelfartsdag"),
            (easter + timedelta(days=48), "Pinseaften"),
            (easter + timedelta(days=49), "1. pinsedag"),
            (easter + timedelta(days=50), "2. pinsedag"),
            (date(year, 12, 24), "Julaften"),
            (date(year, 12, 25), "1. juledag"),
            (date(year, 12, 26), "2. juledag"),
            (date(year, 12, 31), "Nyttårsaften"),
        )


@lru_cache(maxsize=64)
def _cached_easter(year: int) -> date:
    return easter_sunday(year)


__all__ = ["NorwegianHolidayCalendar"]
