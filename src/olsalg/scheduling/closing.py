"""Closing-time rules for retail beer sales in Norway.

From https://www.oslo.kommune.no/skatt-og-naring/salg-servering-og-skjenking/salgstider-for-ol/

    Hverdager kl. 09:00-20:00
    Lørdager kl. 09:00-18:00
    Søndager og helligdager - ikke ølsalg
    Onsdag før skjærtorsdag kl. 09:00-18:00
    Påskeaften kl. 09:00-16:00
    Dagen før 1. mai - ordinære salgstider
    1. mai - ikke ølsalg
    Dagen før 17. mai - ordinære salgstider
    17. mai - ikke ølsalg
    Dagen før Kristi himmelfartsdag - ordinære salgstider
    Pinseaften kl. 09:00-16:00
    Julaften kl. 09:00-16:00 (ikke på søndager)
    Nyttårsaften kl. 09:00-18:00 (ikke på søndager)
    Valgdagen kl. 09:00-20:00 (ikke på søndager)
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date

from olsalg.domain import ClosingDecision

from .calendar import NorwegianHolidayCalendar

_SATURDAY = 6
_SUNDAY = 7

WEEKDAY_CLOSING = ClosingDecision.closing_at(20)
SATURDAY_CLOSING = ClosingDecision.closing_at(18)
NO_SALE = ClosingDecision.no_sale()


def ordinary_closing_time(target: date) -> ClosingDecision:
    """Weekday default ignoring every date-specific exception."""

    weekday = target.isoweekday()
    if weekday < _SATURDAY:
        return WEEKDAY_CLOSING
    if weekday == _SATURDAY:
        return SATURDAY_CLOSING
    return NO_SALE


def _fixed(decision: ClosingDecision) -> Callable[[date], ClosingDecision]:
    return lambda _target: decision


def _on(month: int, day: int) -> Callable[[date], bool]:
    return lambda target: target.month == month and target.day == day


def _on_unless_sunday(month: int, day: int) -> Callable[[date], bool]:
    return lambda target: _on(month, day)(target) and target.isoweekday() != _SUNDAY


def _is_weekday(target: date) -> bool:
    return target.isoweekday() < _SATURDAY


def _is_saturday(target: date) -> bool:
    return target.isoweekday() == _SATURDAY


@dataclass(frozen=True, slots=True)
class ClosingRule:
    """One entry of the prioritized rule list."""

    name: str
    applies: Callable[[date], bool]
    decide: Callable[[date], ClosingDecision]


class ClosingTimeResolver:
    """Resolve the closing time of a date by first-match over ordered rules."""

    def __init__(self, calendar: NorwegianHolidayCalendar | None = None) -> None:
        self._calendar = calendar or NorwegianHolidayCalendar()
        self._rules = self._build_rules()

    @property
    def calendar(self) -> NorwegianHolidayCalendar:
        return self._calendar

    @property
    def rules(self) -> Sequence[ClosingRule]:
        return self._rules

    def closing_time(self, target: date) -> ClosingDecision:
        return self.matching_rule(target).decide(target)

    def ordinary_closing_time(self, target: date) -> ClosingDecision:
        return ordinary_closing_time(target)

    def matching_rule(self, target: date) -> ClosingRule:
        for rule in self._rules:
            if rule.applies(target):
                return rule
        # The final rule always applies.
        raise AssertionError(f"No closing rule matched {target.isoformat()}")

    def _build_rules(self) -> tuple[ClosingRule, ...]:
        cal = self._calendar
        return (
            ClosingRule(
                "wednesday_before_maundy_thursday",
                cal.is_wednesday_before_maundy_thursday,
                _fixed(ClosingDecision.closing_at(18)),
            ),
            ClosingRule("easter_eve", cal.is_easter_eve, _fixed(ClosingDecision.closing_at(16))),
            ClosingRule("day_before_may_1", _on(4, 30), ordinary_closing_time),
            ClosingRule("may_1", _on(5, 1), _fixed(NO_SALE)),
            ClosingRule("day_before_may_17", _on(5, 16), ordinary_closing_time),
            ClosingRule("may_17", _on(5, 17), _fixed(NO_SALE)),
            ClosingRule("day_before_ascension", cal.is_day_before_ascension, ordinary_closing_time),
            ClosingRule(
                "pentecost_eve",
                cal.is_pentecost_eve,
                _fixed(ClosingDecision.closing_at(16)),
            ),
            ClosingRule(
                "christmas_eve",
                _on_unless_sunday(12, 24),
                _fixed(ClosingDecision.closing_at(16)),
            ),
            ClosingRule(
                "new_years_eve",
                _on_unless_sunday(12, 31),
                _fixed(ClosingDecision.closing_at(18)),
            ),
            # TODO: Valgdagen (election day, 20:00 unless Sunday) needs a source
            # of election dates; until then it falls through to the weekday rules.
            ClosingRule("weekday", _is_weekday, _fixed(WEEKDAY_CLOSING)),
            ClosingRule("saturday", _is_saturday, _fixed(SATURDAY_CLOSING)),
            ClosingRule(
                "sunday_or_holiday",
                lambda target: target.isoweekday() == _SUNDAY or cal.is_holiday(target),
                _fixed(NO_SALE),
            ),
            ClosingRule("fallback", lambda _target: True, _fixed(NO_SALE)),
        )


__all__ = [
    "ClosingRule",
    "ClosingTimeResolver",
    "NO_SALE",
    "SATURDAY_CLOSING",
    "WEEKDAY_CLOSING",
    "ordinary_closing_time",
]
