"""Holiday calendar and closing-time rule exports."""

from .calendar import NorwegianHolidayCalendar
from .closing import ClosingRule, ClosingTimeResolver, ordinary_closing_time
from .easter import easter_sunday

__all__ = [
    "ClosingRule",
    "ClosingTimeResolver",
    "NorwegianHolidayCalendar",
    "easter_sunday",
    "ordinary_closing_time",
]
