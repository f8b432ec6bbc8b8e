"""Domain value objects and enumerations."""

from .base import DomainModel
from .decision import ClosingDecision, HolidayInfo
from .enums import TimestampStyle

__all__ = ["ClosingDecision", "DomainModel", "HolidayInfo", "TimestampStyle"]
