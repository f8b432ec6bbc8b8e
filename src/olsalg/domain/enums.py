"""Enumerations used across the ølsalg domain."""

from __future__ import annotations

from enum import StrEnum


class TimestampStyle(StrEnum):
    """Discord inline timestamp styles.

    The value is the suffix Discord expects after the epoch seconds; the
    default style carries no suffix.
    """

    DEFAULT = ""  # 28 November 2018 09:01
    SHORT_TIME = "t"  # 09:01
    LONG_TIME = "T"  # 09:01:00
    SHORT_DATE = "d"  # 28/11/2018
    LONG_DATE = "D"  # 28 November 2018
    SHORT_DATE_TIME = "f"  # 28 November 2018 09:01
    LONG_DATE_TIME = "F"  # Wednesday, 28 November 2018 09:01
    RELATIVE_TIME = "R"  # 3 years ago
