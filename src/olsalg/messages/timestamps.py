"""Discord inline timestamp formatting."""

from __future__ import annotations

import math
from datetime import datetime

from olsalg.domain import TimestampStyle
from olsalg.utils import ensure_oslo


def format_timestamp(instant: datetime, style: TimestampStyle = TimestampStyle.DEFAULT) -> str:
    """Render ``instant`` as ``<t:SECONDS>`` or ``<t:SECONDS:STYLE>``."""

    seconds = math.floor(ensure_oslo(instant).timestamp())
    if style == TimestampStyle.DEFAULT:
        return f"<t:{seconds}>"
    return f"<t:{seconds}:{style.value}>"


__all__ = ["format_timestamp"]
