"""Message composition exports."""

from .composer import MessageComposer
from .timestamps import format_timestamp

__all__ = ["MessageComposer", "format_timestamp"]
