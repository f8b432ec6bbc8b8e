"""Custom exceptions for message delivery."""

from __future__ import annotations


class NotificationError(RuntimeError):
    """Raised when a notifier fails to deliver a message."""


__all__ = ["NotificationError"]
