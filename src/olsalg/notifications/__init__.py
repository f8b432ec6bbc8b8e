"""Notification subsystem exports."""

from .discord import DiscordWebhookNotifier
from .exceptions import NotificationError
from .interfaces import Notifier
from .log import LogNotifier

__all__ = [
    "DiscordWebhookNotifier",
    "LogNotifier",
    "NotificationError",
    "Notifier",
]
