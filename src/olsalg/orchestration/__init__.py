"""Orchestration exports."""

from .reminder import DailyReminder

__all__ = ["DailyReminder"]
