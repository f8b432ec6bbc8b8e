"""Shared helpers."""

from .time import OSLO, ensure_oslo, oslo_now

__all__ = ["OSLO", "ensure_oslo", "oslo_now"]
