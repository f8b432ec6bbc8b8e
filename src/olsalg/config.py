"""Lightweight application configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_log_level(name: str, default: str) -> str:
    raw = (os.getenv(name) or "").strip().upper()
    if raw in logging.getLevelNamesMapping():
        return raw
    return default


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    discord_webhook_url: str | None = None
    webhook_timeout: float = 10.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("OLSALG_ENV", cls.environment),
            discord_webhook_url=(os.getenv("DISCORD_WEBHOOK_URL") or "").strip() or None,
            webhook_timeout=_env_float("OLSALG_WEBHOOK_TIMEOUT", cls.webhook_timeout),
            log_level=_env_log_level("OLSALG_LOG_LEVEL", cls.log_level),
        )


__all__ = ["AppSettings"]
