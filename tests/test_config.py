from __future__ import annotations

import pytest

from olsalg.config import AppSettings

_VARS = ("OLSALG_ENV", "DISCORD_WEBHOOK_URL", "OLSALG_WEBHOOK_TIMEOUT", "OLSALG_LOG_LEVEL")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = AppSettings.from_env()
    assert settings == AppSettings()
    assert settings.discord_webhook_url is None
    assert settings.webhook_timeout == 10.0
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OLSALG_ENV", "production")
    monkeypatch.setenv("DISCORD_WEBHOOK_URL", " https://discord.example/hook ")
    monkeypatch.setenv("OLSALG_WEBHOOK_TIMEOUT", "2.5")
    monkeypatch.setenv("OLSALG_LOG_LEVEL", "debug")

    settings = AppSettings.from_env()

    assert settings.environment == "production"
    assert settings.discord_webhook_url == "https://discord.example/hook"
    assert settings.webhook_timeout == 2.5
    assert settings.log_level == "DEBUG"


def test_blank_webhook_and_bad_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DISCORD_WEBHOOK_URL", "   ")
    monkeypatch.setenv("OLSALG_WEBHOOK_TIMEOUT", "soon")
    monkeypatch.setenv("OLSALG_LOG_LEVEL", "verbose")

    settings = AppSettings.from_env()

    assert settings.discord_webhook_url is None
    assert settings.webhook_timeout == 10.0
    assert settings.log_level == "INFO"
