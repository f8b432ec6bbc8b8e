"""Typer CLI wiring the ølsalg services."""

from __future__ import annotations

import asyncio
import logging
from datetime import date, datetime, timedelta

import typer
from rich.console import Console
from rich.table import Table

from olsalg.config import AppSettings
from olsalg.notifications import LogNotifier, NotificationError
from olsalg.orchestration import DailyReminder
from olsalg.utils import ensure_oslo, oslo_now

from .deps import get_container

app = typer.Typer(help="Ølsalg reminder command-line interface")

_WEEKDAYS = ("mandag", "tirsdag", "onsdag", "torsdag", "fredag", "lørdag", "søndag")


def _parse_instant(value: str | None) -> datetime:
    if value is None:
        return oslo_now()
    try:
        return ensure_oslo(datetime.fromisoformat(value))
    except ValueError as exc:
        raise typer.BadParameter("--at must be an ISO 8601 date or datetime") from exc


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter("date must be formatted as YYYY-MM-DD") from exc


@app.callback()
def main() -> None:
    """Configure logging before any command runs."""

    settings = AppSettings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_container().settings
    webhook = "configured" if settings.discord_webhook_url else "not configured"
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Webhook:\t" + webhook)
    typer.echo(f"Timeout:\t{settings.webhook_timeout:g}s")


@app.command("today")
def today(
    at: str | None = typer.Option(None, help="Evaluate at this ISO datetime instead of now"),
) -> None:
    """Print the message that would be sent."""

    container = get_container()
    typer.echo(container.reminder.preview(_parse_instant(at)))


@app.command("send")
def send(
    at: str | None = typer.Option(None, help="Evaluate at this ISO datetime instead of now"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Log the message instead of posting it"),
) -> None:
    """Compose today's message and deliver it to the configured webhook."""

    container = get_container()
    instant = _parse_instant(at)
    reminder = container.reminder
    if dry_run:
        reminder = DailyReminder(container.composer, LogNotifier())

    try:
        message = asyncio.run(reminder.run(instant))
    except NotificationError as exc:
        typer.echo(f"Delivery failed: {exc}")
        raise typer.Exit(code=1) from exc
    typer.echo(message)


@app.command("closing-time")
def closing_time(day: str) -> None:
    """Show the closing time for a date (YYYY-MM-DD)."""

    container = get_container()
    target = _parse_date(day)
    decision = container.closing_resolver.closing_time(target)
    name = container.holiday_calendar.holiday_name(target)
    label = "Ingen ølsalg" if decision.is_no_sale else f"Stenger kl. {decision}"
    suffix = f" ({name})" if name else ""
    typer.echo(f"{target.isoformat()}: {label}{suffix}")


@app.command("warn")
def warn(
    at: str | None = typer.Option(None, help="Evaluate at this ISO datetime instead of now"),
) -> None:
    """Print a closed notice or one-hour warning for the given instant, if any."""

    container = get_container()
    message = container.composer.message_for(_parse_instant(at))
    typer.echo(message or "Ingen melding")


@app.command("year")
def year(target_year: int = typer.Argument(..., metavar="YEAR", min=1583, max=9999)) -> None:
    """List every named or irregular day of a year."""

    container = get_container()
    resolver = container.closing_resolver
    calendar = container.holiday_calendar

    table = Table(title=f"Ølsalg {target_year}")
    table.add_column("Dato")
    table.add_column("Dag")
    table.add_column("Navn")
    table.add_column("Stenger")
    table.add_column("Ordinær")

    first = date(target_year, 1, 1)
    last = date(target_year, 12, 31)
    for offset in range((last - first).days + 1):
        current = first + timedelta(days=offset)
        decision = resolver.closing_time(current)
        ordinary = resolver.ordinary_closing_time(current)
        name = calendar.holiday_name(current)
        if name or decision != ordinary:
            table.add_row(
                current.strftime("%d.%m"),
                _WEEKDAYS[current.weekday()],
                name or "",
                "-" if decision.is_no_sale else str(decision),
                "-" if ordinary.is_no_sale else str(ordinary),
            )

    Console().print(table)


__all__ = ["app"]
