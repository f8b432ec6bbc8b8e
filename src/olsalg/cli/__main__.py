"""Executable entry point for `python -m olsalg.cli`."""

from __future__ import annotations

from dotenv import load_dotenv

from .app import app


def main() -> None:  # pragma: no cover - thin wrapper
    load_dotenv()
    app()


if __name__ == "__main__":  # pragma: no cover - CLI entry
    main()
