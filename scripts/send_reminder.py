#!/usr/bin/env python3
"""Send today's ølsalg reminder. Intended to run once a day from cron."""

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load .env file
_env_path = Path(__file__).parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

from olsalg.cli.deps import get_container
from olsalg.notifications import NotificationError
from olsalg.utils import oslo_now


async def main() -> int:
    container = get_container()
    try:
        message = await container.reminder.run(oslo_now())
    except NotificationError as exc:
        print(f"Delivery failed: {exc}", file=sys.stderr)
        return 1
    print(message)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
