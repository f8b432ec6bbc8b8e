#!/usr/bin/env python3
"""Print the composed daily message for every day of a year."""

import argparse
from datetime import date, datetime, time, timedelta

from rich.console import Console
from rich.table import Table

from olsalg.messages import MessageComposer
from olsalg.utils import OSLO


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("year", type=int)
    args = parser.parse_args()

    composer = MessageComposer()
    table = Table(title=f"Daily messages {args.year}", show_lines=True)
    table.add_column("Date")
    table.add_column("Message")

    first = date(args.year, 1, 1)
    last = date(args.year, 12, 31)
    for offset in range((last - first).days + 1):
        current = first + timedelta(days=offset)
        now = datetime.combine(current, time(0, 0), tzinfo=OSLO)
        table.add_row(current.isoformat(), composer.compose(now))

    Console().print(table)


if __name__ == "__main__":
    main()
