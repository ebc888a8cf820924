"""
This module provides methods for formatted output to stdout, including tables of
database rows.
"""

from __future__ import annotations

from typing import Mapping, Optional

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

NULL = "NULL"


class RowPrinter:
    """
    Row callback which collects database rows into a table. The column headers are
    taken from the first row, NULL values are shown as ``NULL``. Call :meth:`print` to
    output the table once all rows have been received.
    """

    def __init__(self) -> None:
        self.table: Table | None = None

    def __call__(self, row: Mapping[str, Optional[str]]) -> None:
        if self.table is None:
            self.table = Table(*row.keys(), padding=(0, 2, 0, 0), box=None)

        self.table.add_row(*(Text(NULL if v is None else v) for v in row.values()))

    def print(self) -> None:
        if self.table is None:
            echo("No records")
        else:
            Console().print(self.table, highlight=False)


def echo(message: str) -> None:
    click.echo(message)


def ok(message: str) -> None:
    """Prints a confirmation prefixed with a green checkmark."""
    click.echo(click.style("✓", fg="green") + " " + message)


def warn(message: str) -> None:
    """Prints a warning or error prefixed with a red exclamation mark."""
    click.echo(click.style("!", fg="red") + " " + message)
