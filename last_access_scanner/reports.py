"""
Report rendering for the last access scanner.

Builds a borderless rich table with one row per visited entry; directories
are highlighted so they stand out from files.
"""

from __future__ import annotations

from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.measure import Measurement
from rich.table import Table
from rich.text import Text

from .metadata import VisitedEntry

UNAVAILABLE_LABEL = "n/a"
DIRECTORY_STYLE = "bold yellow"
COLUMN_TITLES = ("entry-name", "created", "last modified", "last access")
MAX_REPORT_WIDTH = 10_000


def format_age(value: int | None) -> str:
    """Render an age in days, or the unavailable marker."""
    if value is None:
        return UNAVAILABLE_LABEL
    return str(value)


def format_name(entry: VisitedEntry) -> Text:
    """Return the indented entry name, styled when the entry is a directory."""
    return Text(entry.indented_name, style=DIRECTORY_STYLE if entry.is_dir else "")


def build_table(entries: Iterable[VisitedEntry]) -> Table:
    """Build the report table, keeping traversal order."""
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    name_title, *age_titles = COLUMN_TITLES
    table.add_column(name_title, no_wrap=True)
    for title in age_titles:
        table.add_column(title, justify="right", no_wrap=True, min_width=len(title))

    for entry in entries:
        table.add_row(
            format_name(entry),
            format_age(entry.created),
            format_age(entry.modified),
            format_age(entry.accessed),
        )
    return table


def table_width(console: Console, table: Table) -> int:
    """Return the width the table needs to render without shrinking any column."""
    options = console.options.update_width(MAX_REPORT_WIDTH)
    return Measurement.get(console, options, table).maximum


def print_report(entries: Iterable[VisitedEntry], console: Optional[Console] = None) -> int:
    """Print the report table and return the number of rows.

    The console is widened when the table would not fit, so long names are
    never truncated and every age column stays visible.
    """
    console = console or Console()
    table = build_table(entries)
    console.width = max(console.width, table_width(console, table))
    console.print(table)
    return table.row_count
