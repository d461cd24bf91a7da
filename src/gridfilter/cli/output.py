"""Output formatting for the filter and classify commands."""

from __future__ import annotations

import csv
import io
import json
from typing import Any

import click

# Longest cell shown in table output before truncation
MAX_CELL_WIDTH = 50


def _cell(value: Any) -> str:
    text = "" if value is None else str(value)
    if len(text) > MAX_CELL_WIDTH:
        return text[: MAX_CELL_WIDTH - 3] + "..."
    return text


class OutputFormatter:
    """Print filtered rows, row ids or a single record.

    Data goes to stdout; status messages go to stderr so that piped output
    stays clean.
    """

    def __init__(self, output_format: str = "table", quiet: bool = False) -> None:
        self.format = output_format
        self.quiet = quiet

    def print_table(self, rows: list[dict[str, Any]], columns: list[str]) -> None:
        """Print *rows* restricted to *columns* as JSON, CSV or an aligned table."""
        if self.format == "json":
            click.echo(json.dumps(rows, indent=2, default=str))
        elif self.format == "csv":
            buf = io.StringIO()
            writer = csv.DictWriter(buf, fieldnames=columns, extrasaction="ignore")
            writer.writeheader()
            writer.writerows(rows)
            click.echo(buf.getvalue().rstrip())
        elif columns:
            lines = [[_cell(row.get(column)) for column in columns] for row in rows]
            widths = [max([len(column)] + [len(line[i]) for line in lines]) for i, column in enumerate(columns)]
            header = "  ".join(column.ljust(width) for column, width in zip(columns, widths))
            click.echo(header)
            click.echo("-" * len(header))
            for line in lines:
                click.echo("  ".join(text.ljust(width) for text, width in zip(line, widths)))

    def print_ids(self, row_ids: list[int]) -> None:
        for row_id in row_ids:
            click.echo(str(row_id))

    def print_single(self, data: dict[str, Any]) -> None:
        if self.format == "json":
            click.echo(json.dumps(data, indent=2, default=str))
        else:
            for key, value in data.items():
                click.echo(f"  {key}: {value}")

    def print_message(self, message: str) -> None:
        """Print a status line to stderr unless quiet."""
        if not self.quiet:
            click.echo(message, err=True)
