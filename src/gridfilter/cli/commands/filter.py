"""
Filter command for narrowing a CSV/JSON table with column keywords.
"""

from __future__ import annotations

import click

from gridfilter.cli.base import common_options, format_option, strategy_option
from gridfilter.cli.output import OutputFormatter
from gridfilter.cli.utils import load_records, validate_where
from gridfilter.config import get_settings
from gridfilter.core.engine import FilterEngine
from gridfilter.core.formatting import FormatCache
from gridfilter.core.table import RowTable
from gridfilter.core.types import Dataset, FilterOptions
from gridfilter.exceptions import GridFilterError
from gridfilter.logging import ContextLogger


@click.command("filter")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--where", "-w", "filters", multiple=True, callback=validate_where,
              help='Column filter as COLUMN=KEYWORD (repeatable, e.g. "age=>10")')
@strategy_option
@format_option(choices=["table", "json", "csv", "ids"])
@click.option("--limit", default=None, type=int, help="Maximum rows to print")
@common_options
def filter_command(path: str, filters: dict[str, str], strategy: str | None,
                   output_format: str, limit: int | None, quiet: bool):
    """Print the rows of PATH that pass every --where filter.

    Keyword Grammar:
        >25             - Greater than (numeric when both sides are numbers)
        <25             - Less than
        =5              - Equals number
        !=5 / 5         - Contains number (numeric equality or substring)
        10:20           - Inclusive numeric range
        foo bar         - Substring, or per-word match with --strategy
        anything else   - Case-insensitive substring

    Examples:
        gridfilter filter people.csv --where "age=>10" --where "name=foo"
        gridfilter filter people.json -w "age=20:30" --format ids
        gridfilter filter people.csv -w "city=new york" --strategy tokens
    """
    settings = get_settings()
    if strategy is None:
        options = settings.filter.to_options()
    else:
        options = FilterOptions(filter_match_strategy=strategy)

    output = OutputFormatter(output_format, quiet)
    log = ContextLogger(__name__, source=path)

    try:
        records = load_records(path)
        table = RowTable.from_records(records)
        dataset = Dataset(options=options)
        cache = FormatCache() if settings.filter.cache_formatted else None
        row_ids = FilterEngine(table, dataset, cache).filter_rows(filters)
    except GridFilterError as e:
        raise click.ClickException(str(e)) from e

    log.debug("Applied filters", filters=len(filters), kept=len(row_ids), total=len(records))

    shown = row_ids if limit is None else row_ids[:limit]
    if output_format == "ids":
        output.print_ids(shown)
    else:
        columns = table.column_ids()
        output.print_table([records[row_id] for row_id in shown], columns=columns)

    output.print_message(f"{len(row_ids)} of {len(records)} rows")
