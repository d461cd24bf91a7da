"""
CLI utility functions shared across command modules.
"""

import csv
import json
import logging
from pathlib import Path

import click

from gridfilter.exceptions import DataLoadError

logger = logging.getLogger(__name__)


def load_records(path) -> list[dict]:
    """Load row records from a CSV, JSON or NDJSON file.

    CSV cells are kept as text. JSON must be an array of objects; NDJSON
    holds one object per line.

    Raises:
        DataLoadError: If the file cannot be read or has the wrong shape.
    """
    file_path = Path(path)
    suffix = file_path.suffix.lower()

    try:
        if suffix == ".csv":
            with open(file_path, newline="", encoding="utf-8") as f:
                records = [dict(row) for row in csv.DictReader(f)]
        elif suffix == ".json":
            with open(file_path, encoding="utf-8") as f:
                records = json.load(f)
        elif suffix in (".ndjson", ".jsonl"):
            with open(file_path, encoding="utf-8") as f:
                records = [json.loads(line) for line in f if line.strip()]
        else:
            raise DataLoadError(
                "Unsupported file type. Use CSV, JSON or NDJSON.",
                file_path=str(file_path),
                file_type=suffix,
            )
    except OSError as e:
        raise DataLoadError(f"Cannot read file: {e}", file_path=str(file_path)) from e
    except (json.JSONDecodeError, UnicodeDecodeError, csv.Error) as e:
        raise DataLoadError(f"Cannot parse file: {e}", file_path=str(file_path), file_type=suffix) from e

    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise DataLoadError("Expected a list of row objects", file_path=str(file_path), file_type=suffix)

    logger.debug(f"Loaded {len(records)} records from {file_path}")
    return records


def parse_where_items(items) -> dict[str, str]:
    """Turn ``COLUMN=KEYWORD`` items into an ordered filter map.

    Only the first ``=`` separates column from keyword, so ``age==5`` maps
    ``age`` to ``=5``. A repeated column keeps its last keyword.

    Raises:
        ValueError: If an item has no ``=`` or an empty column name.
    """
    filters: dict[str, str] = {}
    for item in items:
        column, sep, keyword = item.partition("=")
        column = column.strip()
        if not sep or not column:
            raise ValueError(f"expected COLUMN=KEYWORD, got {item!r}")
        filters[column] = keyword
    return filters


def validate_where(ctx, param, value):
    """Validate the repeated --where option."""
    if not value:
        return {}
    try:
        return parse_where_items(value)
    except ValueError as e:
        raise click.BadParameter(f"Invalid filter: {e}")
