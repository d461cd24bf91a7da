"""
Filter core: keyword classification, predicates and multi-column narrowing.

Usage:
    from gridfilter.core import RowTable, filter_rows

    table = RowTable.from_records(records)
    rows = filter_rows(table, {"age": ">10", "name": "foo"})
"""

from gridfilter.core.classifier import classify, describe
from gridfilter.core.engine import FilterEngine, filter_rows
from gridfilter.core.formatting import FormatCache
from gridfilter.core.markup import strip_markup
from gridfilter.core.numbers import is_number, parse_number
from gridfilter.core.predicates import PREDICATES, CellEvaluator, apply_predicate
from gridfilter.core.table import RowTable
from gridfilter.core.types import (
    Cell,
    CellProvider,
    ColumnCapability,
    ColumnDefinition,
    Comparable,
    ComparableKind,
    Dataset,
    FilterExpression,
    FilterKind,
    FilterOptions,
    FunctionCapability,
    MatchStrategy,
)

__all__ = [
    "classify",
    "describe",
    "FilterEngine",
    "filter_rows",
    "FormatCache",
    "strip_markup",
    "is_number",
    "parse_number",
    "PREDICATES",
    "CellEvaluator",
    "apply_predicate",
    "RowTable",
    "Cell",
    "CellProvider",
    "ColumnCapability",
    "ColumnDefinition",
    "Comparable",
    "ComparableKind",
    "Dataset",
    "FilterExpression",
    "FilterKind",
    "FilterOptions",
    "FunctionCapability",
    "MatchStrategy",
]
