"""
Multi-column row filtering.

Each active column filter narrows the candidate rows left by the previous
one, so later columns only look at cells of rows that are still in play.
The result is the logical AND of all column filters.
"""

from __future__ import annotations

import logging
from typing import Mapping

from gridfilter.core.classifier import classify, describe
from gridfilter.core.formatting import FormatCache
from gridfilter.core.predicates import CellEvaluator, apply_predicate
from gridfilter.core.types import CellProvider, Dataset, FilterExpression, MatchStrategy
from gridfilter.exceptions import ColumnNotFoundError

logger = logging.getLogger(__name__)


class FilterEngine:
    """
    Applies column filter maps to one host grid.

    Args:
        provider: The host grid exposing its cells.
        dataset: Optional options bundle (match strategy, raw row records).
        cache: Optional FormatCache. When given, formatter output is reused
            across passes for the same (row, column, expression).

    Usage:
        engine = FilterEngine(table, Dataset(FilterOptions("tokens")))
        rows = engine.filter_rows({"name": "foo bar", "age": ">10"})
    """

    def __init__(
        self,
        provider: CellProvider,
        dataset: Dataset | None = None,
        cache: FormatCache | None = None,
    ) -> None:
        self.provider = provider
        self.dataset = dataset
        self.cache = cache

    @property
    def strategy(self) -> MatchStrategy:
        if self.dataset is None:
            return MatchStrategy.DEFAULT
        return self.dataset.options.match_strategy

    def classify(self, keyword: str) -> FilterExpression:
        return classify(keyword, self.strategy)

    def filter_rows(self, filters: Mapping[str, str]) -> list[int]:
        """
        Return the row identifiers that pass every filter in *filters*.

        Args:
            filters: Ordered mapping of column id to raw keyword.

        Returns:
            Surviving row identifiers. With no filters, every row in
            original order; otherwise in the order the last predicate
            produced them.

        Raises:
            ColumnNotFoundError: If a filter names an unknown column.
            UnsupportedFilterError: If a keyword classifies to a kind with
                no predicate.
        """
        all_rows = self.provider.row_indices()
        if not filters:
            return all_rows

        known_columns = set(self.provider.column_ids())
        for column_id in filters:
            if column_id not in known_columns:
                raise ColumnNotFoundError(column_id, available=sorted(known_columns))

        strategy = self.strategy
        candidates = all_rows
        for column_id, keyword in filters.items():
            cells = [self.provider.get_cell(row_index, column_id) for row_index in candidates]
            expression = classify(keyword, strategy)
            evaluator = CellEvaluator(self.provider, self.dataset, expression, self.cache)

            narrowed = apply_predicate(expression, cells, evaluator)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    f"Column {column_id!r} filter {describe(expression)} kept {len(narrowed)} of {len(candidates)} rows",
                    extra={"column": column_id, "kind": expression.kind.value},
                )
            candidates = narrowed

        logger.debug(f"Filter pass kept {len(candidates)} of {len(all_rows)} rows")
        return candidates


def filter_rows(
    provider: CellProvider,
    filters: Mapping[str, str],
    dataset: Dataset | None = None,
) -> list[int]:
    """
    Filter a grid with a column-to-keyword map in a single pass.

    Example:
        >>> table = RowTable.from_records([
        ...     {"age": "25", "name": "Tom"},
        ...     {"age": "9", "name": "Foobar"},
        ...     {"age": "40", "name": "foo"},
        ... ])
        >>> filter_rows(table, {"age": ">10", "name": "foo"})
        [2]
    """
    return FilterEngine(provider, dataset, FormatCache()).filter_rows(filters)
