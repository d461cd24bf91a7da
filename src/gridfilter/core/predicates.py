"""
Predicates for classified column filters.

Each predicate takes the expression operand and the column's candidate
cells and returns the surviving row identifiers, in cell order, without
duplicates. Dispatch is exhaustive over FilterKind: every kind except NONE
has an entry in PREDICATES, and NONE is an explicit pass-through.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Any, Callable, Iterable

from gridfilter.core.formatting import FormatCache
from gridfilter.core.markup import strip_markup
from gridfilter.core.numbers import is_number, parse_number, to_number
from gridfilter.core.types import (
    Cell,
    CellProvider,
    Comparable,
    ComparableKind,
    ComparablePair,
    Dataset,
    FilterExpression,
    FilterKind,
)
from gridfilter.exceptions import UnsupportedFilterError

logger = logging.getLogger(__name__)


class CellEvaluator:
    """
    Derives comparable values from cells for one filter expression.

    Args:
        provider: The host grid, used for formatter row context.
        dataset: Optional host options bundle; ``dataset.data`` overrides the
            provider's row view as formatter context.
        expression: The expression being evaluated, passed to formatters.
        cache: Optional FormatCache shared across a filter pass.
    """

    def __init__(
        self,
        provider: CellProvider,
        dataset: Dataset | None = None,
        expression: FilterExpression | None = None,
        cache: FormatCache | None = None,
    ) -> None:
        self.provider = provider
        self.dataset = dataset
        self.expression = expression
        self.cache = cache

    def _row_data(self, row_index: int, row: Any) -> Any:
        if self.dataset is not None and self.dataset.data:
            return self.dataset.data[row_index]
        return row

    def _render(self, cell: Cell) -> str | None:
        row = self.provider.get_row(cell.row_index)
        return cell.column.capability.format(
            cell.content,
            row,
            cell.column,
            self._row_data(cell.row_index, row),
            self.expression,
        )

    def formatted_text(self, cell: Cell) -> str | None:
        """Markup-stripped formatter output, or None if the column has none."""
        if not cell.content:
            return None
        if self.cache is None:
            rendered = self._render(cell)
        else:
            key = (cell.row_index, cell.column.id, self.expression)
            rendered = self.cache.get_or_compute(key, lambda: self._render(cell))
        if rendered is None:
            return None
        return strip_markup(str(rendered))

    def comparable_text(self, cell: Cell) -> str:
        """Lowercased display text: pre-rendered form, formatted form, or content."""
        text = strip_markup(cell.html) if cell.html else ""
        if not text:
            formatted = self.formatted_text(cell)
            text = formatted if formatted is not None else (cell.content or "")
        return text.lower()

    def comparable_pair(self, cell: Cell, operand: str) -> ComparablePair:
        """
        Pair the cell's comparable value with *operand*.

        The column's compare_value hook wins when it returns a two-element
        sequence. Otherwise a cell with a leading number compares as that
        number, and anything else compares as its display text.
        """
        custom = cell.column.capability.compare_value(cell, operand)
        if custom is not None:
            if isinstance(custom, Sequence) and not isinstance(custom, str) and len(custom) == 2:
                return self.normalise(cell, operand, Comparable.of(custom[0]), Comparable.of(custom[1]))
            logger.debug(
                "Ignoring compare_value result that is not a pair",
                extra={"column": cell.column.id, "row_index": cell.row_index},
            )

        number = parse_number(cell.content)
        if number is not None:
            return self.normalise(cell, operand, Comparable.numeric(number), Comparable.text(operand))

        return ComparablePair(Comparable.text(self.comparable_text(cell)), Comparable.text(operand))

    def normalise(self, cell: Cell, operand: str, left: Comparable, right: Comparable) -> ComparablePair:
        """Bring both sides to one kind: numeric when both read as numbers, else text."""
        if left.kind is right.kind:
            if left.kind is not ComparableKind.OTHER or type(left.value) is type(right.value):
                return ComparablePair(left, right)

        left_number = _as_number(left)
        right_number = _as_number(right)
        if left_number is not None and right_number is not None:
            return ComparablePair(Comparable.numeric(left_number), Comparable.numeric(right_number))

        return ComparablePair(Comparable.text(self.comparable_text(cell)), Comparable.text(operand))


def _as_number(value: Comparable) -> float | None:
    if value.kind is ComparableKind.NUMERIC:
        return value.value
    if value.kind is ComparableKind.TEXT and is_number(value.value):
        return to_number(value.value)
    return None


def _rows(cells: Iterable[Cell]) -> list[int]:
    """Row identifiers of *cells* in order, each at most once."""
    seen: set[int] = set()
    rows = []
    for cell in cells:
        if cell.row_index not in seen:
            seen.add(cell.row_index)
            rows.append(cell.row_index)
    return rows


def _split_terms(operand: str | None) -> list[str]:
    return (operand or "").split()


# =============================================================================
# PREDICATES
# =============================================================================


def contains(operand: str, cells: Sequence[Cell], evaluator: CellEvaluator) -> list[int]:
    needle = (operand or "").lower()
    if not needle:
        return _rows(cells)
    return _rows(
        cell for cell in cells
        if needle in (cell.content or "").lower() or needle in evaluator.comparable_text(cell)
    )


def fuzzy(operand: str, cells: Sequence[Cell], evaluator: CellEvaluator) -> list[int]:
    terms = _split_terms(operand)
    if not terms:
        return _rows(cells)

    def matches(cell: Cell) -> bool:
        text = evaluator.comparable_text(cell)
        return all(term in text for term in terms)

    return _rows(cell for cell in cells if matches(cell))


def tokens(operand: str, cells: Sequence[Cell], evaluator: CellEvaluator) -> list[int]:
    terms = _split_terms(operand)
    if not terms:
        return _rows(cells)
    patterns = [re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE) for term in terms]

    def matches(cell: Cell) -> bool:
        text = evaluator.comparable_text(cell)
        return all(pattern.search(text) for pattern in patterns)

    return _rows(cell for cell in cells if matches(cell))


def greater_than(operand: str, cells: Sequence[Cell], evaluator: CellEvaluator) -> list[int]:
    def matches(cell: Cell) -> bool:
        pair = evaluator.comparable_pair(cell, operand)
        return pair.left > pair.right

    return _rows(cell for cell in cells if matches(cell))


def less_than(operand: str, cells: Sequence[Cell], evaluator: CellEvaluator) -> list[int]:
    def matches(cell: Cell) -> bool:
        pair = evaluator.comparable_pair(cell, operand)
        return pair.left < pair.right

    return _rows(cell for cell in cells if matches(cell))


def equals(operand: float, cells: Sequence[Cell], evaluator: CellEvaluator) -> list[int]:
    return _rows(cell for cell in cells if parse_number(cell.content) == operand)


def not_equals(operand: float, cells: Sequence[Cell], evaluator: CellEvaluator) -> list[int]:
    # Cells without a number are never equal to the operand, so they pass
    return _rows(cell for cell in cells if parse_number(cell.content) != operand)


def in_range(operand: tuple[str, str], cells: Sequence[Cell], evaluator: CellEvaluator) -> list[int]:
    low, high = operand

    def matches(cell: Cell) -> bool:
        low_pair = evaluator.comparable_pair(cell, low)
        value = low_pair.left
        # The upper bound is checked against the value paired with the lower one
        high_pair = evaluator.comparable_pair(cell, high)
        upper = evaluator.normalise(cell, high, value, high_pair.right)
        return low_pair.right <= value and upper.left <= upper.right

    return _rows(cell for cell in cells if matches(cell))


def contains_number(operand: str, cells: Sequence[Cell], evaluator: CellEvaluator) -> list[int]:
    number = parse_number(operand)

    def matches(cell: Cell) -> bool:
        hay_number = parse_number(cell.content)
        if number is not None and hay_number == number:
            return True
        return operand in evaluator.comparable_text(cell)

    return _rows(cell for cell in cells if matches(cell))


Predicate = Callable[[Any, Sequence[Cell], CellEvaluator], list[int]]

PREDICATES: dict[FilterKind, Predicate] = {
    FilterKind.CONTAINS: contains,
    FilterKind.FUZZY: fuzzy,
    FilterKind.TOKENS: tokens,
    FilterKind.GREATER_THAN: greater_than,
    FilterKind.LESS_THAN: less_than,
    FilterKind.EQUALS: equals,
    FilterKind.NOT_EQUALS: not_equals,
    FilterKind.RANGE: in_range,
    FilterKind.CONTAINS_NUMBER: contains_number,
}

_UNHANDLED = set(FilterKind) - set(PREDICATES) - {FilterKind.NONE}
if _UNHANDLED:
    raise UnsupportedFilterError(sorted(kind.value for kind in _UNHANDLED))


def get_predicate(kind: FilterKind) -> Predicate:
    """
    Look up the predicate for *kind*.

    Raises:
        UnsupportedFilterError: If *kind* has no predicate (including NONE,
            which callers handle as a pass-through).
    """
    try:
        return PREDICATES[kind]
    except KeyError:
        raise UnsupportedFilterError(kind) from None


def apply_predicate(
    expression: FilterExpression,
    cells: Sequence[Cell],
    evaluator: CellEvaluator,
) -> list[int]:
    """
    Apply the predicate for *expression* to *cells*.

    A NONE expression keeps every candidate row.

    Raises:
        UnsupportedFilterError: If the expression kind has no predicate.
    """
    if expression.kind is FilterKind.NONE:
        return _rows(cells)
    predicate = get_predicate(expression.kind)
    return predicate(expression.operand, cells, evaluator)
