"""
Core data types for the gridfilter engine.

This module defines the fundamental types used throughout the filter system:
- FilterKind / FilterExpression: a classified filter keyword
- MatchStrategy: how multi-word keywords are matched
- ColumnCapability / ColumnDefinition / Cell: the grid data a filter runs on
- Comparable: a value with an explicit numeric/text tag for ordering
- FilterOptions / Dataset: the host options bundle
- CellProvider: the protocol a host grid implements to expose its cells
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Protocol, Sequence, Union, runtime_checkable

from gridfilter.exceptions import IncomparableValuesError, InvalidMatchStrategyError

__all__ = [
    # Enums
    "FilterKind",
    "MatchStrategy",
    "ComparableKind",
    # Data classes
    "FilterExpression",
    "ColumnCapability",
    "FunctionCapability",
    "ColumnDefinition",
    "Cell",
    "Comparable",
    "ComparablePair",
    "FilterOptions",
    "Dataset",
    # Protocols
    "CellProvider",
]

Operand = Union[str, float, tuple[str, str], None]


class FilterKind(Enum):
    """Closed set of filter expression kinds."""
    NONE = "none"
    CONTAINS = "contains"
    FUZZY = "fuzzy"
    TOKENS = "tokens"
    GREATER_THAN = "greaterThan"
    LESS_THAN = "lessThan"
    EQUALS = "equals"
    NOT_EQUALS = "notEquals"
    RANGE = "range"
    CONTAINS_NUMBER = "containsNumber"


class MatchStrategy(Enum):
    """Host-configured matching for multi-word keywords."""
    DEFAULT = "default"
    FUZZY = "fuzzy"
    TOKENS = "tokens"

    @classmethod
    def coerce(cls, value: "MatchStrategy | str | None") -> "MatchStrategy":
        """Convert a strategy name (or None) to a MatchStrategy."""
        if value is None or value == "":
            return cls.DEFAULT
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidMatchStrategyError(str(value)) from None


@dataclass(frozen=True)
class FilterExpression:
    """
    A classified filter keyword.

    The operand shape depends on the kind:
        CONTAINS, FUZZY, TOKENS          -> lowercased str
        GREATER_THAN, LESS_THAN          -> trimmed str
        CONTAINS_NUMBER                  -> numeric-looking str
        EQUALS, NOT_EQUALS               -> float
        RANGE                            -> (low, high) str tuple
        NONE                             -> None
    """
    kind: FilterKind
    operand: Operand = None

    @classmethod
    def none(cls) -> "FilterExpression":
        return cls(FilterKind.NONE)


# =============================================================================
# COLUMNS AND CELLS
# =============================================================================


class ColumnCapability:
    """
    Column-specific hooks consulted by the predicates.

    The base class is the no-op implementation: no custom comparison pair and
    no custom display form. Subclass and override either hook per column.
    """

    def compare_value(self, cell: "Cell", keyword: str) -> Sequence[Any] | None:
        """Return a (cell value, keyword value) pair, or None for the default."""
        return None

    def format(
        self,
        content: str,
        row: Any,
        column: "ColumnDefinition",
        row_data: Any,
        filter_expression: FilterExpression | None,
    ) -> str | None:
        """Return a rendered display form of *content*, or None for none."""
        return None


class FunctionCapability(ColumnCapability):
    """ColumnCapability built from plain callables."""

    def __init__(
        self,
        compare_value: Callable[["Cell", str], Sequence[Any] | None] | None = None,
        format: Callable[..., str | None] | None = None,
    ) -> None:
        self._compare_value = compare_value
        self._format = format

    def compare_value(self, cell: "Cell", keyword: str) -> Sequence[Any] | None:
        if self._compare_value is None:
            return None
        return self._compare_value(cell, keyword)

    def format(self, content, row, column, row_data, filter_expression):
        if self._format is None:
            return None
        return self._format(content, row, column, row_data, filter_expression)


_NO_CAPABILITY = ColumnCapability()


@dataclass(frozen=True)
class ColumnDefinition:
    """A grid column: identifier, display name and capability hooks."""
    id: str
    name: str | None = None
    capability: ColumnCapability = field(default=_NO_CAPABILITY, compare=False, repr=False)


@dataclass(frozen=True)
class Cell:
    """A single (row, column) data point with content and optional rendering."""
    content: str | None
    row_index: int
    column: ColumnDefinition
    html: str | None = None


# =============================================================================
# COMPARABLE VALUES
# =============================================================================


class ComparableKind(Enum):
    """Tag for Comparable values; ordering is defined within one kind only."""
    NUMERIC = "numeric"
    TEXT = "text"
    OTHER = "other"


@dataclass(frozen=True)
class Comparable:
    """A value tagged with its comparison kind."""
    kind: ComparableKind
    value: Any

    @classmethod
    def numeric(cls, value: float) -> "Comparable":
        return cls(ComparableKind.NUMERIC, float(value))

    @classmethod
    def text(cls, value: str) -> "Comparable":
        return cls(ComparableKind.TEXT, str(value))

    @classmethod
    def of(cls, value: Any) -> "Comparable":
        """Tag an arbitrary host value (e.g. from a compare_value hook)."""
        if isinstance(value, Comparable):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls.numeric(value)
        if isinstance(value, str):
            return cls.text(value)
        return cls(ComparableKind.OTHER, value)

    def _check(self, other: "Comparable") -> None:
        if not isinstance(other, Comparable) or other.kind is not self.kind:
            raise IncomparableValuesError(self, other)
        if self.kind is ComparableKind.OTHER and type(self.value) is not type(other.value):
            raise IncomparableValuesError(self, other)

    def __lt__(self, other: "Comparable") -> bool:
        self._check(other)
        return self.value < other.value

    def __le__(self, other: "Comparable") -> bool:
        self._check(other)
        return self.value <= other.value

    def __gt__(self, other: "Comparable") -> bool:
        self._check(other)
        return self.value > other.value

    def __ge__(self, other: "Comparable") -> bool:
        self._check(other)
        return self.value >= other.value


@dataclass(frozen=True)
class ComparablePair:
    """The cell's comparable value (left) and the filter operand (right)."""
    left: Comparable
    right: Comparable


# =============================================================================
# HOST OPTIONS AND DATA ACCESS
# =============================================================================


@dataclass
class FilterOptions:
    """Options read by the engine from the host grid."""
    filter_match_strategy: MatchStrategy | str | None = None

    @property
    def match_strategy(self) -> MatchStrategy:
        return MatchStrategy.coerce(self.filter_match_strategy)


@dataclass
class Dataset:
    """
    Host options bundle.

    ``data`` is the optional authoritative list of raw row records, indexed
    by row identifier, handed to column formatters as row context.
    """
    options: FilterOptions = field(default_factory=FilterOptions)
    data: Sequence[Any] | None = None


@runtime_checkable
class CellProvider(Protocol):
    """What a host grid must expose for the engine to filter it."""

    def row_indices(self) -> list[int]:
        """All row identifiers, in display order."""
        ...

    def column_ids(self) -> list[str]:
        """All column identifiers."""
        ...

    def get_cell(self, row_index: int, column_id: str) -> Cell:
        """The cell at (row, column)."""
        ...

    def get_row(self, row_index: int) -> Any:
        """The provider's own view of a row, used as formatter context."""
        ...
