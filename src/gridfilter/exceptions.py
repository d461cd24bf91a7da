"""
Unified exception hierarchy for gridfilter.

All exception classes live here. No per-module exception files.

Hierarchy:
    GridFilterError (base)
    ├── FilterError
    │   ├── UnsupportedFilterError
    │   └── InvalidMatchStrategyError
    ├── ComparisonError
    │   └── IncomparableValuesError
    ├── DataError
    │   ├── ColumnNotFoundError
    │   └── DataLoadError
    └── ConfigurationError

Usage:
    from gridfilter.exceptions import ColumnNotFoundError, UnsupportedFilterError
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# ROOT
# =============================================================================


class GridFilterError(Exception):
    """
    Base exception for all gridfilter errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about what was being done
        details: Technical details (column ids, filter kinds, etc.)
    """

    def __init__(
        self,
        message: str,
        context: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.context = context
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.context:
            parts.append(f"Context: {self.context}")
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            parts.append(f"Details: {detail_str}")
        return ". ".join(parts)


# =============================================================================
# FILTER EXPRESSIONS
# =============================================================================


class FilterError(GridFilterError):
    """Raised when a filter expression cannot be classified or applied."""

    def __init__(
        self,
        message: str,
        keyword: str | None = None,
        column: str | None = None,
        **kwargs: Any,
    ):
        details = kwargs.pop("details", {})
        if keyword is not None:
            details["keyword"] = keyword
        if column is not None:
            details["column"] = column
        super().__init__(message, details=details, **kwargs)
        self.keyword = keyword
        self.column = column


class UnsupportedFilterError(FilterError):
    """Raised when no predicate exists for a classified filter kind."""

    def __init__(self, kind: Any, **kwargs: Any):
        details = kwargs.pop("details", {})
        details["kind"] = getattr(kind, "value", kind)
        super().__init__(f"No predicate registered for filter kind {kind!r}", details=details, **kwargs)
        self.kind = kind


class InvalidMatchStrategyError(FilterError):
    """Raised when a match strategy name is not one of default, fuzzy or tokens."""

    def __init__(self, strategy: str, **kwargs: Any):
        details = kwargs.pop("details", {})
        details["strategy"] = strategy
        super().__init__(f"Unknown match strategy: {strategy!r}", details=details, **kwargs)
        self.strategy = strategy


# =============================================================================
# COMPARISON
# =============================================================================


class ComparisonError(GridFilterError):
    """Raised when two comparable values cannot be ordered."""

    pass


class IncomparableValuesError(ComparisonError):
    """Raised when ordering is requested between values of different kinds."""

    def __init__(self, left: Any, right: Any, **kwargs: Any):
        details = kwargs.pop("details", {})
        details["left"] = left
        details["right"] = right
        super().__init__("Cannot order values of different kinds", details=details, **kwargs)
        self.left = left
        self.right = right


# =============================================================================
# DATA
# =============================================================================


class DataError(GridFilterError):
    """Raised when row or cell data is missing or malformed."""

    pass


class ColumnNotFoundError(DataError):
    """Raised when a filter names a column the table does not have."""

    def __init__(self, column: str, available: list[str] | None = None, **kwargs: Any):
        details = kwargs.pop("details", {})
        details["column"] = column
        if available is not None:
            details["available"] = available
        super().__init__(f"Unknown column: {column}", details=details, **kwargs)
        self.column = column
        self.available = available


class DataLoadError(DataError):
    """Raised when a data file cannot be read into records."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        file_type: str | None = None,
        **kwargs: Any,
    ):
        details = kwargs.pop("details", {})
        if file_path:
            details["file_path"] = file_path
        if file_type:
            details["file_type"] = file_type
        super().__init__(message, details=details, **kwargs)
        self.file_path = file_path
        self.file_type = file_type


# =============================================================================
# CONFIGURATION
# =============================================================================


class ConfigurationError(GridFilterError):
    """Raised when settings cannot be loaded."""

    def __init__(self, message: str, config_path: str | None = None, **kwargs: Any):
        details = kwargs.pop("details", {})
        if config_path:
            details["config_path"] = config_path
        super().__init__(message, details=details, **kwargs)
        self.config_path = config_path
