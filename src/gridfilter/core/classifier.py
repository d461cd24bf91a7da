"""
Keyword classifier for grid column filters.

A column filter is a single keyword typed into the column's filter box.
Rules are tried in a fixed order and the first match wins:

    >value          greater than (operand kept as text)
    <value          less than (operand kept as text)
    =number         equals
    number          contains number (also matches =/</>/!= prefixed numbers
                    that no earlier rule claimed)
    !=number        not equals
    low:high        inclusive range of two numbers
    two words       fuzzy or tokens, when the host strategy asks for it
    anything else   case-insensitive substring

Examples:
    >25             age > 25
    =5              value equals 5.0
    1:10            value between 1 and 10 inclusive
    new york        "new york" as substring (default strategy)
"""

from __future__ import annotations

from gridfilter.core.numbers import is_number, to_number
from gridfilter.core.types import FilterExpression, FilterKind, MatchStrategy

_COMPARISON_PREFIXES = (">", "<", "=")
_NOT_EQUALS_PREFIX = "!="
_RANGE_SEPARATOR = ":"


def _strip_prefix(keyword: str) -> str:
    """Remove one leading comparison operator from *keyword*."""
    if keyword[0] in _COMPARISON_PREFIXES:
        return keyword[1:]
    if keyword.startswith(_NOT_EQUALS_PREFIX):
        return keyword[2:]
    return keyword


def _has_whitespace(text: str) -> bool:
    return any(char.isspace() for char in text)


def classify(
    keyword: str | None,
    strategy: MatchStrategy | str | None = None,
) -> FilterExpression:
    """
    Classify a raw column keyword into a FilterExpression.

    Args:
        keyword: The text typed into the column filter.
        strategy: Match strategy for multi-word keywords. Accepts the enum,
            its string value, or None for the default.

    Returns:
        The classified FilterExpression. An empty keyword yields kind NONE.

    Raises:
        InvalidMatchStrategyError: If *strategy* is not a known strategy name.

    Examples:
        >>> classify(">5")
        FilterExpression(kind=<FilterKind.GREATER_THAN: 'greaterThan'>, operand='5')
        >>> classify("=5").operand
        5.0
        >>> classify("1:10").operand
        ('1', '10')
    """
    if not keyword:
        return FilterExpression.none()

    strategy = MatchStrategy.coerce(strategy)
    remainder = _strip_prefix(keyword)

    if keyword.startswith(">") and remainder:
        return FilterExpression(FilterKind.GREATER_THAN, remainder.strip())

    if keyword.startswith("<") and remainder:
        return FilterExpression(FilterKind.LESS_THAN, remainder.strip())

    if keyword.startswith("=") and is_number(remainder):
        return FilterExpression(FilterKind.EQUALS, to_number(remainder))

    if is_number(remainder):
        return FilterExpression(FilterKind.CONTAINS_NUMBER, remainder.strip())

    # Numeric "!=" remainders are claimed by CONTAINS_NUMBER above
    if keyword.startswith(_NOT_EQUALS_PREFIX) and is_number(remainder):
        return FilterExpression(FilterKind.NOT_EQUALS, to_number(remainder))

    bounds = keyword.split(_RANGE_SEPARATOR)
    if len(bounds) == 2 and all(is_number(bound) for bound in bounds):
        low, high = (bound.strip() for bound in bounds)
        return FilterExpression(FilterKind.RANGE, (low, high))

    if _has_whitespace(keyword):
        if strategy is MatchStrategy.FUZZY:
            return FilterExpression(FilterKind.FUZZY, remainder.lower())
        if strategy is MatchStrategy.TOKENS:
            return FilterExpression(FilterKind.TOKENS, remainder.lower())

    return FilterExpression(FilterKind.CONTAINS, remainder.lower())


def describe(expression: FilterExpression) -> str:
    """
    Render a FilterExpression in a short human-readable form.

    Examples:
        >>> describe(classify(">5"))
        '> 5'
        >>> describe(classify("1:10"))
        '1 .. 10'
    """
    kind = expression.kind
    operand = expression.operand

    if kind is FilterKind.NONE:
        return "(no filter)"
    if kind is FilterKind.GREATER_THAN:
        return f"> {operand}"
    if kind is FilterKind.LESS_THAN:
        return f"< {operand}"
    if kind is FilterKind.EQUALS:
        return f"= {operand:g}"
    if kind is FilterKind.NOT_EQUALS:
        return f"!= {operand:g}"
    if kind is FilterKind.RANGE:
        low, high = operand
        return f"{low} .. {high}"
    if kind is FilterKind.CONTAINS_NUMBER:
        return f"~ {operand}"
    if kind is FilterKind.FUZZY:
        return f"all of {operand.split()}"
    if kind is FilterKind.TOKENS:
        return f"words {operand.split()}"
    return f"contains {operand!r}"
