"""Shared CLI decorators and utilities."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

import click


def common_options(f: Callable[..., Any]) -> Callable[..., Any]:
    """Add ``--quiet`` flag to any command."""
    @click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return f(*args, **kwargs)
    return wrapper


def strategy_option(f: Callable[..., Any]) -> Callable[..., Any]:
    """Add ``--strategy`` for multi-word keyword matching.

    Commands receive ``strategy`` as ``None`` when the option is not given,
    meaning the configured ``filter.match_strategy`` applies.
    """
    @click.option(
        "--strategy",
        type=click.Choice(["default", "fuzzy", "tokens"], case_sensitive=False),
        default=None,
        help="Match strategy for multi-word keywords (defaults to configuration)",
    )
    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return f(*args, **kwargs)
    return wrapper


def format_option(
    choices: list[str] | None = None,
    default: str | None = None,
) -> Callable[..., Any]:
    """Add ``--format`` / ``-f`` option with configurable choices.

    The Python parameter is named ``output_format`` to avoid shadowing the
    built-in ``format``.
    """
    if choices is None:
        choices = ["table", "json", "csv"]
    if default is None:
        default = choices[0]

    def decorator(f: Callable[..., Any]) -> Callable[..., Any]:
        @click.option(
            "--format", "-f", "output_format",
            type=click.Choice(choices),
            default=default,
            help="Output format",
        )
        @functools.wraps(f)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return f(*args, **kwargs)
        return wrapper
    return decorator
