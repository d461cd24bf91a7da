"""
Classify command for inspecting how a keyword will be interpreted.
"""

from __future__ import annotations

import click

from gridfilter.cli.base import format_option, strategy_option
from gridfilter.cli.output import OutputFormatter
from gridfilter.config import get_settings
from gridfilter.core.classifier import classify as classify_keyword
from gridfilter.core.classifier import describe


@click.command()
@click.argument("keyword")
@strategy_option
@format_option(choices=["table", "json"])
def classify(keyword: str, strategy: str | None, output_format: str):
    """Show the filter kind and operand a KEYWORD classifies to.

    Examples:
        gridfilter classify ">25"
        gridfilter classify "1:10" --format json
        gridfilter classify "new york" --strategy tokens
    """
    if strategy is None:
        strategy = get_settings().filter.match_strategy

    expression = classify_keyword(keyword, strategy)
    operand = expression.operand
    if isinstance(operand, tuple):
        operand = list(operand)

    OutputFormatter(output_format).print_single({
        "keyword": keyword,
        "kind": expression.kind.value,
        "operand": operand,
        "description": describe(expression),
    })
