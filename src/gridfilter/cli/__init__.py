"""
gridfilter CLI module.

Provides the command groups and the shared loading/output helpers.
"""

from gridfilter.cli.utils import load_records, parse_where_items

__all__ = [
    "load_records",
    "parse_where_items",
]
