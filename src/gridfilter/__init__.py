"""
gridfilter - Column filter engine for tabular data grids

This package provides:
- Core: keyword classifier and predicate engine for per-column filters
- CLI: filter CSV/JSON files from the command line
"""

__version__ = "1.0.0"
__author__ = "Chillbot.io"
