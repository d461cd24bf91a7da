"""
CLI command modules.
"""

# Keyword classification command
from gridfilter.cli.commands.classify import classify

# Configuration commands
from gridfilter.cli.commands.config import config

# Row filtering command
from gridfilter.cli.commands.filter import filter_command

__all__ = [
    "classify",
    "config",
    "filter_command",
]
