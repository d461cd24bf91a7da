"""
Shared test configuration for gridfilter.

Provides sample tables used across the test modules.
"""

import pytest

from gridfilter.config import get_settings
from gridfilter.core.table import RowTable


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached per process; start and end every test clean."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# TABLE FIXTURES
# =============================================================================

PEOPLE = [
    {"age": "25", "name": "Tom"},
    {"age": "9", "name": "Foobar"},
    {"age": "40", "name": "foo"},
]


@pytest.fixture
def people_table():
    """Three-row table used by the end-to-end scenarios."""
    return RowTable.from_records([dict(row) for row in PEOPLE])


@pytest.fixture
def pets_table():
    """Table with free text, prices and a mix of numeric and non-numeric cells."""
    return RowTable.from_records([
        {"title": "Cat show", "price": "12.50", "note": "indoor"},
        {"title": "Category theory", "price": "30", "note": "n/a"},
        {"title": "Dog walk", "price": "free", "note": "outdoor"},
        {"title": "Big cat sanctuary", "price": "7", "note": ""},
        {"title": "Concat strings", "price": "12.5 USD", "note": None},
    ])


@pytest.fixture
def restore_root_logger():
    """Drop handlers installed by setup_logging once the test ends."""
    import logging

    from gridfilter.logging import DevelopmentFormatter, JSONFormatter

    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, (JSONFormatter, DevelopmentFormatter)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
