"""
Domain models and value objects.

Contains the numeral layout and the beautiful-number count report.
"""

from src.core.domain.layout import (
    BASE_MAX,
    DEFAULT_LAYOUT,
    HALF_LENGTH_MAX,
    NumeralLayout,
)
from src.core.domain.report import BeautifulCountReport

__all__ = [
    # Layout model
    "BASE_MAX",
    "HALF_LENGTH_MAX",
    "DEFAULT_LAYOUT",
    "NumeralLayout",
    # Report model
    "BeautifulCountReport",
]
