"""
Contract Validation Module

Модуль для валидации JSON контрактов отчётов о подсчёте.
"""

from .validators import (
    BeautifulCountReportValidator,
    ContractValidator,
    SchemaLoader,
    validate_beautiful_count_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BeautifulCountReportValidator",
    # Functions
    "validate_beautiful_count_report",
]
