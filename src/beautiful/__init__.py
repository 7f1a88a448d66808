"""Beautiful numbers — подсчёт 13-значных base-13 чисел с равными суммами половин.

Pipeline: Combination Counter → Digit-Sum Distribution → Aggregator.
"""

from .aggregator import (
    BEAUTIFUL_NUMBER_COUNT,
    build_count_report,
    count_beautiful_numbers,
)

__all__ = [
    "BEAUTIFUL_NUMBER_COUNT",
    "build_count_report",
    "count_beautiful_numbers",
]
