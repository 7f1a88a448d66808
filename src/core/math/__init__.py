"""
Core math modules

Целочисленные комбинаторные примитивы с контролем диапазона int64.
"""

# Integer Safeguards
from src.core.math.integer_safeguards import (
    INT64_MAX,
    INT64_MIN,
    Int64OverflowViolation,
    ensure_int64,
    is_int64,
    validate_int,
    validate_int_in_range,
    validate_non_negative_int,
)

# Binomial (Combination Counter)
from src.core.math.binomial import (
    BINOM_ROW_6,
    binomial,
    binomial_n_5,
    binomial_row,
    stars_and_bars,
)

# Digit Sums (Digit-Sum Distribution)
from src.core.math.digit_sums import (
    DIGIT_BASE,
    HALF_LENGTH,
    MAX_SUM,
    WAYS_TABLE,
    DistributionCheck,
    build_ways_table,
    check_distribution,
    convolve_digit_sums,
    max_digit_sum,
    ways_for_sum,
)

__all__ = [
    # Integer Safeguards — Constants
    "INT64_MAX",
    "INT64_MIN",
    # Integer Safeguards — Exceptions
    "Int64OverflowViolation",
    # Integer Safeguards — Functions
    "ensure_int64",
    "is_int64",
    "validate_int",
    "validate_int_in_range",
    "validate_non_negative_int",
    # Binomial — Constants
    "BINOM_ROW_6",
    # Binomial — Functions
    "binomial",
    "binomial_n_5",
    "binomial_row",
    "stars_and_bars",
    # Digit Sums — Constants
    "DIGIT_BASE",
    "HALF_LENGTH",
    "MAX_SUM",
    "WAYS_TABLE",
    # Digit Sums — Types
    "DistributionCheck",
    # Digit Sums — Functions
    "build_ways_table",
    "check_distribution",
    "convolve_digit_sums",
    "max_digit_sum",
    "ways_for_sum",
]
