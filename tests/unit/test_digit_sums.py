"""
Тесты для Digit Sums — распределение сумм цифр

Проверяемые инварианты:
1. N(0) = N(72) = 1
2. Симметрия N(S) = N(72 - S)
3. Σ N(S) = 13^6 = 4 826 809
4. Inclusion-exclusion == полный перебор == свёртка
5. Валидация аргументов
"""

from collections import Counter
from itertools import product

import pytest

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


def brute_force_ways(base: int, digits: int) -> tuple[int, ...]:
    """N(S) полным перебором всех base^digits кортежей."""
    counts = Counter(sum(t) for t in product(range(base), repeat=digits))
    return tuple(counts[s] for s in range((base - 1) * digits + 1))


# =============================================================================
# ТЕСТЫ: константы раскладки
# =============================================================================


class TestLayoutConstants:
    """Тесты констант раскладки по умолчанию."""

    def test_defaults(self):
        assert DIGIT_BASE == 13
        assert HALF_LENGTH == 6
        assert MAX_SUM == 72

    def test_max_digit_sum(self):
        assert max_digit_sum() == 72
        assert max_digit_sum(3, 2) == 4
        assert max_digit_sum(2, 1) == 1

    def test_invalid_layout_rejected(self):
        with pytest.raises(ValueError, match="base must be >= 2"):
            max_digit_sum(1, 6)
        with pytest.raises(ValueError, match="digits must be >= 1"):
            max_digit_sum(13, 0)


# =============================================================================
# ТЕСТЫ: ways_for_sum
# =============================================================================


class TestWaysForSum:
    """Тесты ways_for_sum: inclusion-exclusion."""

    def test_endpoints(self):
        """Все нули и все двенадцать — единственные варианты."""
        assert ways_for_sum(0) == 1
        assert ways_for_sum(72) == 1

    def test_known_values(self):
        assert ways_for_sum(1) == 6
        assert ways_for_sum(2) == 21
        assert ways_for_sum(12) == 6188  # C(17,5), ограничение ещё не действует
        assert ways_for_sum(13) == 8562  # C(18,5) - 6
        assert ways_for_sum(14) == 11592
        assert ways_for_sum(36) == 204763

    def test_symmetry(self):
        for s in range(MAX_SUM + 1):
            assert ways_for_sum(s) == ways_for_sum(MAX_SUM - s)

    def test_out_of_range_rejected(self):
        with pytest.raises(ValueError, match="sum_ must be >= 0"):
            ways_for_sum(-1)
        with pytest.raises(ValueError, match="sum_ must be <= 72"):
            ways_for_sum(73)

    def test_non_int_rejected(self):
        with pytest.raises(ValueError, match="must be an int"):
            ways_for_sum(3.0)

    @pytest.mark.parametrize(
        "base,digits",
        [(2, 1), (3, 1), (3, 2), (4, 3), (10, 2), (13, 2), (5, 5), (2, 10)],
    )
    def test_matches_brute_force_small_layouts(self, base, digits):
        expected = brute_force_ways(base, digits)
        for s, n in enumerate(expected):
            assert ways_for_sum(s, base, digits) == n


# =============================================================================
# ТЕСТЫ: таблица N(S)
# =============================================================================


class TestWaysTable:
    """Тесты WAYS_TABLE и build_ways_table."""

    def test_table_shape(self):
        assert isinstance(WAYS_TABLE, tuple)
        assert len(WAYS_TABLE) == MAX_SUM + 1

    def test_table_total(self):
        assert sum(WAYS_TABLE) == 13**6 == 4826809

    def test_table_is_symmetric(self):
        assert WAYS_TABLE == WAYS_TABLE[::-1]

    def test_peak_in_the_middle(self):
        assert max(WAYS_TABLE) == WAYS_TABLE[36]

    def test_build_matches_precomputed(self):
        assert build_ways_table() == WAYS_TABLE

    def test_matches_convolution(self):
        assert convolve_digit_sums() == WAYS_TABLE

    def test_matches_exhaustive_enumeration(self):
        """Полный перебор всех 13^6 половин."""
        assert brute_force_ways(13, 6) == WAYS_TABLE

    def test_small_tables(self):
        assert build_ways_table(3, 1) == (1, 1, 1)
        assert build_ways_table(3, 2) == (1, 2, 3, 2, 1)
        assert build_ways_table(2, 3) == (1, 3, 3, 1)


# =============================================================================
# ТЕСТЫ: свёртка
# =============================================================================


class TestConvolveDigitSums:
    """Тесты convolve_digit_sums."""

    def test_single_digit_is_uniform(self):
        assert convolve_digit_sums(13, 1) == (1,) * 13

    @pytest.mark.parametrize("base,digits", [(3, 2), (4, 4), (7, 3)])
    def test_matches_brute_force(self, base, digits):
        assert convolve_digit_sums(base, digits) == brute_force_ways(base, digits)


# =============================================================================
# ТЕСТЫ: диагностика распределения
# =============================================================================


class TestCheckDistribution:
    """Тесты check_distribution."""

    def test_default_table_passes(self):
        result = check_distribution(WAYS_TABLE)
        assert isinstance(result, DistributionCheck)
        assert result.is_symmetric is True
        assert result.total_matches is True
        assert result.matches_convolution is True
        assert result.passed is True
        assert result.details.startswith("OK")

    def test_asymmetric_table_fails(self):
        ways = list(WAYS_TABLE)
        ways[0] += 1
        result = check_distribution(tuple(ways))
        assert result.is_symmetric is False
        assert result.total_matches is False
        assert result.matches_convolution is False
        assert result.passed is False
        assert result.details.startswith("FAILED")
        assert "not symmetric" in result.details

    def test_symmetric_but_wrong_table_fails(self):
        ways = list(WAYS_TABLE)
        ways[0] += 1
        ways[MAX_SUM] += 1
        result = check_distribution(tuple(ways))
        assert result.is_symmetric is True
        assert result.total_matches is False
        assert result.matches_convolution is False
        assert "S=[0, 72]" in result.details

    def test_other_layout(self):
        assert check_distribution((1, 2, 3, 2, 1), base=3, digits=2).passed is True

    def test_wrong_length_rejected(self):
        with pytest.raises(ValueError, match="ways must have 73 entries"):
            check_distribution(WAYS_TABLE[:-1])

    def test_negative_entry_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            check_distribution((1, -1, 1), base=3, digits=1)
