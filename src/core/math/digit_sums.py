"""
Digit Sums — Распределение сумм цифр

Для каждой суммы S из [0, MAX_SUM] считается N(S) — число упорядоченных
кортежей из HALF_LENGTH цифр base-DIGIT_BASE с суммой ровно S.

ФОРМУЛА (inclusion-exclusion по событиям A_i = {d_i >= base}):
    N(S) = Σ_{k=0}^{digits} (-1)^k · C(digits, k) · C(S - base·k + digits-1, digits-1)

Подстановка d_i' = d_i - base сводит k нарушенных ограничений к задаче
stars-and-bars с суммой S - base·k; все k-подмножества равноправны,
отсюда множитель C(digits, k).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. N(0) = N(MAX_SUM) = 1
2. N(S) = N(MAX_SUM - S) (симметрия)
3. Σ N(S) = base^digits
4. Inclusion-exclusion совпадает со свёрткой равномерных распределений
"""

from typing import Final, NamedTuple

from src.core.math.binomial import BINOM_ROW_6, binomial_row, stars_and_bars
from src.core.math.integer_safeguards import (
    validate_int_in_range,
    validate_non_negative_int,
)

# =============================================================================
# РАСКЛАДКА ПО УМОЛЧАНИЮ
# =============================================================================

DIGIT_BASE: Final[int] = 13
HALF_LENGTH: Final[int] = 6
MAX_SUM: Final[int] = (DIGIT_BASE - 1) * HALF_LENGTH  # 72


def _validate_layout(base: int, digits: int) -> None:
    validate_int_in_range(base, "base", min_value=2)
    validate_int_in_range(digits, "digits", min_value=1)


def max_digit_sum(base: int = DIGIT_BASE, digits: int = HALF_LENGTH) -> int:
    """Максимальная сумма digits цифр base-ичной системы."""
    _validate_layout(base, digits)
    return (base - 1) * digits


# =============================================================================
# N(S) ЧЕРЕЗ INCLUSION-EXCLUSION
# =============================================================================


def ways_for_sum(
    sum_: int,
    base: int = DIGIT_BASE,
    digits: int = HALF_LENGTH,
) -> int:
    """
    N(S): число кортежей из digits цифр [0, base-1] с суммой sum_.

    Цикл по k прерывается, как только остаток sum_ - base·k < 0:
    все последующие слагаемые точно равны нулю.

    Args:
        sum_: Целевая сумма, 0 <= sum_ <= (base-1)·digits
        base: Основание системы счисления (>= 2)
        digits: Количество цифр (>= 1)

    Returns:
        N(sum_) >= 0

    Raises:
        ValueError: если sum_ вне [0, max_sum] или раскладка невалидна

    Examples:
        >>> ways_for_sum(0)
        1
        >>> ways_for_sum(1)
        6
        >>> ways_for_sum(72)
        1
        >>> ways_for_sum(36)
        204763
    """
    max_sum = max_digit_sum(base, digits)
    validate_int_in_range(sum_, "sum_", min_value=0, max_value=max_sum)

    row = BINOM_ROW_6 if digits == len(BINOM_ROW_6) - 1 else binomial_row(digits)

    result = 0
    sign = 1

    for k in range(digits + 1):
        remaining = sum_ - base * k

        # remaining < 0 → C(remaining + digits-1, digits-1) = 0 для всех k дальше
        if remaining < 0:
            break

        result += sign * row[k] * stars_and_bars(remaining, digits)
        sign = -sign

    return result


def build_ways_table(
    base: int = DIGIT_BASE,
    digits: int = HALF_LENGTH,
) -> tuple[int, ...]:
    """
    Таблица N(S) для всех S в [0, max_sum].

    Returns:
        Неизменяемый кортеж длины max_sum + 1, индексируемый по S

    Examples:
        >>> build_ways_table(3, 1)
        (1, 1, 1)
        >>> build_ways_table(3, 2)
        (1, 2, 3, 2, 1)
    """
    max_sum = max_digit_sum(base, digits)
    return tuple(ways_for_sum(s, base, digits) for s in range(max_sum + 1))


# Строится один раз при импорте; только чтение после построения
WAYS_TABLE: Final[tuple[int, ...]] = build_ways_table()


# =============================================================================
# КОНТРОЛЬ: СВЁРТКА РАВНОМЕРНЫХ РАСПРЕДЕЛЕНИЙ
# =============================================================================


def convolve_digit_sums(
    base: int = DIGIT_BASE,
    digits: int = HALF_LENGTH,
) -> tuple[int, ...]:
    """
    N(S) через динамическое программирование (независимая проверка).

    Распределение суммы digits цифр = digits-кратная свёртка
    равномерного распределения на [0, base-1].

    Examples:
        >>> convolve_digit_sums(3, 2)
        (1, 2, 3, 2, 1)
    """
    _validate_layout(base, digits)

    counts = [1]
    for _ in range(digits):
        next_counts = [0] * (len(counts) + base - 1)
        for s, ways in enumerate(counts):
            for digit in range(base):
                next_counts[s + digit] += ways
        counts = next_counts

    return tuple(counts)


# =============================================================================
# ДИАГНОСТИКА РАСПРЕДЕЛЕНИЯ
# =============================================================================


class DistributionCheck(NamedTuple):
    """
    Результат проверки таблицы N(S) на инварианты распределения.
    """

    is_symmetric: bool  # N(S) == N(max_sum - S) для всех S
    total_matches: bool  # Σ N(S) == base^digits
    matches_convolution: bool  # совпадение с convolve_digit_sums
    passed: bool  # все проверки пройдены
    details: str


def check_distribution(
    ways: tuple[int, ...],
    base: int = DIGIT_BASE,
    digits: int = HALF_LENGTH,
) -> DistributionCheck:
    """
    Проверка таблицы N(S) против инвариантов и эталонной свёртки.

    Args:
        ways: Таблица N(S), S = 0..max_sum
        base: Основание
        digits: Количество цифр в половине

    Returns:
        DistributionCheck с флагами и текстовым описанием

    Raises:
        ValueError: если длина ways не равна max_sum + 1

    Examples:
        >>> check_distribution(WAYS_TABLE).passed
        True
    """
    max_sum = max_digit_sum(base, digits)
    if len(ways) != max_sum + 1:
        raise ValueError(
            f"ways must have {max_sum + 1} entries for base={base}, "
            f"digits={digits}, got {len(ways)}"
        )
    for s, value in enumerate(ways):
        validate_non_negative_int(value, f"ways[{s}]")

    is_symmetric = all(ways[s] == ways[max_sum - s] for s in range(max_sum + 1))

    expected_total = base**digits
    actual_total = sum(ways)
    total_matches = actual_total == expected_total

    reference = convolve_digit_sums(base, digits)
    mismatched = [s for s in range(max_sum + 1) if ways[s] != reference[s]]
    matches_convolution = not mismatched

    passed = is_symmetric and total_matches and matches_convolution

    problems = []
    if not is_symmetric:
        problems.append("table is not symmetric")
    if not total_matches:
        problems.append(f"sum(ways)={actual_total} != {base}^{digits}={expected_total}")
    if not matches_convolution:
        problems.append(f"mismatch with convolution at S={mismatched[:5]}")

    if passed:
        details = (
            f"OK: base={base}, digits={digits}, max_sum={max_sum}, "
            f"sum(ways)={actual_total}"
        )
    else:
        details = "FAILED: " + "; ".join(problems)

    return DistributionCheck(
        is_symmetric=is_symmetric,
        total_matches=total_matches,
        matches_convolution=matches_convolution,
        passed=passed,
        details=details,
    )
