"""
Binomial — Combination Counter

Биномиальные коэффициенты для inclusion-exclusion подсчёта распределения
сумм цифр:
- C(n, 5) в замкнутой форме (stars-and-bars для 6 цифр)
- Фиксированная строка C(6, k), k = 0..6
- Общий C(n, k) и строка треугольника Паскаля для других раскладок

СОГЛАШЕНИЕ:
    C(n, k) = 0                     если n < k, k < 0 или n < 0
    C(n, k) = n! / (k! · (n-k)!)    иначе

Произведение 5 последовательных целых всегда делится на 5! = 120,
поэтому целочисленное деление в binomial_n_5 точное.
"""

import math
from typing import Final

from src.core.math.integer_safeguards import (
    validate_int,
    validate_non_negative_int,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# C(6, k) для k = 0..6
BINOM_ROW_6: Final[tuple[int, ...]] = (1, 6, 15, 20, 15, 6, 1)

# Знаменатель C(n, 5): 5! = 120
_FACTORIAL_5: Final[int] = 120


# =============================================================================
# C(n, 5)
# =============================================================================


def binomial_n_5(n: int) -> int:
    """
    C(n, 5) для малых неотрицательных n.

    Формула: n·(n-1)·(n-2)·(n-3)·(n-4) / 120, и 0 при n < 5.

    Args:
        n: Верхний аргумент (любое int; при n < 5 результат 0)

    Returns:
        C(n, 5)

    Raises:
        ValueError: если n не int

    Examples:
        >>> binomial_n_5(4)
        0
        >>> binomial_n_5(5)
        1
        >>> binomial_n_5(7)
        21
        >>> binomial_n_5(77)
        19757815
    """
    validate_int(n, "n")

    if n < 5:
        return 0

    return (n * (n - 1) * (n - 2) * (n - 3) * (n - 4)) // _FACTORIAL_5


# =============================================================================
# ОБЩИЙ C(n, k)
# =============================================================================


def binomial(n: int, k: int) -> int:
    """
    Общий биномиальный коэффициент с нулевым соглашением.

    math.comb отвергает отрицательные аргументы, поэтому они
    обрабатываются до вызова.

    Examples:
        >>> binomial(6, 3)
        20
        >>> binomial(3, 5)
        0
        >>> binomial(-1, 0)
        0
    """
    validate_int(n, "n")
    validate_int(k, "k")

    if n < 0 or k < 0 or n < k:
        return 0

    return math.comb(n, k)


def binomial_row(n: int) -> tuple[int, ...]:
    """
    Строка треугольника Паскаля: (C(n, 0), ..., C(n, n)).

    Args:
        n: Номер строки (>= 0)

    Returns:
        Кортеж длины n + 1

    Raises:
        ValueError: если n < 0

    Examples:
        >>> binomial_row(0)
        (1,)
        >>> binomial_row(6) == BINOM_ROW_6
        True
    """
    validate_non_negative_int(n, "n")

    row = [1]
    for _ in range(n):
        # Каждый элемент равен сумме двух соседей сверху
        row = [1] + [row[i] + row[i + 1] for i in range(len(row) - 1)] + [1]

    return tuple(row)


# =============================================================================
# STARS AND BARS
# =============================================================================


def stars_and_bars(total: int, parts: int) -> int:
    """
    Число упорядоченных parts-кортежей неотрицательных целых с суммой total.

    Формула: C(total + parts - 1, parts - 1); 0 при total < 0.
    Для parts = 6 используется binomial_n_5.

    Args:
        total: Целевая сумма (может быть отрицательной, тогда 0)
        parts: Количество слагаемых (>= 1)

    Examples:
        >>> stars_and_bars(0, 6)
        1
        >>> stars_and_bars(2, 3)
        6
        >>> stars_and_bars(-1, 6)
        0
    """
    validate_int(total, "total")
    validate_non_negative_int(parts, "parts")

    if parts == 0:
        raise ValueError("parts must be >= 1, got 0")

    if total < 0:
        return 0

    if parts == 6:
        return binomial_n_5(total + 5)

    return binomial(total + parts - 1, parts - 1)
