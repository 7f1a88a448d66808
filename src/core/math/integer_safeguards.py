"""
Integer Safeguards — Safe Integer Primitives

Модуль обеспечивает контроль целочисленных вычислений комбинаторного ядра:
- Проверка попадания значения в диапазон signed 64-bit
- Валидация целочисленных параметров (тип, знак, диапазон)

Python int не переполняется, но результат обязан помещаться в int64:
это контракт результата, а не ограничение интерпретатора.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значение вне [INT64_MIN, INT64_MAX] никогда не возвращается молча
2. bool не принимается как int (True/False не являются цифрами или суммами)
3. Все операции детерминированы и воспроизводимы
"""

from typing import Final

# =============================================================================
# ДИАПАЗОН SIGNED 64-BIT
# =============================================================================

INT64_MAX: Final[int] = 2**63 - 1
INT64_MIN: Final[int] = -(2**63)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class Int64OverflowViolation(ArithmeticError):
    """
    Значение вышло за пределы signed 64-bit.

    Для раскладки по умолчанию (base=13, half_length=6) не возникает;
    возможно для крупных пользовательских раскладок.
    """

    pass


# =============================================================================
# ПРОВЕРКИ ДИАПАЗОНА
# =============================================================================


def is_int64(value: int) -> bool:
    """
    Проверка, помещается ли целое в signed 64-bit.

    Examples:
        >>> is_int64(2**63 - 1)
        True
        >>> is_int64(2**63)
        False
    """
    return INT64_MIN <= value <= INT64_MAX


def ensure_int64(value: int, name: str = "value") -> int:
    """
    Возвращает value, если оно помещается в signed 64-bit.

    Args:
        value: Проверяемое целое
        name: Имя величины (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        Int64OverflowViolation: если value вне [INT64_MIN, INT64_MAX]

    Examples:
        >>> ensure_int64(9203637295151, "total")
        9203637295151
    """
    if not is_int64(value):
        raise Int64OverflowViolation(
            f"{name}={value} does not fit signed 64-bit "
            f"[{INT64_MIN}, {INT64_MAX}]"
        )
    return value


# =============================================================================
# ВАЛИДАЦИЯ ПАРАМЕТРОВ
# =============================================================================


def validate_int(value: int, name: str) -> None:
    """
    Валидация, что значение является int (bool отвергается).

    Raises:
        ValueError: Если value не int или является bool
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {value!r}")


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация, что значение — неотрицательное int.

    Raises:
        ValueError: Если value не int или value < 0
    """
    validate_int(value, name)

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_int_in_range(
    value: int,
    name: str,
    min_value: int | None = None,
    max_value: int | None = None,
) -> None:
    """
    Валидация, что int в заданном диапазоне (границы включительно).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ValueError: Если value не int или вне диапазона
    """
    validate_int(value, name)

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
