"""
NumeralLayout — Модель раскладки "красивого" числа

Immutable Pydantic модель, описывающая числа вида
    [half_length цифр] [1 средняя цифра] [half_length цифр]
в системе счисления base. Раскладка по умолчанию: base=13, half_length=6
(13-значные числа в base-13).
"""

from typing import Final

from pydantic import BaseModel, Field

from src.core.math.digit_sums import DIGIT_BASE, HALF_LENGTH


# =============================================================================
# ОГРАНИЧЕНИЯ РАСКЛАДКИ
# =============================================================================

# Больше 36 цифр не записать символами 0-9A-Z
BASE_MAX: Final[int] = 36

# При больших половинах brute-force сверка теряет смысл, а total растёт
# за пределы int64 уже для умеренных base
HALF_LENGTH_MAX: Final[int] = 16


# =============================================================================
# LAYOUT MODEL
# =============================================================================


class NumeralLayout(BaseModel):
    """
    Раскладка числа: основание и длина каждой половины.

    Immutable модель (frozen=True). Средняя цифра не ограничена и даёт
    множитель base к итоговому количеству.
    """

    base: int = Field(
        DIGIT_BASE, ge=2, le=BASE_MAX, strict=True, description="Основание системы счисления"
    )
    half_length: int = Field(
        HALF_LENGTH,
        ge=1,
        le=HALF_LENGTH_MAX,
        strict=True,
        description="Количество цифр в каждой половине",
    )

    model_config = {"frozen": True}

    @property
    def max_sum(self) -> int:
        """Максимальная сумма цифр половины: half_length · (base - 1)."""
        return self.half_length * (self.base - 1)

    @property
    def total_digits(self) -> int:
        """Полная длина числа: две половины и средняя цифра."""
        return 2 * self.half_length + 1

    @property
    def half_combinations(self) -> int:
        """Число всех половин без ограничения суммы: base^half_length."""
        return self.base**self.half_length

    @property
    def is_default(self) -> bool:
        return self.base == DIGIT_BASE and self.half_length == HALF_LENGTH


DEFAULT_LAYOUT: Final[NumeralLayout] = NumeralLayout()
