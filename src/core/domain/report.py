"""
BeautifulCountReport — Модель отчёта о подсчёте "красивых" чисел

Immutable Pydantic модель с полной таблицей N(S) и итогом.
Полная совместимость с JSON Schema (contracts/schema/beautiful_count_report.json).
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.layout import NumeralLayout
from src.core.math.integer_safeguards import INT64_MAX


class BeautifulCountReport(BaseModel):
    """
    Отчёт о подсчёте "красивых" чисел для одной раскладки.

    Immutable модель (frozen=True). Согласованность полей проверяется
    при создании:
    - len(ways) == max_sum + 1
    - sum(ways) == half_combinations
    - total == middle_digit_choices · Σ N(S)²
    """

    schema_version: str = Field(
        "1", pattern="^1$", description="Версия схемы для tracking совместимости"
    )
    layout: NumeralLayout = Field(..., description="Раскладка числа")
    max_sum: int = Field(..., ge=0, description="Максимальная сумма цифр половины")
    ways: tuple[int, ...] = Field(..., min_length=1, description="N(S) для S = 0..max_sum")
    half_combinations: int = Field(..., ge=1, description="base^half_length")
    middle_digit_choices: int = Field(..., ge=2, description="Варианты средней цифры")
    total: int = Field(
        ..., ge=0, le=INT64_MAX, description="Количество красивых чисел (int64)"
    )

    model_config = {"frozen": True}

    @field_validator("ways")
    @classmethod
    def validate_ways_non_negative(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """N(S) — количество, отрицательные значения невозможны."""
        for s, value in enumerate(v):
            if value < 0:
                raise ValueError(f"ways[{s}]={value} is negative")
        return v

    @model_validator(mode="after")
    def validate_consistency(self) -> "BeautifulCountReport":
        """Проверка согласованности таблицы, раскладки и итога."""
        if self.max_sum != self.layout.max_sum:
            raise ValueError(
                f"max_sum {self.max_sum} does not match layout max_sum {self.layout.max_sum}"
            )

        if len(self.ways) != self.max_sum + 1:
            raise ValueError(
                f"ways must have {self.max_sum + 1} entries, got {len(self.ways)}"
            )

        if self.half_combinations != self.layout.half_combinations:
            raise ValueError(
                f"half_combinations {self.half_combinations} != "
                f"{self.layout.base}^{self.layout.half_length}"
            )

        if sum(self.ways) != self.half_combinations:
            raise ValueError(
                f"sum(ways)={sum(self.ways)} != half_combinations={self.half_combinations}"
            )

        if self.middle_digit_choices != self.layout.base:
            raise ValueError(
                f"middle_digit_choices {self.middle_digit_choices} != base {self.layout.base}"
            )

        expected_total = self.middle_digit_choices * sum(n * n for n in self.ways)
        if self.total != expected_total:
            raise ValueError(f"total {self.total} != expected {expected_total}")

        return self

    def ways_for(self, sum_: int) -> int:
        """
        N(S) из таблицы отчёта.

        Raises:
            ValueError: если sum_ вне [0, max_sum]
        """
        if not 0 <= sum_ <= self.max_sum:
            raise ValueError(f"sum_ must be in [0, {self.max_sum}], got {sum_}")
        return self.ways[sum_]
