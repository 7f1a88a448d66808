"""Aggregator — итоговое количество "красивых" чисел.

Красивое число с суммой половины S собирается независимым выбором:
- левой половины с суммой S   — N(S) способов
- средней цифры               — base способов
- правой половины с суммой S  — N(S) способов

Итог: total = Σ_{S=0}^{max_sum} base · N(S)²
Для base=13, half_length=6: 9 203 637 295 151 (помещается в int64).
"""

from typing import Final, Optional

from src.core.domain.layout import DEFAULT_LAYOUT, NumeralLayout
from src.core.domain.report import BeautifulCountReport
from src.core.math.digit_sums import WAYS_TABLE, build_ways_table
from src.core.math.integer_safeguards import ensure_int64

# Итог для раскладки по умолчанию (13 цифр, base 13)
BEAUTIFUL_NUMBER_COUNT: Final[int] = 9203637295151


def _ways_for_layout(layout: NumeralLayout) -> tuple[int, ...]:
    if layout.is_default:
        return WAYS_TABLE
    return build_ways_table(layout.base, layout.half_length)


def _aggregate(ways: tuple[int, ...], middle_digit_choices: int) -> int:
    total = 0
    for s, n in enumerate(ways):
        total += middle_digit_choices * n * n
        # Каждая частичная сумма обязана помещаться в int64
        ensure_int64(total, f"partial total at S={s}")
    return total


def count_beautiful_numbers(layout: Optional[NumeralLayout] = None) -> int:
    """Количество красивых чисел для раскладки (по умолчанию base=13, half_length=6).

    Raises:
        Int64OverflowViolation: если итог раскладки не помещается в int64
    """
    if layout is None:
        layout = DEFAULT_LAYOUT
    ways = _ways_for_layout(layout)
    return ensure_int64(_aggregate(ways, layout.base), "total")


def build_count_report(layout: Optional[NumeralLayout] = None) -> BeautifulCountReport:
    """Полный отчёт: таблица N(S), промежуточные величины и итог.

    Результат `report.model_dump(mode="json")` соответствует
    contracts/schema/beautiful_count_report.json.
    """
    if layout is None:
        layout = DEFAULT_LAYOUT
    ways = _ways_for_layout(layout)

    return BeautifulCountReport(
        layout=layout,
        max_sum=layout.max_sum,
        ways=ways,
        half_combinations=layout.half_combinations,
        middle_digit_choices=layout.base,
        total=ensure_int64(_aggregate(ways, layout.base), "total"),
    )
