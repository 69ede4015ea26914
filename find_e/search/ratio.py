"""Ratio Matcher — пара значений ряда, отношение которой приближает ratio.

Алгоритм:
1. Нормализация ratio в [1.0, 10.0] (с запоминанием десятичного сдвига)
2. Перебор пар (e1, e2), e2 <= e1, по возрастанию e1, затем e2
3. Первая пара с |v1/v2 - ratio_n| / ratio_n <= max_error принимается
4. Пара масштабируется целыми степенями десяти до порядка исходного ratio

Соглашение об индексах (IndexingConvention):
- CONSISTENT: позиции 0..n-1, как у nearest-value matcher
- LEGACY: позиции 1..n, как в исходном инструменте; для FIXED таблиц
  позиция за концом таблицы ограничивается последним значением

GENERATED ряды: для фиксированного e1 отношение v1/v2 не возрастает по e2,
поэтому допустимые e2 образуют непрерывный отрезок; первый допустимый e2
находится бисекцией. Результат совпадает с полным перебором.

Степень десяти >= 10 (10, 100, 1000, ...) нормализуется в 10.0, а не в 1.0.
При CONSISTENT пара с отношением 10.0 недостижима (v1 < 10.0, v2 >= 1.0),
поэтому такой ratio находится только в плотном ряду (E384 при 1%).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final, Optional

from find_e.core.domain.series import (
    GENERATED_DECIMALS,
    SeriesSource,
    SeriesSourceKind,
    series_source,
)
from find_e.core.math.normalization import normalize_with_shift
from find_e.core.math.numerical_safeguards import relative_error, round_to_decimals

# Относительный запас границ бисекции; окончательная проверка через relative_error
BISECT_BOUND_SLACK: Final[float] = 1e-9


class IndexingConvention(str, Enum):
    """Диапазон позиций, перебираемых ratio-поиском."""

    CONSISTENT = "consistent"
    LEGACY = "legacy"


@dataclass(frozen=True)
class RatioMatch:
    """Найденная пара значений ряда."""

    series_index: int
    error: float

    # Значения декады (до масштабирования)
    digit1: float
    digit2: float

    # Масштабированные значения: value1 / value2 ≈ исходное ratio
    value1: float
    value2: float


def position_range(source: SeriesSource, indexing: IndexingConvention) -> range:
    """Перебираемые позиции ряда."""
    if indexing == IndexingConvention.LEGACY:
        return range(1, source.index + 1)
    return range(0, source.index)


def _value_at(source: SeriesSource, m: int) -> float:
    if source.table is not None:
        return source.table[min(m, len(source.table) - 1)]
    return source.entry(m)


def _scale(digit: float, steps: int) -> float:
    if steps <= 0:
        return digit
    # Значение ряда имеет не более GENERATED_DECIMALS знаков после запятой
    return round_to_decimals(digit * 10.0 ** steps, max(GENERATED_DECIMALS - steps, 0))


def rescale_pair(value1: float, value2: float, shift: int) -> tuple[float, float]:
    """
    Восстановление порядка величины найденной пары.

    shift > 0: value1 умножается на 10**shift
    shift < 0: value2 умножается на 10**(-shift)
    Масштабируется только одно значение, одним шагом; результат
    округляется до точности значения ряда (9.94 * 10 == 99.4).

    Examples:
        >>> rescale_pair(2.0, 1.0, 1)
        (20.0, 1.0)
        >>> rescale_pair(2.0, 1.0, -2)
        (2.0, 100.0)
    """
    return _scale(value1, shift), _scale(value2, -shift)


def _search_fixed(
    source: SeriesSource,
    positions: range,
    target: float,
    max_error: float,
) -> Optional[tuple[float, float, float]]:
    values = [_value_at(source, m) for m in positions]

    for i, v1 in enumerate(values):
        for v2 in values[: i + 1]:
            err = relative_error(v1 / v2, target)
            if err <= max_error:
                return err, v1, v2

    return None


def _first_at_or_below(
    ratio_at: Callable[[int], float],
    lo: int,
    hi: int,
    bound: float,
) -> Optional[int]:
    """Наименьшая позиция в [lo, hi] с ratio_at(pos) <= bound (ratio_at не возрастает)."""
    if ratio_at(hi) > bound:
        return None

    while lo < hi:
        mid = (lo + hi) // 2
        if ratio_at(mid) <= bound:
            hi = mid
        else:
            lo = mid + 1

    return lo


def _search_generated(
    source: SeriesSource,
    positions: range,
    target: float,
    max_error: float,
) -> Optional[tuple[float, float, float]]:
    upper = target * (1.0 + max_error) * (1.0 + BISECT_BOUND_SLACK)
    lower = target * (1.0 - max_error) * (1.0 - BISECT_BOUND_SLACK)
    first = positions.start

    for e1 in positions:
        v1 = source.entry(e1)

        def ratio_at(e2: int) -> float:
            return v1 / source.entry(e2)

        e2 = _first_at_or_below(ratio_at, first, e1, upper)
        if e2 is None:
            continue

        while e2 <= e1:
            v2 = source.entry(e2)
            trial = v1 / v2
            if trial < lower:
                break
            err = relative_error(trial, target)
            if err <= max_error:
                return err, v1, v2
            e2 += 1

    return None


def match_ratio(
    ratio: float,
    n: int,
    max_error: float,
    indexing: IndexingConvention = IndexingConvention.CONSISTENT,
) -> Optional[RatioMatch]:
    """
    Поиск пары значений ряда E-n для отношения.

    Args:
        ratio: Положительное отношение (любой порядок величины)
        n: Индекс ряда
        max_error: Допустимая относительная ошибка (пара принимается при <=)
        indexing: Соглашение о перебираемых позициях

    Returns:
        RatioMatch для первой подходящей пары или None

    Raises:
        InvalidInput: ratio <= 0, NaN/Inf или n <= 0
    """
    target, shift = normalize_with_shift(ratio)
    source = series_source(n)
    positions = position_range(source, indexing)

    if source.kind == SeriesSourceKind.FIXED:
        found = _search_fixed(source, positions, target, max_error)
    else:
        found = _search_generated(source, positions, target, max_error)

    if found is None:
        return None

    err, digit1, digit2 = found
    value1, value2 = rescale_pair(digit1, digit2, shift)

    return RatioMatch(
        series_index=n,
        error=err,
        digit1=digit1,
        digit2=digit2,
        value1=value1,
        value2=value2,
    )
