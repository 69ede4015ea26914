"""Nearest-Value Matcher — ближайшие значения ряда для набора значений.

Для каждого значения:
1. Нормализация в [1.0, 10.0]
2. FIXED ряд: линейный проход по всей таблице, строгое "<" —
   при равенстве ошибок остаётся запись с наименьшим индексом
3. GENERATED ряд: позиция вычисляется напрямую, m = round(log(v) / log(r)),
   без прохода по таблице

Худшая ошибка ряда — max по всем значениям (детерминированная редукция,
не зависит от порядка). Значения, совпадающие после нормализации,
схлопываются в одну запись (побеждает последнее).
"""

from dataclasses import dataclass
from typing import Iterable

from find_e.core.domain.results import ValueMatch
from find_e.core.domain.series import SeriesSource, SeriesSourceKind, series_source
from find_e.core.math.normalization import normalize
from find_e.core.math.numerical_safeguards import relative_error


@dataclass(frozen=True)
class NearestMatch:
    """Результат сопоставления набора значений одному ряду."""

    series_index: int
    worst_error: float

    # Упорядочены по возрастанию нормализованного значения
    matches: tuple[ValueMatch, ...]

    @property
    def mapping(self) -> dict[float, float]:
        return {m.original: m.matched for m in self.matches}


def match_value(value: float, source: SeriesSource) -> ValueMatch:
    """Ближайшее значение ряда для одного значения.

    Args:
        value: Положительное значение (нормализуется здесь)
        source: Источник ряда

    Returns:
        ValueMatch(original=нормализованное значение, matched, error)

    Raises:
        InvalidInput: value <= 0, NaN или Inf
    """
    v = normalize(value)

    if source.kind == SeriesSourceKind.FIXED:
        best_entry = None
        best_error = -1.0
        for entry in source.entries():
            err = relative_error(entry, v)
            if err < best_error or best_error < 0:
                best_entry = entry
                best_error = err
        return ValueMatch(original=v, matched=best_entry, error=best_error)

    entry = source.entry(source.nearest_position(v))
    return ValueMatch(original=v, matched=entry, error=relative_error(entry, v))


def match_all(values: Iterable[float], n: int) -> NearestMatch:
    """Сопоставление всех значений ряду E-n.

    Args:
        values: Положительные значения
        n: Индекс ряда

    Returns:
        NearestMatch с худшей ошибкой (0.0 для пустого набора)

    Raises:
        InvalidInput: Невалидное значение или n
    """
    source = series_source(n)

    collapsed: dict[float, ValueMatch] = {}
    for value in values:
        match = match_value(value, source)
        collapsed[match.original] = match

    worst_error = max((m.error for m in collapsed.values()), default=0.0)

    return NearestMatch(
        series_index=n,
        worst_error=worst_error,
        matches=tuple(sorted(collapsed.values(), key=lambda m: m.original)),
    )
