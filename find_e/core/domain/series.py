"""
Series — Таблицы предпочтительных значений E-рядов (IEC 60063)

Исторические ряды E3/E6/E12/E24 стандартизованы по соглашению и НЕ выводятся
из экспоненциальной формулы. Начиная с E48 значения генерируются:

    r = 10^(1/n)
    entry(m) = round(r^m * 1000) / 1000     (round — half away from zero)

Выбор источника делается один раз на индекс ряда (SeriesSource), поисковые
процедуры диспетчеризуют по SeriesSourceKind, а не по номерам рядов.

ИНВАРИАНТЫ:
1. Фиксированные таблицы — неизменяемые кортежи уровня модуля
2. Сгенерированные таблицы вычисляются по запросу, не кэшируются и не мутируют
3. E24 не является уточнением E12: таблицы курируются независимо
4. Прогрессия индексов: 3, 6, 12, 24, 48, ... (только удвоение)
"""

import math
from enum import Enum
from typing import Final, Iterator, Optional

from pydantic import BaseModel, Field, model_validator

from find_e.core.math.numerical_safeguards import (
    InvalidInput,
    round_half_away,
    round_to_decimals,
)


# =============================================================================
# ФИКСИРОВАННЫЕ ТАБЛИЦЫ
# =============================================================================

E3: Final[tuple[float, ...]] = (1.0, 2.2, 4.7)

E6: Final[tuple[float, ...]] = (1.0, 1.5, 2.2, 3.3, 4.7, 6.8)

E12: Final[tuple[float, ...]] = (
    1.0, 1.2, 1.5, 1.8, 2.2, 2.7, 3.3, 3.9, 4.7, 5.6, 6.8, 8.2,
)

E24: Final[tuple[float, ...]] = (
    1.0, 1.1, 1.2, 1.3, 1.5, 1.6, 1.8, 2.0, 2.2, 2.4, 2.7, 3.0,
    3.3, 3.6, 3.9, 4.3, 4.7, 5.1, 5.6, 6.2, 6.8, 7.5, 8.2, 9.1,
)

FIXED_TABLES: Final[dict[int, tuple[float, ...]]] = {
    3: E3,
    6: E6,
    12: E12,
    24: E24,
}

# Точность сгенерированных значений (знаков после запятой)
GENERATED_DECIMALS: Final[int] = 3

# Прогрессия индексов рядов
SERIES_START_INDEX: Final[int] = 3

# Потолок: индекс пробуется, пока 2 * n < потолка (16-bit unsigned счётчик)
SERIES_INDEX_CEILING: Final[int] = 0xFFFF


# =============================================================================
# ENUMS
# =============================================================================


class SeriesSourceKind(str, Enum):
    """Источник значений ряда."""

    FIXED = "FIXED"
    GENERATED = "GENERATED"


# =============================================================================
# GENERATED ENTRIES
# =============================================================================


def step_ratio(n: int) -> float:
    """Шаг ряда E-n: 10^(1/n)."""
    return 10.0 ** (1.0 / n)


def generated_entry(n: int, m: int) -> float:
    """
    Значение m сгенерированного ряда E-n.

    Args:
        n: Индекс ряда
        m: Позиция в декаде (m = n даёт 10.0)

    Returns:
        round(r^m * 1000) / 1000, r = 10^(1/n)

    Examples:
        >>> generated_entry(48, 0)
        1.0
        >>> generated_entry(48, 48)
        10.0
    """
    return round_to_decimals(step_ratio(n) ** m, GENERATED_DECIMALS)


# =============================================================================
# MODELS
# =============================================================================


class SeriesSource(BaseModel):
    """
    Источник значений ряда E-n (tagged variant).

    FIXED: историческая таблица (table обязателен, len(table) == index)
    GENERATED: значения вычисляются по формуле (table отсутствует)
    """

    kind: SeriesSourceKind = Field(..., description="Fixed or generated source")
    index: int = Field(..., gt=0, description="Series index n (values per decade)")
    table: Optional[tuple[float, ...]] = Field(
        default=None, description="Literal table for FIXED sources"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_table(self) -> "SeriesSource":
        """Проверка согласованности kind и table."""
        if self.kind == SeriesSourceKind.FIXED:
            if self.table is None:
                raise ValueError("FIXED series source requires a table")
            if len(self.table) != self.index:
                raise ValueError(
                    f"FIXED table length {len(self.table)} does not match index {self.index}"
                )
        elif self.table is not None:
            raise ValueError("GENERATED series source must not carry a table")
        return self

    @property
    def name(self) -> str:
        """Имя ряда: E3, E48, ..."""
        return f"E{self.index}"

    def entry(self, m: int) -> float:
        """
        Значение ряда на позиции m.

        Raises:
            IndexError: m вне таблицы (FIXED) или m < 0
        """
        if m < 0:
            raise IndexError(f"{self.name} position must be non-negative, got {m}")

        if self.table is not None:
            return self.table[m]

        return generated_entry(self.index, m)

    def entries(self) -> tuple[float, ...]:
        """Все значения декады, позиции 0..n-1."""
        if self.table is not None:
            return self.table
        return tuple(generated_entry(self.index, m) for m in range(self.index))

    def nearest_position(self, v: float) -> int:
        """
        Ближайшая позиция сгенерированного ряда для нормализованного v.

        m = round(log(v) / log(r)); для v = 10.0 возвращает n.
        """
        return round_half_away(math.log(v) / math.log(step_ratio(self.index)))


# =============================================================================
# TABLE PROVIDER
# =============================================================================


def series_source(n: int) -> SeriesSource:
    """
    Выбор источника для ряда E-n.

    Args:
        n: Индекс ряда (> 0)

    Returns:
        FIXED для n in {3, 6, 12, 24}, иначе GENERATED

    Raises:
        InvalidInput: n <= 0
    """
    if n <= 0:
        raise InvalidInput(f"Series index must be positive, got {n}")

    fixed = FIXED_TABLES.get(n)
    if fixed is not None:
        return SeriesSource(kind=SeriesSourceKind.FIXED, index=n, table=fixed)

    return SeriesSource(kind=SeriesSourceKind.GENERATED, index=n)


def table(n: int) -> tuple[float, ...]:
    """Таблица значений ряда E-n (позиции 0..n-1)."""
    return series_source(n).entries()


def series_progression(
    start: int = SERIES_START_INDEX,
    ceiling: int = SERIES_INDEX_CEILING,
) -> Iterator[int]:
    """
    Прогрессия индексов рядов: start, 2*start, 4*start, ...

    Индекс n выдаётся, пока 2 * n < ceiling. При значениях по умолчанию
    последний индекс — 24576.

    Examples:
        >>> list(series_progression(ceiling=100))
        [3, 6, 12, 24, 48]
    """
    if start <= 0:
        raise InvalidInput(f"Series start index must be positive, got {start}")

    n = start
    while n * 2 < ceiling:
        yield n
        n *= 2
