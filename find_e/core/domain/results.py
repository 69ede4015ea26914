"""
Results — Модели результатов поиска E-ряда

Immutable Pydantic модели:
- ValueMatch: нормализованное значение → значение ряда + относительная ошибка
- SeriesSearchResult: FOUND(series_index, worst_error, matches) | NO_MATCH
- RatioSearchResult: FOUND(series_index, error, value1, value2) | NO_MATCH

NO_MATCH — штатный результат (ряд не найден до потолка), не исключение.
Сериализация соответствует контрактам find_e/core/contracts/schema/.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class SearchStatus(str, Enum):
    """Статус поиска."""

    FOUND = "FOUND"
    NO_MATCH = "NO_MATCH"


# =============================================================================
# MODELS
# =============================================================================


class ValueMatch(BaseModel):
    """
    Соответствие одного нормализованного значения значению ряда.

    error = |matched - original| / original
    """

    original: float = Field(..., gt=0, description="Normalized requested value")
    matched: float = Field(..., gt=0, description="Nearest series value")
    error: float = Field(..., ge=0, description="Relative error")

    model_config = {"frozen": True}


class SeriesSearchResult(BaseModel):
    """
    Результат поиска наименьшего подходящего ряда для набора значений.

    matches упорядочены по возрастанию original; дубликаты после
    нормализации схлопнуты в одну запись.
    """

    status: SearchStatus = Field(..., description="FOUND or NO_MATCH")
    max_error: float = Field(..., description="Requested maximum relative error")
    series_index: Optional[int] = Field(default=None, gt=0, description="Best series n")
    worst_error: Optional[float] = Field(default=None, ge=0, description="Largest error")
    matches: tuple[ValueMatch, ...] = Field(default=(), description="Per-value matches")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_status(self) -> "SeriesSearchResult":
        """FOUND несёт индекс и ошибку, NO_MATCH — нет."""
        if self.status == SearchStatus.FOUND:
            if self.series_index is None or self.worst_error is None:
                raise ValueError("FOUND result requires series_index and worst_error")
        elif self.series_index is not None or self.worst_error is not None or self.matches:
            raise ValueError("NO_MATCH result must not carry series data")
        return self

    @classmethod
    def found(
        cls,
        max_error: float,
        series_index: int,
        worst_error: float,
        matches: tuple[ValueMatch, ...],
    ) -> "SeriesSearchResult":
        return cls(
            status=SearchStatus.FOUND,
            max_error=max_error,
            series_index=series_index,
            worst_error=worst_error,
            matches=tuple(sorted(matches, key=lambda m: m.original)),
        )

    @classmethod
    def no_match(cls, max_error: float) -> "SeriesSearchResult":
        return cls(status=SearchStatus.NO_MATCH, max_error=max_error)

    @property
    def is_found(self) -> bool:
        return self.status == SearchStatus.FOUND

    @property
    def series_name(self) -> Optional[str]:
        return f"E{self.series_index}" if self.series_index is not None else None

    @property
    def mapping(self) -> dict[float, float]:
        """Нормализованное значение → значение ряда."""
        return {m.original: m.matched for m in self.matches}


class RatioSearchResult(BaseModel):
    """
    Результат поиска пары значений ряда для отношения.

    value1 / value2 приближает исходное (не нормализованное) ratio:
    пара масштабирована целыми степенями десяти.
    """

    status: SearchStatus = Field(..., description="FOUND or NO_MATCH")
    ratio: float = Field(..., gt=0, description="Requested ratio")
    max_error: float = Field(..., description="Requested maximum relative error")
    series_index: Optional[int] = Field(default=None, gt=0, description="Series n")
    error: Optional[float] = Field(default=None, ge=0, description="Relative error of the pair")
    value1: Optional[float] = Field(default=None, gt=0, description="Numerator value")
    value2: Optional[float] = Field(default=None, gt=0, description="Denominator value")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_status(self) -> "RatioSearchResult":
        """FOUND несёт полную пару, NO_MATCH — ничего."""
        payload = (self.series_index, self.error, self.value1, self.value2)
        if self.status == SearchStatus.FOUND:
            if any(v is None for v in payload):
                raise ValueError("FOUND result requires series_index, error, value1 and value2")
        elif any(v is not None for v in payload):
            raise ValueError("NO_MATCH result must not carry series data")
        return self

    @classmethod
    def found(
        cls,
        ratio: float,
        max_error: float,
        series_index: int,
        error: float,
        value1: float,
        value2: float,
    ) -> "RatioSearchResult":
        return cls(
            status=SearchStatus.FOUND,
            ratio=ratio,
            max_error=max_error,
            series_index=series_index,
            error=error,
            value1=value1,
            value2=value2,
        )

    @classmethod
    def no_match(cls, ratio: float, max_error: float) -> "RatioSearchResult":
        return cls(status=SearchStatus.NO_MATCH, ratio=ratio, max_error=max_error)

    @property
    def is_found(self) -> bool:
        return self.status == SearchStatus.FOUND

    @property
    def series_name(self) -> Optional[str]:
        return f"E{self.series_index}" if self.series_index is not None else None

    @property
    def achieved_ratio(self) -> Optional[float]:
        if self.value1 is None or self.value2 is None:
            return None
        return self.value1 / self.value2
