"""Series Escalator — поиск наименьшего подходящего ряда.

Перебор рядов n = 3, 6, 12, 24, 48, ... (только удвоение) до потолка:
- Значения: первый ряд с худшей ошибкой строго < max_error
- Ratio: первый ряд, в котором найдена пара с ошибкой <= max_error

Порядок проверок:
1. max_error NaN → InvalidInput
2. Все значения (или ratio) валидируются до поиска → InvalidInput
3. max_error <= 0 → NO_MATCH, ни один ряд не пробуется
4. Ряды по возрастанию, остановка на первом успехе
5. Потолок исчерпан → NO_MATCH (штатный результат)
"""

import logging
from dataclasses import dataclass
from typing import Final, Iterable, Iterator, Optional

from find_e.core.domain.results import RatioSearchResult, SeriesSearchResult
from find_e.core.domain.series import (
    SERIES_INDEX_CEILING,
    SERIES_START_INDEX,
    series_progression,
)
from find_e.core.math.numerical_safeguards import validate_not_nan, validate_positive
from find_e.search.nearest import match_all
from find_e.search.ratio import IndexingConvention, match_ratio

logger = logging.getLogger(__name__)

# Допустимая относительная ошибка по умолчанию (1%)
DEFAULT_MAX_ERROR: Final[float] = 0.01


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EscalationConfig:
    """Конфигурация эскалации рядов."""

    # Первый ряд прогрессии
    start_index: int = SERIES_START_INDEX

    # Ряд n пробуется, пока 2 * n < index_ceiling
    index_ceiling: int = SERIES_INDEX_CEILING

    # Позиции ratio-поиска
    indexing: IndexingConvention = IndexingConvention.CONSISTENT


# =============================================================================
# ESCALATOR
# =============================================================================


class SeriesEscalator:
    """Series Escalator: прогрессия рядов для обоих режимов поиска.

    Stateless: конфигурация неизменяема, результаты вычисляются на каждый вызов.
    """

    def __init__(self, config: Optional[EscalationConfig] = None):
        """
        Args:
            config: конфигурация эскалации (default: EscalationConfig())
        """
        self.config = config or EscalationConfig()

    def progression(self) -> Iterator[int]:
        """Индексы рядов в порядке перебора."""
        return series_progression(self.config.start_index, self.config.index_ceiling)

    def find_best_series(
        self,
        targets: Iterable[float],
        max_error: float,
    ) -> SeriesSearchResult:
        """Наименьший ряд, приближающий все значения с ошибкой < max_error.

        Args:
            targets: Положительные значения компонентов
            max_error: Допустимая относительная ошибка (доля, не проценты)

        Returns:
            SeriesSearchResult FOUND или NO_MATCH

        Raises:
            InvalidInput: NaN max_error или невалидное значение
        """
        max_error = validate_not_nan(max_error, "max_error")
        values = [validate_positive(t, "target value") for t in targets]

        if max_error <= 0.0:
            logger.debug("max_error %s <= 0: no series can satisfy it", max_error)
            return SeriesSearchResult.no_match(max_error)

        for n in self.progression():
            nearest = match_all(values, n)
            logger.debug("E%d: worst error %.6f", n, nearest.worst_error)

            if nearest.worst_error < max_error:
                logger.info(
                    "Best series E%d (worst error %.4f%%)", n, nearest.worst_error * 100.0
                )
                return SeriesSearchResult.found(
                    max_error=max_error,
                    series_index=n,
                    worst_error=nearest.worst_error,
                    matches=nearest.matches,
                )

        logger.info("No series up to the ceiling satisfies max error %.4f%%", max_error * 100.0)
        return SeriesSearchResult.no_match(max_error)

    def find_best_ratio(self, ratio: float, max_error: float) -> RatioSearchResult:
        """Наименьший ряд с парой значений, отношение которой приближает ratio.

        Args:
            ratio: Положительное отношение
            max_error: Допустимая относительная ошибка (доля)

        Returns:
            RatioSearchResult FOUND или NO_MATCH

        Raises:
            InvalidInput: NaN max_error или невалидное ratio
        """
        max_error = validate_not_nan(max_error, "max_error")
        ratio = validate_positive(ratio, "ratio")

        if max_error <= 0.0:
            logger.debug("max_error %s <= 0: no series can satisfy it", max_error)
            return RatioSearchResult.no_match(ratio, max_error)

        for n in self.progression():
            match = match_ratio(ratio, n, max_error, self.config.indexing)
            if match is None:
                logger.debug("E%d: no pair for ratio %g", n, ratio)
                continue

            logger.info(
                "Ratio %g: E%d pair %g / %g (error %.4f%%)",
                ratio,
                n,
                match.value1,
                match.value2,
                match.error * 100.0,
            )
            return RatioSearchResult.found(
                ratio=ratio,
                max_error=max_error,
                series_index=n,
                error=match.error,
                value1=match.value1,
                value2=match.value2,
            )

        logger.info("No series up to the ceiling matches ratio %g", ratio)
        return RatioSearchResult.no_match(ratio, max_error)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def find_best_series(
    targets: Iterable[float],
    max_error: float,
    config: Optional[EscalationConfig] = None,
) -> SeriesSearchResult:
    """Поиск ряда для набора значений (см. SeriesEscalator.find_best_series)."""
    return SeriesEscalator(config).find_best_series(targets, max_error)


def find_best_ratio(
    ratio: float,
    max_error: float,
    config: Optional[EscalationConfig] = None,
) -> RatioSearchResult:
    """Поиск пары значений для ratio (см. SeriesEscalator.find_best_ratio)."""
    return SeriesEscalator(config).find_best_ratio(ratio, max_error)
