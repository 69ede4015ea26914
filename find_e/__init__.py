"""
find_e — поиск наименьшего E-ряда (IEC 60063) для значений компонентов.

Публичный API:
- find_best_series: ряд для набора значений
- find_best_ratio: пара значений ряда для отношения
"""

from find_e.core.domain.results import (
    RatioSearchResult,
    SearchStatus,
    SeriesSearchResult,
    ValueMatch,
)
from find_e.core.math.numerical_safeguards import InvalidInput
from find_e.search.escalator import (
    EscalationConfig,
    SeriesEscalator,
    find_best_ratio,
    find_best_series,
)
from find_e.search.ratio import IndexingConvention

__version__ = "0.1.0"

__all__ = [
    "EscalationConfig",
    "IndexingConvention",
    "InvalidInput",
    "RatioSearchResult",
    "SearchStatus",
    "SeriesEscalator",
    "SeriesSearchResult",
    "ValueMatch",
    "find_best_ratio",
    "find_best_series",
]
