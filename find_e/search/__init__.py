"""Search — поиск E-ряда для значений и отношений.

- Nearest-Value Matcher: ближайшие значения одного ряда
- Ratio Matcher: пара значений ряда для отношения
- Series Escalator: прогрессия рядов E3, E6, E12, E24, E48, ...
"""

from .escalator import (
    DEFAULT_MAX_ERROR,
    EscalationConfig,
    SeriesEscalator,
    find_best_ratio,
    find_best_series,
)
from .nearest import NearestMatch, match_all, match_value
from .ratio import IndexingConvention, RatioMatch, match_ratio, position_range, rescale_pair

__all__ = [
    "DEFAULT_MAX_ERROR",
    "EscalationConfig",
    "SeriesEscalator",
    "find_best_ratio",
    "find_best_series",
    "NearestMatch",
    "match_all",
    "match_value",
    "IndexingConvention",
    "RatioMatch",
    "match_ratio",
    "position_range",
    "rescale_pair",
]
