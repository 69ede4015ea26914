"""
Domain models and value objects.

Contains E-series tables, series sources and search result models.
"""

from find_e.core.domain.results import (
    RatioSearchResult,
    SearchStatus,
    SeriesSearchResult,
    ValueMatch,
)
from find_e.core.domain.series import (
    E3,
    E6,
    E12,
    E24,
    FIXED_TABLES,
    GENERATED_DECIMALS,
    SERIES_INDEX_CEILING,
    SERIES_START_INDEX,
    SeriesSource,
    SeriesSourceKind,
    generated_entry,
    series_progression,
    series_source,
    step_ratio,
    table,
)

__all__ = [
    # Series tables
    "E3",
    "E6",
    "E12",
    "E24",
    "FIXED_TABLES",
    "GENERATED_DECIMALS",
    "SERIES_INDEX_CEILING",
    "SERIES_START_INDEX",
    # Series sources
    "SeriesSource",
    "SeriesSourceKind",
    "generated_entry",
    "series_progression",
    "series_source",
    "step_ratio",
    "table",
    # Results
    "RatioSearchResult",
    "SearchStatus",
    "SeriesSearchResult",
    "ValueMatch",
]
