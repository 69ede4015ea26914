"""
Contract Validation Module

Модуль для валидации JSON контрактов результатов поиска find_e.
"""

from .validators import (
    ContractValidator,
    RatioSearchResultValidator,
    SchemaLoader,
    SeriesSearchResultValidator,
    validate_ratio_search_result,
    validate_series_search_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SeriesSearchResultValidator",
    "RatioSearchResultValidator",
    # Functions
    "validate_series_search_result",
    "validate_ratio_search_result",
]
