"""
Core math modules для find_e

Численные примитивы и нормализация значений в декаду [1.0, 10.0].
"""

# Numerical Safeguards
from find_e.core.math.numerical_safeguards import (
    # Exceptions
    InvalidInput,
    # Validation
    is_valid_float,
    validate_not_nan,
    validate_positive,
    # Relative error
    relative_error,
    # Rounding
    round_half_away,
    round_to_decimals,
)

# Normalization
from find_e.core.math.normalization import (
    DECADE_HIGH,
    DECADE_LOW,
    normalize,
    normalize_with_shift,
)

__all__ = [
    # Numerical Safeguards: Exceptions
    "InvalidInput",
    # Numerical Safeguards: Validation
    "is_valid_float",
    "validate_not_nan",
    "validate_positive",
    # Numerical Safeguards: Relative error
    "relative_error",
    # Numerical Safeguards: Rounding
    "round_half_away",
    "round_to_decimals",
    # Normalization: Constants
    "DECADE_HIGH",
    "DECADE_LOW",
    # Normalization: Functions
    "normalize",
    "normalize_with_shift",
]
