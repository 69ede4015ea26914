"""
Normalization — приведение значения к декаде [1.0, 10.0]

Любое положительное значение сдвигается на целую степень десяти:
    0.00456 → 4.56
    12300   → 1.23

Граница 10.0 включительная: условия циклов несимметричны (< 1.0 и > 10.0),
поэтому 10.0 и 100.0 нормализуются в 10.0, а не в 1.0.

Ошибка в поиске — отношение, поэтому она инвариантна к сдвигу.
Сдвиг нужен только ratio-поиску для восстановления порядка величины.
"""

from typing import Final

from find_e.core.math.numerical_safeguards import validate_positive

# Границы декады
DECADE_LOW: Final[float] = 1.0
DECADE_HIGH: Final[float] = 10.0


def normalize_with_shift(d: float) -> tuple[float, int]:
    """
    Нормализация с подсчётом десятичного сдвига.

    Args:
        d: Положительное значение

    Returns:
        (normalized, shift): normalized in [1.0, 10.0] и d ≈ normalized * 10**shift
        (shift > 0 при делении, shift < 0 при умножении)

    Raises:
        InvalidInput: d <= 0, NaN или Inf

    Examples:
        >>> normalize_with_shift(4700.0)
        (4.7, 3)
        >>> normalize_with_shift(0.5)
        (5.0, -1)
        >>> normalize_with_shift(10.0)
        (10.0, 0)
    """
    d = validate_positive(d, "value")
    shift = 0

    if d < DECADE_LOW:
        while d < DECADE_LOW:
            d *= 10
            shift -= 1
    else:
        while d > DECADE_HIGH:
            d /= 10
            shift += 1

    return d, shift


def normalize(d: float) -> float:
    """
    Нормализация положительного значения в [1.0, 10.0].

    Значения уже в диапазоне возвращаются без изменений.

    Raises:
        InvalidInput: d <= 0, NaN или Inf
    """
    return normalize_with_shift(d)[0]
