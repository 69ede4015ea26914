"""
Numerical Safeguards — Safe Math Primitives

Базовые численные примитивы для поиска по E-рядам:
- Валидация входов (положительные, конечные float)
- Относительная ошибка |approx - exact| / exact
- Округление "half away from zero" (семантика C round), а не banker's rounding

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Невалидный вход (<= 0, NaN, Inf) отклоняется через InvalidInput до начала поиска
2. NaN/Inf никогда не попадают в вычисления ошибки
3. Все операции детерминированы и воспроизводимы
"""

import math


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidInput(ValueError):
    """
    Входные данные отклонены до начала поиска.

    Поднимается для неположительных, NaN или бесконечных значений,
    неположительного ratio или индекса ряда. Поиск в этом случае
    не выполняется (никаких частичных вычислений).
    """

    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def validate_positive(value: float, name: str) -> float:
    """
    Валидация, что значение положительное и конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как float

    Raises:
        InvalidInput: Если value <= 0, NaN/Inf или не число
    """
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"{name} must be a number, got {value!r}") from e

    if not is_valid_float(value):
        raise InvalidInput(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0.0:
        raise InvalidInput(f"{name} must be positive, got {value}")

    return value


def validate_not_nan(value: float, name: str) -> float:
    """
    Валидация, что значение не NaN (знак и ноль допустимы).

    Raises:
        InvalidInput: Если value NaN или не число
    """
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"{name} must be a number, got {value!r}") from e

    if math.isnan(value):
        raise InvalidInput(f"{name} must not be NaN")

    return value


# =============================================================================
# ОТНОСИТЕЛЬНАЯ ОШИБКА
# =============================================================================


def relative_error(approx: float, exact: float) -> float:
    """
    Относительная ошибка приближения.

    Формула: |approx - exact| / exact

    Args:
        approx: Приближённое значение (значение ряда или пробное отношение)
        exact: Точное значение (> 0, вызывающий код гарантирует валидацию)

    Returns:
        Неотрицательная относительная ошибка

    Examples:
        >>> relative_error(4.7, 4.7)
        0.0
        >>> relative_error(2.2, 2.0)  # doctest: +ELLIPSIS
        0.1000...
    """
    return abs(approx - exact) / exact


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away(value: float) -> int:
    """
    Округление до целого "half away from zero".

    Встроенный round() использует banker's rounding (round(2.5) == 2);
    значения E-рядов определены через C round (2.5 → 3).

    Examples:
        >>> round_half_away(2.5)
        3
        >>> round_half_away(-2.5)
        -3
        >>> round_half_away(2.4999)
        2
    """
    if value >= 0:
        return math.floor(value + 0.5)
    return math.ceil(value - 0.5)


def round_to_decimals(value: float, decimals: int) -> float:
    """
    Округление до заданного числа знаков после запятой (half away from zero).

    Формула: round_half_away(value * 10^decimals) / 10^decimals

    Args:
        value: Значение для округления
        decimals: Количество знаков после запятой (>= 0)

    Returns:
        Округлённое значение

    Examples:
        >>> round_to_decimals(3.31766, 3)
        3.318
        >>> round_to_decimals(2.25, 1)
        2.3
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    scale = 10.0 ** decimals
    return round_half_away(value * scale) / scale
