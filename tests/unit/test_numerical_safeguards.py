"""
Тесты для Numerical Safeguards

Проверяемые инварианты:
1. Невалидный вход (<= 0, NaN, Inf, не число) → InvalidInput
2. InvalidInput совместим с ValueError
3. Относительная ошибка неотрицательна и масштабно-инвариантна
4. Округление half away from zero (семантика C round)
"""

import math

import pytest

from find_e.core.math.numerical_safeguards import (
    InvalidInput,
    is_valid_float,
    relative_error,
    round_half_away,
    round_to_decimals,
    validate_not_nan,
    validate_positive,
)


# =============================================================================
# ТЕСТЫ: Валидация
# =============================================================================


class TestValidatePositive:
    """Тесты validate_positive."""

    def test_positive_passes(self):
        """Положительные значения возвращаются как float."""
        assert validate_positive(4.7, "value") == 4.7
        assert validate_positive(1e-300, "value") == 1e-300
        assert validate_positive(3, "value") == 3.0
        assert isinstance(validate_positive(3, "value"), float)

    @pytest.mark.parametrize("bad", [0.0, -0.0, -1.0, -1e-9])
    def test_non_positive_rejected(self, bad):
        """Ноль и отрицательные значения отвергаются."""
        with pytest.raises(InvalidInput, match="must be positive"):
            validate_positive(bad, "value")

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_nan_inf_rejected(self, bad):
        """NaN/Inf отвергаются."""
        with pytest.raises(InvalidInput, match="NaN/Inf"):
            validate_positive(bad, "value")

    def test_malformed_rejected(self):
        """Нечисловой текст отвергается."""
        with pytest.raises(InvalidInput, match="must be a number"):
            validate_positive("4.7k", "value")

        with pytest.raises(InvalidInput, match="must be a number"):
            validate_positive(None, "value")

    def test_invalid_input_is_value_error(self):
        """InvalidInput перехватывается как ValueError."""
        with pytest.raises(ValueError):
            validate_positive(-1.0, "value")

    def test_name_in_message(self):
        """Имя параметра попадает в сообщение."""
        with pytest.raises(InvalidInput, match="ratio"):
            validate_positive(0.0, "ratio")


class TestValidateNotNan:
    """Тесты validate_not_nan."""

    def test_sign_and_zero_allowed(self):
        assert validate_not_nan(0.0, "max_error") == 0.0
        assert validate_not_nan(-0.5, "max_error") == -0.5
        assert validate_not_nan(0.01, "max_error") == 0.01

    def test_nan_rejected(self):
        with pytest.raises(InvalidInput, match="NaN"):
            validate_not_nan(float("nan"), "max_error")

    def test_malformed_rejected(self):
        with pytest.raises(InvalidInput):
            validate_not_nan("one percent", "max_error")


def test_is_valid_float():
    assert is_valid_float(1.0)
    assert not is_valid_float(float("nan"))
    assert not is_valid_float(float("inf"))


# =============================================================================
# ТЕСТЫ: Относительная ошибка
# =============================================================================


class TestRelativeError:
    """Тесты relative_error."""

    def test_exact_match_is_zero(self):
        assert relative_error(4.7, 4.7) == 0.0

    def test_symmetric_in_sign(self):
        """Ошибка не зависит от направления отклонения."""
        assert relative_error(2.2, 2.0) == pytest.approx(0.1)
        assert relative_error(1.8, 2.0) == pytest.approx(0.1)

    def test_relative_to_exact(self):
        """Знаменатель — точное значение, а не приближение."""
        assert relative_error(1.0, 2.0) == pytest.approx(0.5)
        assert relative_error(2.0, 1.0) == pytest.approx(1.0)

    def test_scale_invariant(self):
        """Сдвиг обоих значений на степень десяти не меняет ошибку."""
        assert relative_error(4.7, 4.56) == pytest.approx(relative_error(4700.0, 4560.0))


# =============================================================================
# ТЕСТЫ: Округление
# =============================================================================


class TestRounding:
    """Тесты round_half_away и round_to_decimals."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.5, 1),
            (1.5, 2),
            (2.5, 3),
            (2.4999, 2),
            (-0.5, -1),
            (-2.5, -3),
            (0.0, 0),
        ],
    )
    def test_half_away_from_zero(self, value, expected):
        """Половины округляются от нуля, а не к чётному."""
        assert round_half_away(value) == expected

    def test_differs_from_builtin_round(self):
        """Встроенный round использует banker's rounding."""
        assert round(2.5) == 2
        assert round_half_away(2.5) == 3

    def test_round_to_decimals(self):
        assert round_to_decimals(3.31766, 3) == 3.318
        assert round_to_decimals(9.88079, 3) == 9.881
        assert round_to_decimals(2.25, 1) == 2.3
        assert round_to_decimals(7.0, 0) == 7.0

    def test_negative_decimals_rejected(self):
        with pytest.raises(ValueError, match="decimals"):
            round_to_decimals(1.0, -1)

    def test_result_is_finite(self):
        assert math.isfinite(round_to_decimals(9.9999996, 3))
        assert round_to_decimals(9.9999996, 3) == 10.0


# =============================================================================
# ТЕСТЫ: Публичный API
# =============================================================================


def test_core_math_exports():
    """core.math экспортирует только примитивы, используемые поиском."""
    import find_e.core.math as core_math

    assert set(core_math.__all__) == {
        "InvalidInput",
        "is_valid_float",
        "validate_not_nan",
        "validate_positive",
        "relative_error",
        "round_half_away",
        "round_to_decimals",
        "DECADE_HIGH",
        "DECADE_LOW",
        "normalize",
        "normalize_with_shift",
    }
    for name in core_math.__all__:
        assert hasattr(core_math, name)
