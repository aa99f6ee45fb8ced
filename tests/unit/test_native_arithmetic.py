"""
Тесты для модуля Native Arithmetic

Проверяет:
1. Валидацию нативных чисел (NaN/Inf, bool)
2. Округление до фиксированного числа знаков
3. Единую политику округления для всех операций
4. Сохранение int для целых результатов
5. Переполнение и деление на ноль
"""

import math

import pytest

from bigcalc.core.math.long_arithmetic import DivisionByZero
from bigcalc.core.math.native_arithmetic import (
    DEFAULT_NATIVE_PRECISION,
    MAX_NATIVE_INTEGER,
    NativeOverflow,
    is_integral,
    is_native_number,
    is_valid_float,
    native_add,
    native_divide,
    native_multiply,
    native_power,
    native_subtract,
    round_to_precision,
    validate_finite,
)

# =============================================================================
# ТЕСТЫ ПРОВЕРОК
# =============================================================================


class TestValidation:
    """Тесты для is_valid_float / validate_finite / is_integral"""

    def test_constants(self) -> None:
        assert MAX_NATIVE_INTEGER == 9_007_199_254_740_991
        assert DEFAULT_NATIVE_PRECISION == 2

    def test_is_valid_float(self) -> None:
        assert is_valid_float(1.0)
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))

    def test_is_native_number(self) -> None:
        assert is_native_number(1)
        assert is_native_number(1.5)
        assert not is_native_number(True)
        assert not is_native_number("1")

    def test_validate_finite_raises(self) -> None:
        with pytest.raises(ValueError, match="not NaN/Inf"):
            validate_finite(float("nan"), "a")
        with pytest.raises(ValueError, match="must be int or float"):
            validate_finite(True, "a")
        validate_finite(10, "a")
        validate_finite(-0.5, "a")

    def test_is_integral(self) -> None:
        assert is_integral(3)
        assert is_integral(-3.0)
        assert is_integral(1e300)
        assert not is_integral(3.5)
        assert not is_integral(float("inf"))
        assert not is_integral(False)


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestRoundToPrecision:
    """Тесты для round_to_precision"""

    @pytest.mark.parametrize(
        "value, digits, expected",
        [
            (0.1 + 0.2, 2, 0.3),
            (1.005, 2, 1.01),
            (2.675, 2, 2.68),
            (-2.675, 2, -2.68),
            (1.23456789, 4, 1.2346),
            (0.5, 0, 1.0),
            (-0.5, 0, -1.0),
            (42.0, 2, 42.0),
        ],
    )
    def test_half_away_from_zero(self, value: float, digits: int, expected: float) -> None:
        assert round_to_precision(value, digits) == expected

    def test_none_disables_rounding(self) -> None:
        assert round_to_precision(0.1 + 0.2, None) == 0.1 + 0.2

    def test_negative_digits_raise(self) -> None:
        with pytest.raises(ValueError, match="must be non-negative"):
            round_to_precision(1.5, -1)

    def test_large_values_unchanged(self) -> None:
        assert round_to_precision(1e300, 2) == 1e300


# =============================================================================
# ТЕСТЫ ОПЕРАЦИЙ
# =============================================================================


class TestNativeOperations:
    """Тесты для native_add / subtract / multiply / divide / power"""

    def test_add_rounds(self) -> None:
        assert native_add(0.1, 0.2) == 0.3

    def test_subtract_rounds_too(self) -> None:
        """Вычитание округляется так же, как остальные операции"""
        assert native_subtract(0.3, 0.1) == 0.2
        assert native_subtract(0.3, 0.1, precision=None) == 0.3 - 0.1
        assert native_subtract(0.3, 0.1, precision=None) != 0.2

    def test_multiply_rounds(self) -> None:
        assert native_multiply(1.1, 1.1) == 1.21
        assert native_multiply(0.333, 3, precision=1) == 1.0

    def test_divide(self) -> None:
        assert native_divide(7, 2) == 3.5
        assert native_divide(1, 3) == 0.33
        assert native_divide(-7, 2) == -3.5
        assert isinstance(native_divide(6, 3), float)

    def test_divide_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            native_divide(1, 0)
        with pytest.raises(DivisionByZero):
            native_divide(1.5, 0.0)

    def test_int_operands_keep_int(self) -> None:
        result = native_add(2, 3)
        assert result == 5
        assert isinstance(result, int)
        assert isinstance(native_multiply(-4, 5), int)
        assert isinstance(native_add(2.0, 3), float)

    def test_power(self) -> None:
        assert native_power(2, 10) == 1024
        assert isinstance(native_power(2, 10), int)
        assert native_power(2, -1) == 0.5
        assert native_power(2.0, 0.5) == 1.41

    def test_power_undefined(self) -> None:
        with pytest.raises(ValueError, match="undefined"):
            native_power(-8, 1.0 / 3)

    def test_overflow(self) -> None:
        with pytest.raises(NativeOverflow):
            native_multiply(1e200, 1e200)
        with pytest.raises(NativeOverflow):
            native_power(10, 400)
        with pytest.raises(OverflowError):
            native_add(1.7e308, 1.7e308)

    def test_result_is_finite(self) -> None:
        assert math.isfinite(native_multiply(1e150, 1e150))
