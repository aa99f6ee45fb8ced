"""
Native Arithmetic — Fixed-Width Float Path & Safeguards

Путь "малых чисел": операции над нативным IEEE-754 double с округлением
результата до фиксированного числа знаков после запятой.

Модуль обеспечивает:
- Проверку float на NaN/Inf
- Детекцию целочисленных значений
- Округление до N знаков (ROUND_HALF_UP по кратчайшему repr double)
- add / subtract / multiply / divide / power на нативных числах

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не возвращаются (NativeOverflow или ValueError)
2. Политика округления одна для всех операций (включая вычитание)
3. Деление на ноль → DivisionByZero, как и в длинной арифметике
4. int + int → int, если результат целый (без смены типа)
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final

from bigcalc.core.math.digit_sequence import ArbitraryPrecisionError
from bigcalc.core.math.long_arithmetic import DivisionByZero

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Наибольшее целое, которое double хранит точно вместе со всеми соседями
MAX_NATIVE_INTEGER: Final[int] = 2**53 - 1

# Число знаков после запятой на нативном пути по умолчанию
DEFAULT_NATIVE_PRECISION: Final[int] = 2

NativeNumber = int | float


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NativeOverflow(ArbitraryPrecisionError, OverflowError):
    """Нативный результат вышел за пределы конечных double."""

    pass


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_native_number(value: object) -> bool:
    """int или float, но не bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def validate_finite(value: NativeNumber, name: str) -> None:
    """
    Валидация нативного числа.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не число, bool, NaN или Inf
    """
    if not is_native_number(value):
        raise ValueError(f"{name} must be int or float, got {type(value).__name__}")

    if isinstance(value, float) and not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def is_integral(value: NativeNumber) -> bool:
    """
    Целое ли значение (int или float без дробной части).

    Examples:
        >>> is_integral(3)
        True
        >>> is_integral(3.0)
        True
        >>> is_integral(3.5)
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and is_valid_float(value) and value.is_integer()


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_to_precision(value: float, digits: int | None) -> float:
    """
    Округление до digits знаков после запятой, half away from zero.

    Округляется десятичная запись double (кратчайший repr), а не двоичное
    значение, поэтому 1.005 → 1.01, а 2.675 → 2.68.

    Args:
        value: Значение для округления
        digits: Число знаков после запятой; None отключает округление

    Returns:
        Округлённое значение

    Raises:
        ValueError: Если digits отрицательный

    Examples:
        >>> round_to_precision(0.1 + 0.2, 2)
        0.3
        >>> round_to_precision(-2.675, 2)
        -2.68
    """
    if digits is None:
        return value

    if digits < 0:
        raise ValueError(f"digits must be non-negative, got {digits}")

    if not is_valid_float(value) or value.is_integer():
        return value

    with localcontext() as ctx:
        # Нецелый double имеет не более 17 значащих цифр до запятой
        ctx.prec = 40 + digits
        quantum = Decimal(1).scaleb(-digits)
        rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)

    return float(rounded)


def _finish(result: float, precision: int | None, keep_int: bool) -> NativeNumber:
    if not is_valid_float(result):
        raise NativeOverflow(f"native result is not finite: {result}")

    result = round_to_precision(result, precision)

    if keep_int and result.is_integer():
        return int(result)
    return result


def _both_int(a: NativeNumber, b: NativeNumber) -> bool:
    return isinstance(a, int) and isinstance(b, int)


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def native_add(
    a: NativeNumber, b: NativeNumber, precision: int | None = DEFAULT_NATIVE_PRECISION
) -> NativeNumber:
    """Сложение на double с округлением."""
    return _finish(float(a) + float(b), precision, _both_int(a, b))


def native_subtract(
    a: NativeNumber, b: NativeNumber, precision: int | None = DEFAULT_NATIVE_PRECISION
) -> NativeNumber:
    """Вычитание на double с тем же округлением, что и остальные операции."""
    return _finish(float(a) - float(b), precision, _both_int(a, b))


def native_multiply(
    a: NativeNumber, b: NativeNumber, precision: int | None = DEFAULT_NATIVE_PRECISION
) -> NativeNumber:
    """Умножение на double с округлением."""
    return _finish(float(a) * float(b), precision, _both_int(a, b))


def native_divide(
    a: NativeNumber, b: NativeNumber, precision: int | None = DEFAULT_NATIVE_PRECISION
) -> float:
    """
    Деление на double с округлением. Результат всегда float.

    Raises:
        DivisionByZero: Если b == 0
    """
    if b == 0:
        raise DivisionByZero(f"division by zero: {a} / {b}")
    return _finish(float(a) / float(b), precision, keep_int=False)


def native_power(
    base: NativeNumber,
    exponent: NativeNumber,
    precision: int | None = DEFAULT_NATIVE_PRECISION,
) -> NativeNumber:
    """
    Возведение в степень на double.

    Raises:
        NativeOverflow: Если результат не помещается в double
        ValueError: Для отрицательного основания с дробным показателем
    """
    try:
        result = math.pow(float(base), float(exponent))
    except OverflowError:
        raise NativeOverflow(f"native result overflows: {base} ** {exponent}") from None
    except ValueError:
        raise ValueError(f"power is undefined for {base} ** {exponent}") from None

    keep_int = _both_int(base, exponent) and exponent >= 0
    return _finish(result, precision, keep_int)
