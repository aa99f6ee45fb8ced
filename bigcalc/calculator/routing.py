"""
Precision Routing — Native vs Arbitrary-Precision Policy

Решает для пары операндов, может ли операция выполняться на нативном double
или обязана идти через длинную арифметику.

Правило "большого" операнда (один порог):
    |целое значение| > max_native_integer (по умолчанию 2**53 - 1)

Порядок решения:
1. Каждый операнд классифицируется в NativeOperand / ArbitraryOperand
2. Нецелое нативное число → вся операция на нативном пути
3. Хотя бы один ArbitraryOperand → вся операция на пути длинной арифметики
   (симметричное OR, второй операнд приводится)
4. Иначе → нативный путь

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После resolve_operands оба операнда одного случая
2. Целые вне точного диапазона double никогда не идут на нативный путь,
   если партнёр целый
3. Текст допускается только вида ^-?\\d+$
"""

import logging
from dataclasses import dataclass

from bigcalc.core.domain.operand import (
    ArbitraryOperand,
    NativeOperand,
    Operand,
    PrecisionPath,
    SignedMagnitude,
)
from bigcalc.core.math.digit_sequence import (
    ArbitraryPrecisionError,
    Ordering,
    compare_magnitudes,
    split_sign,
)
from bigcalc.core.math.native_arithmetic import (
    MAX_NATIVE_INTEGER,
    is_integral,
    is_native_number,
    is_valid_float,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidOperand(ArbitraryPrecisionError, TypeError):
    """Операнд не является ни конечным нативным числом, ни текстом цифр."""

    pass


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RoutingConfig:
    """Конфигурация маршрутизации.

    Задаётся один раз при старте; frozen исключает изменение порога
    во время выполняющихся операций.
    """

    # Наибольший модуль целого, допустимый на нативном пути
    max_native_integer: int = MAX_NATIVE_INTEGER

    def __post_init__(self) -> None:
        if self.max_native_integer < 0:
            raise ValueError(
                f"max_native_integer must be non-negative, got {self.max_native_integer}"
            )
        # Выше 2**53 - 1 double теряет точность целых
        if self.max_native_integer > MAX_NATIVE_INTEGER:
            raise ValueError(
                f"max_native_integer must be <= {MAX_NATIVE_INTEGER}, "
                f"got {self.max_native_integer}"
            )


_DEFAULT_CONFIG = RoutingConfig()


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def _exceeds(digits: str, config: RoutingConfig) -> bool:
    # Сравнение строк цифр: без int() для длинного текста
    return compare_magnitudes(digits, str(config.max_native_integer)) is Ordering.GREATER


def _check_native(raw: object) -> None:
    if not is_native_number(raw):
        raise InvalidOperand(
            f"operand must be int, float or digit text, got {type(raw).__name__}"
        )
    if isinstance(raw, float) and not is_valid_float(raw):
        raise InvalidOperand(f"operand must be finite, got {raw}")


def is_large(raw: object, config: RoutingConfig | None = None) -> bool:
    """
    Является ли операнд слишком большим для нативного пути.

    Args:
        raw: Нативное число или текст вида ^-?\\d+$
        config: Конфигурация маршрутизации (default: RoutingConfig())

    Returns:
        True если целый модуль операнда больше max_native_integer.
        Нецелые float всегда False.

    Raises:
        InvalidDigits: Если текст некорректен
        InvalidOperand: Если операнд другого типа или NaN/Inf

    Examples:
        >>> is_large("9007199254740991")
        False
        >>> is_large("-9007199254740992")
        True
        >>> is_large(1e300)
        True
        >>> is_large(0.5)
        False
    """
    config = config or _DEFAULT_CONFIG

    if isinstance(raw, str):
        return _exceeds(split_sign(raw)[1], config)

    _check_native(raw)
    if not is_integral(raw):
        return False
    return abs(int(raw)) > config.max_native_integer


def should_use_arbitrary_precision(
    a: object, b: object, config: RoutingConfig | None = None
) -> bool:
    """Симметричное OR: хотя бы один большой операнд."""
    return is_large(a, config) or is_large(b, config)


def classify_operand(raw: object, config: RoutingConfig | None = None) -> Operand:
    """
    Классификация сырого операнда в вариант.

    - Текст: большой → ArbitraryOperand, иначе NativeOperand(int)
    - int / целый float: большой → ArbitraryOperand, иначе NativeOperand
    - Нецелый float → NativeOperand

    Raises:
        InvalidDigits: Если текст некорректен
        InvalidOperand: Если операнд другого типа или NaN/Inf
    """
    config = config or _DEFAULT_CONFIG

    if isinstance(raw, str):
        negative, digits = split_sign(raw)
        if _exceeds(digits, config):
            return ArbitraryOperand(value=SignedMagnitude(digits=digits, negative=negative))
        value = int(digits)
        return NativeOperand(value=-value if negative else value)

    _check_native(raw)
    if is_integral(raw) and abs(int(raw)) > config.max_native_integer:
        return ArbitraryOperand(value=SignedMagnitude.from_int(int(raw)))
    return NativeOperand(value=raw)


# =============================================================================
# ПРИВЕДЕНИЕ
# =============================================================================


def to_arbitrary(operand: Operand) -> ArbitraryOperand:
    """
    Приведение целого операнда к ArbitraryOperand.

    Raises:
        InvalidOperand: Если нативное значение нецелое
    """
    if isinstance(operand, ArbitraryOperand):
        return operand
    if not is_integral(operand.value):
        raise InvalidOperand(f"non-integer operand cannot use arbitrary precision: {operand.value}")
    return ArbitraryOperand(value=SignedMagnitude.from_int(int(operand.value)))


def to_native(operand: Operand) -> NativeOperand:
    """
    Приведение операнда к NativeOperand (float для длинных значений).

    Raises:
        InvalidOperand: Если значение не помещается в double
    """
    if isinstance(operand, NativeOperand):
        return operand
    value = float(str(operand.value))
    if not is_valid_float(value):
        raise InvalidOperand(f"operand does not fit a native float: {operand.text}")
    return NativeOperand(value=value)


def resolve_operands(
    a: object, b: object, config: RoutingConfig | None = None
) -> tuple[PrecisionPath, Operand, Operand]:
    """
    Приведение обоих операндов к одному случаю варианта.

    Returns:
        (path, operand_a, operand_b), оба операнда соответствуют path

    Raises:
        InvalidDigits: Если текст некорректен
        InvalidOperand: Если операнд некорректен или не может быть приведён
    """
    op_a = classify_operand(a, config)
    op_b = classify_operand(b, config)

    fractional = any(
        isinstance(op, NativeOperand) and not is_integral(op.value) for op in (op_a, op_b)
    )
    arbitrary = any(isinstance(op, ArbitraryOperand) for op in (op_a, op_b))

    if fractional:
        if arbitrary:
            logger.debug("non-integer operand forces native path for %r, %r", a, b)
        return PrecisionPath.NATIVE, to_native(op_a), to_native(op_b)

    if arbitrary:
        logger.debug("routing %r, %r to arbitrary precision", a, b)
        return PrecisionPath.ARBITRARY, to_arbitrary(op_a), to_arbitrary(op_b)

    return PrecisionPath.NATIVE, op_a, op_b
