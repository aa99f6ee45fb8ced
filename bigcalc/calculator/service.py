"""Calculator Service — диспетчер add / subtract / multiply / divide / power / compare

Каждая операция:
1. Приводит операнды к одному случаю варианта (routing.resolve_operands)
2. Исполняет операцию на выбранном пути
3. Для целых операндов проверяет, что нативный результат остался в точном
   диапазоне double; иначе пересчитывает через длинную арифметику

Путь длинной арифметики возвращает каноничный текст, нативный путь — int/float.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict

from bigcalc.calculator.routing import (
    RoutingConfig,
    classify_operand,
    is_large,
    resolve_operands,
    to_arbitrary,
)
from bigcalc.core.contracts import validate_calculation_request, validate_calculation_result
from bigcalc.core.domain.calculation import (
    CalculationRequest,
    CalculationResult,
    Operation,
)
from bigcalc.core.domain.operand import (
    ArbitraryOperand,
    NativeOperand,
    Operand,
    PrecisionPath,
    SignedMagnitude,
)
from bigcalc.core.math import long_arithmetic
from bigcalc.core.math.digit_sequence import Ordering, compare
from bigcalc.core.math.native_arithmetic import (
    DEFAULT_NATIVE_PRECISION,
    NativeNumber,
    NativeOverflow,
    is_integral,
    native_add,
    native_divide,
    native_multiply,
    native_power,
    native_subtract,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькулятора.

    native_precision применяется одинаково ко всем операциям нативного пути
    (None отключает округление).
    """

    native_precision: int | None = DEFAULT_NATIVE_PRECISION
    routing: RoutingConfig = field(default_factory=RoutingConfig)

    # Пересчёт через длинную арифметику, если целый нативный результат
    # вышел за max_native_integer
    reroute_inexact_native: bool = True

    # Верхняя оценка длины результата power (показатель × длина основания)
    max_power_digits: int = 10_000

    def __post_init__(self) -> None:
        if self.native_precision is not None and self.native_precision < 0:
            raise ValueError(
                f"native_precision must be non-negative, got {self.native_precision}"
            )
        if self.max_power_digits <= 0:
            raise ValueError(
                f"max_power_digits must be positive, got {self.max_power_digits}"
            )


_ARBITRARY_OPS: Dict[Operation, Callable[[str, str], str]] = {
    Operation.ADD: long_arithmetic.add,
    Operation.SUBTRACT: long_arithmetic.subtract,
    Operation.MULTIPLY: long_arithmetic.multiply,
    Operation.DIVIDE: long_arithmetic.divide,
    Operation.POWER: long_arithmetic.power,
}

_NATIVE_OPS: Dict[Operation, Callable[..., NativeNumber]] = {
    Operation.ADD: native_add,
    Operation.SUBTRACT: native_subtract,
    Operation.MULTIPLY: native_multiply,
    Operation.DIVIDE: native_divide,
    Operation.POWER: native_power,
}

# Операции, у которых целые операнды дают целый результат
_INTEGRAL_OPS = frozenset(
    {Operation.ADD, Operation.SUBTRACT, Operation.MULTIPLY, Operation.POWER}
)

# Конечный double меньше 10**309
_FLOAT_MAX_DIGITS = 309


def _is_fractional(operand: Operand) -> bool:
    return isinstance(operand, NativeOperand) and not is_integral(operand.value)


def _compare_with_fraction(value: SignedMagnitude, fraction: float) -> Ordering:
    """Сравнение длинного целого с нецелым double без приведения к float."""
    if len(value.digits) > _FLOAT_MAX_DIGITS:
        return Ordering.LESS if value.negative else Ordering.GREATER

    # int и float в Python сравниваются точно
    integer = value.to_int()
    if integer > fraction:
        return Ordering.GREATER
    if integer < fraction:
        return Ordering.LESS
    return Ordering.EQUAL


# =============================================================================
# SERVICE
# =============================================================================


class CalculatorService:
    """Калькулятор с автоматическим выбором пути точности.

    Экземпляр не хранит изменяемого состояния; один экземпляр можно
    использовать из нескольких потоков.
    """

    def __init__(self, config: CalculatorConfig | None = None):
        """Инициализация калькулятора.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or CalculatorConfig()

    # -------------------------------------------------------------------------
    # Public operations
    # -------------------------------------------------------------------------

    def add(self, a: Any, b: Any) -> str | NativeNumber:
        return self.calculate(Operation.ADD, a, b).result

    def subtract(self, a: Any, b: Any) -> str | NativeNumber:
        return self.calculate(Operation.SUBTRACT, a, b).result

    def multiply(self, a: Any, b: Any) -> str | NativeNumber:
        return self.calculate(Operation.MULTIPLY, a, b).result

    def divide(self, a: Any, b: Any) -> str | NativeNumber:
        """Деление; на пути длинной арифметики — с усечением к нулю.

        Raises:
            DivisionByZero: Если b равен нулю
        """
        return self.calculate(Operation.DIVIDE, a, b).result

    def power(self, base: Any, exponent: Any) -> str | NativeNumber:
        """Возведение в степень.

        Raises:
            ValueError: Если на пути длинной арифметики показатель
                отрицательный или больше max_native_integer
            NativeOverflow: Если оценка длины результата больше max_power_digits
        """
        return self.calculate(Operation.POWER, base, exponent).result

    def compare(self, a: Any, b: Any) -> Ordering:
        return Ordering(self.calculate(Operation.COMPARE, a, b).result)

    def calculate(self, operation: Operation, a: Any, b: Any) -> CalculationResult:
        """Исполнение операции с выбором пути.

        Args:
            operation: операция
            a: первый операнд (число или текст ^-?\\d+$)
            b: второй операнд

        Returns:
            CalculationResult с путём исполнения и результатом

        Raises:
            InvalidDigits: текст операнда некорректен
            InvalidOperand: операнд другого типа или NaN/Inf
            DivisionByZero: деление на ноль
        """
        operation = Operation(operation)
        if operation is Operation.COMPARE:
            return self._compare(a, b)

        path, op_a, op_b = resolve_operands(a, b, self.config.routing)
        if path is PrecisionPath.ARBITRARY:
            return self._arbitrary(operation, op_a, op_b)

        return self._native(operation, op_a, op_b)

    def evaluate(self, request: Dict[str, Any]) -> Dict[str, Any]:
        """Исполнение JSON-запроса по контракту calculation_request.

        Args:
            request: dict с полями operation, a, b

        Returns:
            dict по контракту calculation_result

        Raises:
            ValidationError: запрос не соответствует схеме
        """
        validate_calculation_request(request)
        parsed = CalculationRequest.model_validate(request)

        record = self.calculate(parsed.operation, parsed.a, parsed.b).model_dump(mode="json")
        validate_calculation_result(record)
        return record

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------

    def _compare(self, a: Any, b: Any) -> CalculationResult:
        op_a = classify_operand(a, self.config.routing)
        op_b = classify_operand(b, self.config.routing)

        # Длинное целое против нецелого: упорядочивание определено
        # и без приведения длинного операнда к double
        if isinstance(op_a, ArbitraryOperand) and _is_fractional(op_b):
            ordering = _compare_with_fraction(op_a.value, op_b.value)
            return CalculationResult(
                operation=Operation.COMPARE, path=PrecisionPath.ARBITRARY, result=ordering.value
            )
        if _is_fractional(op_a) and isinstance(op_b, ArbitraryOperand):
            ordering = _compare_with_fraction(op_b.value, op_a.value).inverse()
            return CalculationResult(
                operation=Operation.COMPARE, path=PrecisionPath.ARBITRARY, result=ordering.value
            )

        path, op_a, op_b = resolve_operands(a, b, self.config.routing)
        if path is PrecisionPath.ARBITRARY:
            ordering = compare(op_a.text, op_b.text)
        elif op_a.value > op_b.value:
            ordering = Ordering.GREATER
        elif op_a.value < op_b.value:
            ordering = Ordering.LESS
        else:
            ordering = Ordering.EQUAL

        return CalculationResult(operation=Operation.COMPARE, path=path, result=ordering.value)

    def _arbitrary(
        self, operation: Operation, op_a: ArbitraryOperand, op_b: ArbitraryOperand
    ) -> CalculationResult:
        if operation is Operation.POWER:
            if op_b.value.negative:
                raise ValueError(f"exponent must be non-negative, got {op_b.text}")
            if is_large(op_b.value.digits, self.config.routing):
                raise ValueError(f"exponent too large for arbitrary precision: {op_b.text}")
            self._check_power_length(op_a.value, op_b.value)

        result = _ARBITRARY_OPS[operation](op_a.text, op_b.text)
        return CalculationResult(operation=operation, path=PrecisionPath.ARBITRARY, result=result)

    def _native(self, operation: Operation, op_a: Operand, op_b: Operand) -> CalculationResult:
        func = _NATIVE_OPS[operation]
        reroutable = self._can_reroute(operation, op_a, op_b)

        try:
            value = func(op_a.value, op_b.value, self.config.native_precision)
        except NativeOverflow:
            if not reroutable:
                raise
            value = None

        limit = self.config.routing.max_native_integer
        if reroutable and (value is None or abs(value) > limit):
            logger.debug(
                "native %s of %r, %r left exact range, recomputing with arbitrary precision",
                operation.value,
                op_a.value,
                op_b.value,
            )
            return self._arbitrary(operation, to_arbitrary(op_a), to_arbitrary(op_b))

        return CalculationResult(operation=operation, path=PrecisionPath.NATIVE, result=value)

    def _check_power_length(self, base: SignedMagnitude, exponent: SignedMagnitude) -> None:
        estimate = int(exponent.digits) * len(base.digits)
        if estimate > self.config.max_power_digits:
            raise NativeOverflow(
                f"power result of ~{estimate} digits exceeds max_power_digits "
                f"({self.config.max_power_digits}): {base}^{exponent}"
            )

    def _can_reroute(self, operation: Operation, op_a: Operand, op_b: Operand) -> bool:
        if not self.config.reroute_inexact_native or operation not in _INTEGRAL_OPS:
            return False
        if not (is_integral(op_a.value) and is_integral(op_b.value)):
            return False
        # Отрицательная степень целого не целая
        return operation is not Operation.POWER or op_b.value >= 0
