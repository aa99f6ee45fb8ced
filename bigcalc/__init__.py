"""
bigcalc — calculator with an arbitrary-precision decimal integer engine.

Operations on integers outside the exact range of a double are carried out
on base-10 digit strings; everything else runs on native floats rounded to
a fixed number of fractional digits.

    >>> from bigcalc import calculator
    >>> calculator.add("999999999999999999", 1)
    '1000000000000000000'
    >>> calculator.divide(7, 2)
    3.5
"""

from bigcalc.calculator import (
    CalculatorConfig,
    CalculatorService,
    InvalidOperand,
    RoutingConfig,
)
from bigcalc.core.math import (
    ArbitraryPrecisionError,
    DivisionByZero,
    InvalidDigits,
    NativeOverflow,
    Ordering,
    add,
    compare,
    divide,
    multiply,
    normalize,
    power,
    subtract,
)

__version__ = "1.0.0"

# Экземпляр по умолчанию
calculator = CalculatorService()

__all__ = [
    # Service
    "CalculatorConfig",
    "CalculatorService",
    "RoutingConfig",
    "calculator",
    # Engine
    "Ordering",
    "add",
    "compare",
    "divide",
    "multiply",
    "normalize",
    "power",
    "subtract",
    # Exceptions
    "ArbitraryPrecisionError",
    "DivisionByZero",
    "InvalidDigits",
    "InvalidOperand",
    "NativeOverflow",
]
