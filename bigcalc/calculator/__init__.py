"""
Calculator — routing policy and dispatcher over the native and
arbitrary-precision paths.
"""

from bigcalc.calculator.routing import (
    InvalidOperand,
    RoutingConfig,
    classify_operand,
    is_large,
    resolve_operands,
    should_use_arbitrary_precision,
    to_arbitrary,
    to_native,
)
from bigcalc.calculator.service import CalculatorConfig, CalculatorService

__all__ = [
    # Routing
    "InvalidOperand",
    "RoutingConfig",
    "classify_operand",
    "is_large",
    "resolve_operands",
    "should_use_arbitrary_precision",
    "to_arbitrary",
    "to_native",
    # Service
    "CalculatorConfig",
    "CalculatorService",
]
