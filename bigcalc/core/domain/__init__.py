"""
Domain models and value objects.

Contains the operand variant, signed magnitudes and calculation records.
"""

from bigcalc.core.domain.calculation import (
    CalculationRequest,
    CalculationResult,
    Operation,
    RawOperand,
)
from bigcalc.core.domain.operand import (
    ArbitraryOperand,
    NativeOperand,
    Operand,
    PrecisionPath,
    SignedMagnitude,
)

__all__ = [
    # Operand module
    "ArbitraryOperand",
    "NativeOperand",
    "Operand",
    "PrecisionPath",
    "SignedMagnitude",
    # Calculation module
    "CalculationRequest",
    "CalculationResult",
    "Operation",
    "RawOperand",
]
