"""
Calculation — Модели запроса и результата калькулятора

Immutable Pydantic модели для JSON-контракта CalculatorService.evaluate.
Соответствуют схемам calculation_request / calculation_result.
"""

from enum import Enum

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr

from bigcalc.core.domain.operand import PrecisionPath


# =============================================================================
# ENUMS
# =============================================================================


class Operation(str, Enum):
    """Операция калькулятора"""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    POWER = "power"
    COMPARE = "compare"


# =============================================================================
# MODELS
# =============================================================================

RawOperand = StrictInt | StrictFloat | StrictStr


class CalculationRequest(BaseModel):
    """Запрос на вычисление: операция и два операнда."""

    operation: Operation = Field(..., description="Операция")
    a: RawOperand = Field(..., description="Первый операнд (число или ^-?\\d+$)")
    b: RawOperand = Field(..., description="Второй операнд (число или ^-?\\d+$)")

    model_config = {"frozen": True}


class CalculationResult(BaseModel):
    """
    Результат вычисления.

    result — каноничный текст на пути длинной арифметики, число на нативном
    пути, значение Ordering для compare.
    """

    operation: Operation
    path: PrecisionPath
    result: RawOperand

    model_config = {"frozen": True}
