"""
Operand — Значения длинной арифметики и размеченный вариант операнда

Immutable Pydantic модели:
- SignedMagnitude: нормализованный модуль + знак
- NativeOperand / ArbitraryOperand: два случая операнда, различаемые по kind

Диспетчер калькулятора приводит оба операнда к одному случаю до вызова
операции; смешанная пара никогда не исполняется.
"""

from decimal import Decimal
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field, StrictFloat, StrictInt, field_validator

from bigcalc.core.math.digit_sequence import ZERO, split_sign
from bigcalc.core.math.native_arithmetic import validate_finite


# =============================================================================
# ENUMS
# =============================================================================


class PrecisionPath(str, Enum):
    """Путь исполнения операции"""

    NATIVE = "native"
    ARBITRARY = "arbitrary"


# =============================================================================
# SIGNED MAGNITUDE
# =============================================================================


class SignedMagnitude(BaseModel):
    """
    Целое произвольной длины: модуль в виде строки цифр и знак.

    Инварианты:
    - digits без ведущих нулей (кроме "0")
    - ноль всегда неотрицательный
    """

    digits: str = Field(
        ..., pattern=r"^(0|[1-9][0-9]*)$", description="Модуль, старшая цифра первой"
    )
    negative: bool = Field(False, description="Знак (True для отрицательных)")

    model_config = {"frozen": True}

    @field_validator("negative")
    @classmethod
    def validate_zero_sign(cls, v: bool, info) -> bool:
        """Ноль не может быть отрицательным"""
        if v and info.data.get("digits") == ZERO:
            raise ValueError("zero cannot be negative")
        return v

    @classmethod
    def parse(cls, text: str) -> "SignedMagnitude":
        """
        Построение из текста вида ^-?\\d+$ через нормализатор.

        Raises:
            InvalidDigits: Если текст некорректен
        """
        negative, digits = split_sign(text)
        return cls(digits=digits, negative=negative)

    @classmethod
    def from_int(cls, value: int) -> "SignedMagnitude":
        # str() отказывает для int длиннее sys.get_int_max_str_digits()
        return cls(digits=format(Decimal(abs(value)), "f"), negative=value < 0)

    @property
    def is_zero(self) -> bool:
        return self.digits == ZERO

    def negate(self) -> "SignedMagnitude":
        if self.is_zero:
            return self
        return SignedMagnitude(digits=self.digits, negative=not self.negative)

    def magnitude(self) -> "SignedMagnitude":
        return SignedMagnitude(digits=self.digits)

    def to_int(self) -> int:
        value = int(self.digits)
        return -value if self.negative else value

    def __str__(self) -> str:
        return f"-{self.digits}" if self.negative else self.digits


# =============================================================================
# OPERAND VARIANT
# =============================================================================


class NativeOperand(BaseModel):
    """Операнд нативного пути (int или конечный float)."""

    kind: Literal["native"] = "native"
    value: StrictInt | StrictFloat = Field(..., description="Нативное число")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_value_finite(cls, v: int | float) -> int | float:
        """NaN/Inf не допускаются"""
        validate_finite(v, "value")
        return v

    @property
    def path(self) -> PrecisionPath:
        return PrecisionPath.NATIVE


class ArbitraryOperand(BaseModel):
    """Операнд пути длинной арифметики."""

    kind: Literal["arbitrary"] = "arbitrary"
    value: SignedMagnitude

    model_config = {"frozen": True}

    @property
    def path(self) -> PrecisionPath:
        return PrecisionPath.ARBITRARY

    @property
    def text(self) -> str:
        return str(self.value)


Operand = Annotated[NativeOperand | ArbitraryOperand, Field(discriminator="kind")]
