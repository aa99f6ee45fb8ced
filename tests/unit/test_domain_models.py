"""
Тесты для доменных моделей

Проверяет:
1. SignedMagnitude: инварианты нормализации и знака нуля
2. Immutability моделей
3. Размеченный вариант операнда (discriminator kind)
4. Модели запроса и результата
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from bigcalc.core.domain import (
    ArbitraryOperand,
    CalculationRequest,
    CalculationResult,
    NativeOperand,
    Operand,
    Operation,
    PrecisionPath,
    SignedMagnitude,
)
from bigcalc.core.math.digit_sequence import InvalidDigits

# =============================================================================
# SIGNED MAGNITUDE
# =============================================================================


class TestSignedMagnitude:
    """Тесты для SignedMagnitude"""

    def test_parse(self) -> None:
        value = SignedMagnitude.parse("-000123")
        assert value.digits == "123"
        assert value.negative is True
        assert str(value) == "-123"

    def test_parse_negative_zero(self) -> None:
        value = SignedMagnitude.parse("-0")
        assert value.negative is False
        assert value.is_zero
        assert str(value) == "0"

    def test_parse_invalid(self) -> None:
        with pytest.raises(InvalidDigits):
            SignedMagnitude.parse("12x")

    def test_leading_zeros_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SignedMagnitude(digits="007")

    def test_non_digits_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SignedMagnitude(digits="-7")
        with pytest.raises(ValidationError):
            SignedMagnitude(digits="")

    def test_negative_zero_rejected(self) -> None:
        with pytest.raises(ValidationError, match="zero cannot be negative"):
            SignedMagnitude(digits="0", negative=True)

    def test_from_int_and_back(self) -> None:
        for n in [0, 7, -7, 10**30, -(10**30)]:
            value = SignedMagnitude.from_int(n)
            assert value.to_int() == n
            assert str(value) == str(n)

    def test_from_int_longer_than_str_limit(self) -> None:
        value = SignedMagnitude.from_int(-(10**5000))
        assert value.negative is True
        assert len(value.digits) == 5001
        assert value.digits == "1" + "0" * 5000

    def test_negate(self) -> None:
        assert SignedMagnitude.parse("5").negate() == SignedMagnitude.parse("-5")
        assert SignedMagnitude.parse("-5").negate() == SignedMagnitude.parse("5")
        assert SignedMagnitude.parse("0").negate() == SignedMagnitude.parse("0")

    def test_magnitude(self) -> None:
        assert SignedMagnitude.parse("-42").magnitude() == SignedMagnitude.parse("42")

    def test_frozen(self) -> None:
        value = SignedMagnitude.parse("5")
        with pytest.raises(ValidationError):
            value.negative = True  # type: ignore[misc]


# =============================================================================
# OPERAND VARIANT
# =============================================================================


class TestOperandVariant:
    """Тесты для NativeOperand / ArbitraryOperand"""

    def test_native_accepts_int_and_float(self) -> None:
        assert NativeOperand(value=5).value == 5
        assert isinstance(NativeOperand(value=5).value, int)
        assert isinstance(NativeOperand(value=5.0).value, float)

    def test_native_rejects_bool_text_nan(self) -> None:
        with pytest.raises(ValidationError):
            NativeOperand(value=True)
        with pytest.raises(ValidationError):
            NativeOperand(value="5")
        with pytest.raises(ValidationError):
            NativeOperand(value=float("nan"))

    def test_discriminated_union(self) -> None:
        adapter = TypeAdapter(Operand)

        native = adapter.validate_python({"kind": "native", "value": 3})
        assert isinstance(native, NativeOperand)
        assert native.path is PrecisionPath.NATIVE

        arbitrary = adapter.validate_python(
            {"kind": "arbitrary", "value": {"digits": "123", "negative": True}}
        )
        assert isinstance(arbitrary, ArbitraryOperand)
        assert arbitrary.text == "-123"
        assert arbitrary.path is PrecisionPath.ARBITRARY

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TypeAdapter(Operand).validate_python({"kind": "decimal", "value": 3})


# =============================================================================
# CALCULATION MODELS
# =============================================================================


class TestCalculationModels:
    """Тесты для CalculationRequest / CalculationResult"""

    def test_request(self) -> None:
        request = CalculationRequest(operation="add", a="123", b=4)
        assert request.operation is Operation.ADD
        assert request.a == "123"
        assert request.b == 4

    def test_request_unknown_operation(self) -> None:
        with pytest.raises(ValidationError):
            CalculationRequest(operation="modulo", a=1, b=2)

    def test_result_dump(self) -> None:
        result = CalculationResult(
            operation=Operation.MULTIPLY, path=PrecisionPath.ARBITRARY, result="-15"
        )
        assert result.model_dump(mode="json") == {
            "operation": "multiply",
            "path": "arbitrary",
            "result": "-15",
        }
