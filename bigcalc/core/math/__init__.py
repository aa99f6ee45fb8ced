"""
Core math modules для bigcalc

Длинная десятичная арифметика и нативный путь с округлением.
"""

# Digit Sequence
from bigcalc.core.math.digit_sequence import (
    # Constants
    ONE,
    ZERO,
    # Exceptions
    ArbitraryPrecisionError,
    InvalidDigits,
    # Types
    Ordering,
    # Functions
    compare,
    compare_magnitudes,
    is_zero_digits,
    normalize,
    normalize_digits,
    split_sign,
)

# Long Arithmetic
from bigcalc.core.math.long_arithmetic import (
    DivisionByZero,
    add,
    add_magnitudes,
    divide,
    divide_magnitudes,
    divmod_magnitudes,
    multiply,
    multiply_magnitudes,
    negate,
    power,
    subtract,
    subtract_magnitudes,
)

# Native Arithmetic
from bigcalc.core.math.native_arithmetic import (
    DEFAULT_NATIVE_PRECISION,
    MAX_NATIVE_INTEGER,
    NativeNumber,
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

__all__ = [
    # Digit Sequence — Constants
    "ONE",
    "ZERO",
    # Digit Sequence — Exceptions
    "ArbitraryPrecisionError",
    "InvalidDigits",
    # Digit Sequence — Types
    "Ordering",
    # Digit Sequence — Functions
    "compare",
    "compare_magnitudes",
    "is_zero_digits",
    "normalize",
    "normalize_digits",
    "split_sign",
    # Long Arithmetic — Exceptions
    "DivisionByZero",
    # Long Arithmetic — Magnitudes
    "add_magnitudes",
    "divide_magnitudes",
    "divmod_magnitudes",
    "multiply_magnitudes",
    "subtract_magnitudes",
    # Long Arithmetic — Signed
    "add",
    "divide",
    "multiply",
    "negate",
    "power",
    "subtract",
    # Native Arithmetic — Constants
    "DEFAULT_NATIVE_PRECISION",
    "MAX_NATIVE_INTEGER",
    # Native Arithmetic — Types
    "NativeNumber",
    # Native Arithmetic — Exceptions
    "NativeOverflow",
    # Native Arithmetic — Functions
    "is_integral",
    "is_native_number",
    "is_valid_float",
    "native_add",
    "native_divide",
    "native_multiply",
    "native_power",
    "native_subtract",
    "round_to_precision",
    "validate_finite",
]
