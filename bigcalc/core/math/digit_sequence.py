"""
Digit Sequence — Normalizer & Magnitude Comparator

Базовое представление для длинной арифметики: строка десятичных цифр,
старшая цифра первой.

Модуль обеспечивает:
- Нормализацию текстового целого (знак, ведущие нули, каноничный "0")
- Разбор знака и модуля
- Сравнение модулей и знаковых значений

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нормализованная последовательность не имеет ведущих нулей (кроме "0")
2. Ноль всегда неотрицательный ("-0" → "0")
3. compare_magnitudes вызывается только на нормализованных последовательностях,
   иначе сравнение по длине некорректно
"""

from enum import Enum
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Допустимые цифры (только ASCII; str.isdigit пропускает "²", "٣" и т.п.)
DIGITS: Final[frozenset[str]] = frozenset("0123456789")

ZERO: Final[str] = "0"
ONE: Final[str] = "1"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ArbitraryPrecisionError(Exception):
    """Базовая ошибка движка длинной арифметики."""

    pass


class InvalidDigits(ArbitraryPrecisionError, ValueError):
    """
    Вход не является корректным целым десятичным литералом.

    Допустимая форма: необязательный знак и хотя бы одна ASCII-цифра.
    """

    pass


# =============================================================================
# ORDERING
# =============================================================================


class Ordering(str, Enum):
    """Результат сравнения"""

    GREATER = "greater"
    EQUAL = "equal"
    LESS = "less"

    def inverse(self) -> "Ordering":
        """Ordering для переставленных аргументов."""
        if self is Ordering.GREATER:
            return Ordering.LESS
        if self is Ordering.LESS:
            return Ordering.GREATER
        return Ordering.EQUAL


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def split_sign(text: str) -> tuple[bool, str]:
    """
    Разбор текстового целого на знак и нормализованный модуль.

    Args:
        text: Целое в виде строки, например "-00123" или "+5"

    Returns:
        (negative, digits): флаг отрицательности и нормализованный модуль.
        Для нуля negative всегда False.

    Raises:
        InvalidDigits: Если вход не строка, пустой или содержит не-цифры

    Examples:
        >>> split_sign("-00123")
        (True, '123')
        >>> split_sign("-0")
        (False, '0')
    """
    if not isinstance(text, str):
        raise InvalidDigits(f"digit sequence must be a string, got {type(text).__name__}")

    negative = False
    body = text
    if body[:1] in ("-", "+"):
        negative = body[0] == "-"
        body = body[1:]

    if not body:
        raise InvalidDigits(f"empty digit sequence: {text!r}")

    for ch in body:
        if ch not in DIGITS:
            raise InvalidDigits(f"invalid digit {ch!r} in {text!r}")

    digits = body.lstrip("0") or ZERO
    if digits == ZERO:
        negative = False

    return negative, digits


def normalize_digits(text: str) -> str:
    """
    Нормализация к беззнаковой последовательности цифр.

    Снимает знак, убирает ведущие нули, "000" → "0".

    Examples:
        >>> normalize_digits("000120")
        '120'
        >>> normalize_digits("-0007")
        '7'
        >>> normalize_digits("0000")
        '0'
    """
    return split_sign(text)[1]


def normalize(text: str) -> str:
    """
    Каноничная знаковая форма: "-007" → "-7", "-0" → "0".
    """
    negative, digits = split_sign(text)
    return f"-{digits}" if negative else digits


def is_zero_digits(digits: str) -> bool:
    return digits == ZERO


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(a: str, b: str) -> Ordering:
    """
    Сравнение двух нормализованных беззнаковых последовательностей.

    Алгоритм:
        1. Более длинная последовательность больше
        2. При равной длине решает первое несовпадение от старшего разряда

    Args:
        a: Нормализованный модуль (без ведущих нулей)
        b: Нормализованный модуль (без ведущих нулей)

    Returns:
        Ordering.GREATER / EQUAL / LESS
    """
    if len(a) != len(b):
        return Ordering.GREATER if len(a) > len(b) else Ordering.LESS

    for da, db in zip(a, b):
        if da != db:
            return Ordering.GREATER if da > db else Ordering.LESS

    return Ordering.EQUAL


def compare(a: str, b: str) -> Ordering:
    """
    Знаковое сравнение двух текстовых целых.

    Args:
        a: Целое вида ^-?\\d+$ (ведущие нули допускаются)
        b: Целое вида ^-?\\d+$

    Returns:
        Ordering для пары (a, b)

    Raises:
        InvalidDigits: Если любой из аргументов некорректен

    Examples:
        >>> compare("-5", "3")
        <Ordering.LESS: 'less'>
        >>> compare("-5", "-30")
        <Ordering.GREATER: 'greater'>
    """
    neg_a, mag_a = split_sign(a)
    neg_b, mag_b = split_sign(b)

    if neg_a != neg_b:
        return Ordering.LESS if neg_a else Ordering.GREATER

    result = compare_magnitudes(mag_a, mag_b)
    # Для двух отрицательных больший модуль означает меньшее значение
    return result.inverse() if neg_a else result
