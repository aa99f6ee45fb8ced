"""
Long Arithmetic — Schoolbook Decimal Integer Engine

Модуль выполняет арифметику целых произвольной длины прямо над строками
десятичных цифр, независимо от разрядности нативных числовых типов:
- Сложение модулей с переносом
- Вычитание модулей с заёмом
- Умножение "в столбик" (grid) с немедленной пропагацией переноса
- Деление с отбрасыванием остатка через повторное вычитание
- Знаковые операции поверх модулей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда в каноничной форме: без ведущих нулей, "0" без знака
2. Вычитание модулей выполняется только при a >= b (заём не уходит
   за старший разряд)
3. Деление усекает к нулю: -7 / 2 = -3
4. Делитель "0" → DivisionByZero, без частичного результата
5. Функции чистые: каждый вызов возвращает новые значения
"""

from bigcalc.core.math.digit_sequence import (
    ONE,
    ZERO,
    ArbitraryPrecisionError,
    InvalidDigits,
    Ordering,
    compare_magnitudes,
    split_sign,
)

# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ArbitraryPrecisionError, ZeroDivisionError):
    """Делитель нормализуется в ноль."""

    pass


# =============================================================================
# ОПЕРАЦИИ НАД МОДУЛЯМИ
# =============================================================================


def add_magnitudes(a: str, b: str) -> str:
    """
    Сложение двух нормализованных модулей.

    Алгоритм: выравнивание по младшему разряду, поразрядная сумма с переносом
    (0 или 1) от младших к старшим, финальный перенос даёт новую старшую цифру.
    Длина результата не больше max(len(a), len(b)) + 1.

    Examples:
        >>> add_magnitudes("999", "1")
        '1000'
    """
    if len(a) < len(b):
        a, b = b, a

    result: list[str] = []
    carry = 0
    offset = len(a) - len(b)

    for i in range(len(a) - 1, -1, -1):
        j = i - offset
        total = int(a[i]) + (int(b[j]) if j >= 0 else 0) + carry
        result.append(str(total % 10))
        carry = total // 10

    if carry:
        result.append(str(carry))

    return "".join(reversed(result))


def _subtract_ordered(a: str, b: str) -> str:
    # a >= b должно быть установлено вызывающим
    result: list[int] = []
    borrow = 0
    offset = len(a) - len(b)

    for i in range(len(a) - 1, -1, -1):
        j = i - offset
        digit = int(a[i]) - borrow - (int(b[j]) if j >= 0 else 0)
        if digit < 0:
            digit += 10
            borrow = 1
        else:
            borrow = 0
        result.append(digit)

    while len(result) > 1 and result[-1] == 0:
        result.pop()

    return "".join(str(d) for d in reversed(result))


def subtract_magnitudes(a: str, b: str) -> str:
    """
    Вычитание модулей a - b при условии a >= b.

    Поразрядное вычитание от младших к старшим с заёмом: отрицательная цифра
    получает +10, заём 1 переходит в следующий разряд. Ведущие нули
    результата удаляются, нулевой результат → "0".

    Raises:
        ValueError: Если a < b (заём ушёл бы за старший разряд)

    Examples:
        >>> subtract_magnitudes("1000", "1")
        '999'
    """
    if compare_magnitudes(a, b) is Ordering.LESS:
        raise ValueError(f"minuend must not be less than subtrahend, got {a} < {b}")
    return _subtract_ordered(a, b)


def multiply_magnitudes(a: str, b: str) -> str:
    """
    Умножение модулей "в столбик".

    Аккумулятор длины m + n (младший разряд первым). Для каждой пары разрядов
    (i из a, j из b, от младших) произведение добавляется в позицию i + j,
    перенос сразу уходит в i + j + 1 и дальше, так что после каждого шага
    ни одна ячейка не превышает 9.

    "0" в любом операнде возвращает "0" без прохода по сетке.

    Examples:
        >>> multiply_magnitudes("99999999999", "99999999999")
        '9999999999800000000001'
    """
    if a == ZERO or b == ZERO:
        return ZERO

    digits_a = [int(ch) for ch in reversed(a)]
    digits_b = [int(ch) for ch in reversed(b)]
    acc = [0] * (len(a) + len(b))

    for i, da in enumerate(digits_a):
        if da == 0:
            continue
        for j, db in enumerate(digits_b):
            pos = i + j
            total = acc[pos] + da * db
            acc[pos] = total % 10
            carry = total // 10
            while carry:
                pos += 1
                total = acc[pos] + carry
                acc[pos] = total % 10
                carry = total // 10

    while len(acc) > 1 and acc[-1] == 0:
        acc.pop()

    return "".join(str(d) for d in reversed(acc))


def divmod_magnitudes(a: str, b: str) -> tuple[str, str]:
    """
    Деление модулей с остатком.

    Алгоритм (long division):
        1. Цифры a обрабатываются от старшей к младшей
        2. Очередная цифра дописывается к текущему остатку (ведущий ноль снимается)
        3. Из остатка повторно вычитается b, число вычитаний d ∈ [0, 9]
           становится очередной цифрой частного
        4. Ведущие нули частного удаляются

    Сложность O(len(a) × 10 × len(b)) в худшем случае.

    Returns:
        (quotient, remainder)

    Raises:
        DivisionByZero: Если b == "0"

    Examples:
        >>> divmod_magnitudes("100000000000000000000", "7")
        ('14285714285714285714', '2')
    """
    if b == ZERO:
        raise DivisionByZero(f"division by zero: {a} / {b}")

    if a == ZERO or compare_magnitudes(a, b) is Ordering.LESS:
        return ZERO, a

    quotient: list[str] = []
    remainder = ZERO

    for digit in a:
        remainder = digit if remainder == ZERO else remainder + digit
        count = 0
        while compare_magnitudes(remainder, b) is not Ordering.LESS:
            remainder = _subtract_ordered(remainder, b)
            count += 1
        quotient.append(str(count))

    return "".join(quotient).lstrip("0") or ZERO, remainder


def divide_magnitudes(a: str, b: str) -> str:
    """Частное модулей, остаток отбрасывается."""
    return divmod_magnitudes(a, b)[0]


# =============================================================================
# ЗНАКОВЫЕ ОПЕРАЦИИ
# =============================================================================


def _render(negative: bool, digits: str) -> str:
    # Ноль всегда неотрицательный
    if negative and digits != ZERO:
        return f"-{digits}"
    return digits


def _signed_add(neg_a: bool, mag_a: str, neg_b: bool, mag_b: str) -> str:
    if neg_a == neg_b:
        return _render(neg_a, add_magnitudes(mag_a, mag_b))

    ordering = compare_magnitudes(mag_a, mag_b)
    if ordering is Ordering.EQUAL:
        return ZERO
    if ordering is Ordering.GREATER:
        return _render(neg_a, _subtract_ordered(mag_a, mag_b))
    # |b| > |a|: операнды меняются местами, знак берётся от b
    return _render(neg_b, _subtract_ordered(mag_b, mag_a))


def add(a: str, b: str) -> str:
    """
    Знаковое сложение.

    - Знаки совпадают: модули складываются, общий знак сохраняется
    - Знаки различаются: из большего модуля вычитается меньший,
      знак берётся от операнда с большим модулем

    Raises:
        InvalidDigits: Если операнд некорректен

    Examples:
        >>> add("999999999999999999", "1")
        '1000000000000000000'
        >>> add("-12", "5")
        '-7'
    """
    neg_a, mag_a = split_sign(a)
    neg_b, mag_b = split_sign(b)
    return _signed_add(neg_a, mag_a, neg_b, mag_b)


def subtract(a: str, b: str) -> str:
    """
    Знаковое вычитание: add(a, -b).

    Examples:
        >>> subtract("5", "10")
        '-5'
    """
    neg_a, mag_a = split_sign(a)
    neg_b, mag_b = split_sign(b)
    return _signed_add(neg_a, mag_a, not neg_b, mag_b)


def multiply(a: str, b: str) -> str:
    """
    Знаковое умножение: знак результата отрицательный тогда и только тогда,
    когда отрицателен ровно один операнд.
    """
    neg_a, mag_a = split_sign(a)
    neg_b, mag_b = split_sign(b)
    return _render(neg_a != neg_b, multiply_magnitudes(mag_a, mag_b))


def divide(a: str, b: str) -> str:
    """
    Знаковое деление с усечением к нулю.

    Raises:
        DivisionByZero: Если b нормализуется в "0"
        InvalidDigits: Если операнд некорректен

    Examples:
        >>> divide("-7", "2")
        '-3'
    """
    neg_a, mag_a = split_sign(a)
    neg_b, mag_b = split_sign(b)
    return _render(neg_a != neg_b, divide_magnitudes(mag_a, mag_b))


def negate(a: str) -> str:
    negative, digits = split_sign(a)
    return _render(not negative, digits)


def power(base: str, exponent: int | str) -> str:
    """
    Возведение в неотрицательную целую степень через multiply_magnitudes.

    Используется бинарное возведение (square-and-multiply), поэтому число
    умножений O(log exponent). 0 ** 0 == "1".

    Args:
        base: Основание вида ^-?\\d+$
        exponent: Неотрицательный показатель (int или текст)

    Raises:
        ValueError: Если показатель отрицательный
        InvalidDigits: Если основание или текстовый показатель некорректны
    """
    if isinstance(exponent, str):
        neg_exp, exp_digits = split_sign(exponent)
        exp = -int(exp_digits) if neg_exp else int(exp_digits)
    elif isinstance(exponent, int) and not isinstance(exponent, bool):
        exp = exponent
    else:
        raise InvalidDigits(f"exponent must be an integer, got {exponent!r}")

    if exp < 0:
        raise ValueError(f"exponent must be non-negative, got {exp}")

    negative, digits = split_sign(base)

    result = ONE
    square = digits
    n = exp
    while n:
        if n & 1:
            result = multiply_magnitudes(result, square)
        n >>= 1
        if n:
            square = multiply_magnitudes(square, square)

    return _render(negative and exp % 2 == 1, result)
