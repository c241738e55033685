"""
Radix Codec — Позиционные системы счисления 2..36

Конверсия строки цифр ↔ CanonicalValue для любого основания:
- Целая часть: сумма цифр с весами base^position (старшие первыми)
- Дробная часть: сумма цифр с весами base^-position
- Обратно: деление целой части на base (остатки младшими первыми),
  затем ровно PRECISION шагов "умножить на base, взять целую часть"

Алфавит цифр: '0'-'9' → 0-9, 'A'-'Z' → 10-35 (вход регистронезависим,
выход в верхнем регистре).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Целые значения проходят туда-обратно точно для любого основания
2. Дробная часть вывода ограничена PRECISION цифрами (ошибка усечения
   для дробей, не конечных в целевом основании, документирована)
3. Ноль выводится как "0", точка только при ненулевой дробной части
4. Кодек не перепроверяет алфавит: это задача Validator
"""

from fractions import Fraction
from typing import Final

from src.core.domain.canonical import FRACTION_SCALE, PRECISION, CanonicalValue

# Символы цифр в порядке значений
DIGITS: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

SIGN: Final[str] = "-"
POINT: Final[str] = "."


# =============================================================================
# ЦИФРЫ
# =============================================================================


def digit_value(char: str) -> int:
    """
    Значение одной цифры.

    Examples:
        >>> digit_value("7")
        7
        >>> digit_value("f")
        15
        >>> digit_value("Z")
        35

    Raises:
        ValueError: Если символ не цифра и не латинская буква ASCII
    """
    # Только ASCII: 'ı'.upper() == 'I'
    if len(char) != 1 or not char.isascii():
        raise ValueError(f"Not a digit: {char!r}")
    value = DIGITS.find(char.upper())
    if value < 0:
        raise ValueError(f"Not a digit: {char!r}")
    return value


def digit_char(value: int) -> str:
    """
    Символ цифры: < 10 — десятичная цифра, >= 10 — 'A' + (value - 10).

    Raises:
        ValueError: Если значение вне [0, 35]
    """
    if not 0 <= value < len(DIGITS):
        raise ValueError(f"Digit value out of range: {value}")
    return DIGITS[value]


def split_literal(literal: str) -> tuple[bool, str, str]:
    """
    Разбиение литерала на (negative, integer_digits, fraction_digits).

    Examples:
        >>> split_literal("-1A.F")
        (True, '1A', 'F')
        >>> split_literal("101")
        (False, '101', '')
    """
    negative = literal.startswith(SIGN)
    body = literal[1:] if negative else literal
    integer_digits, _, fraction_digits = body.partition(POINT)
    return negative, integer_digits, fraction_digits


# =============================================================================
# TO DECIMAL
# =============================================================================


def digits_to_int(digits: str, base: int) -> int:
    """Целое по строке цифр (старшие первыми). Пустая строка → 0."""
    value = 0
    for char in digits:
        value = value * base + digit_value(char)
    return value


def to_fraction(literal: str, base: int) -> Fraction:
    """
    Точное рациональное значение литерала в основании base.

    Examples:
        >>> to_fraction("-10.1", 2)
        Fraction(-5, 2)
    """
    negative, integer_digits, fraction_digits = split_literal(literal)

    value = Fraction(digits_to_int(integer_digits, base))
    if fraction_digits:
        numerator = digits_to_int(fraction_digits, base)
        value += Fraction(numerator, base ** len(fraction_digits))

    return -value if negative else value


def to_decimal(literal: str, base: int) -> CanonicalValue:
    """
    Литерал в основании base → CanonicalValue.

    Дробная часть вычисляется точно и приводится к PRECISION
    десятичным знакам.

    Args:
        literal: Провалидированный литерал ('-' на позиции 0, не более одной '.')
        base: Основание 2..36

    Returns:
        CanonicalValue

    Examples:
        >>> str(to_decimal("1010011010", 2))
        '666'
        >>> str(to_decimal("-ff.8", 16))
        '-255.5'
    """
    return CanonicalValue.from_fraction(to_fraction(literal, base))


# =============================================================================
# FROM DECIMAL
# =============================================================================


def int_to_digits(value: int, base: int) -> str:
    """
    Целое >= 0 → строка цифр: остатки от деления младшими первыми, затем разворот.

    Examples:
        >>> int_to_digits(666, 15)
        '2E6'
        >>> int_to_digits(0, 7)
        '0'
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")

    digits = []
    while True:
        value, remainder = divmod(value, base)
        digits.append(digit_char(remainder))
        if value == 0:
            break

    return "".join(reversed(digits))


def fraction_to_digits(fraction_units: int, base: int, precision: int = PRECISION) -> str:
    """
    Дробная часть (в единицах 1E-PRECISION) → ровно precision цифр основания base.

    На каждом шаге: умножить на base, целая часть — очередная цифра,
    остаток идёт на следующий шаг.

    Examples:
        >>> fraction_to_digits(5 * 10**19, 2, precision=4)
        '1000'
    """
    digits = []
    remainder = fraction_units
    for _ in range(precision):
        digit, remainder = divmod(remainder * base, FRACTION_SCALE)
        digits.append(digit_char(digit))
    return "".join(digits)


def from_decimal(value: CanonicalValue, base: int, precision: int = PRECISION) -> str:
    """
    CanonicalValue → литерал в основании base.

    Args:
        value: Каноническое значение
        base: Основание 2..36
        precision: Количество дробных цифр (по умолчанию PRECISION)

    Returns:
        Литерал: '-' для отрицательных, точка только при ненулевой дроби

    Examples:
        >>> from_decimal(CanonicalValue.from_decimal(666), 15)
        '2E6'
        >>> from_decimal(CanonicalValue.from_decimal("0.5"), 2, precision=3)
        '0.100'
    """
    text = int_to_digits(value.integer, base)

    if value.fraction_units:
        text = f"{text}{POINT}{fraction_to_digits(value.fraction_units, base, precision)}"

    if value.negative:
        text = SIGN + text

    return text
