"""
Float Codec — Двоичная научная запись

Формат: [-]1.bbbb p±E
- мантисса в основании 2 (при выводе нормализована: ровно одна '1' до точки)
- E — десятичный показатель степени двойки (маркер 'p', как в C "%a")

Вывод: показатель E находится по точному значению (1 <= |x| * 2^-E < 2),
затем после ведущей '1' выводится PRECISION + max(E, 0) бит мантиссы
(усечение). Для |x| >= 1 это ровно PRECISION дробных бит самого значения,
для |x| < 1 — PRECISION значащих бит (относительная точность 2^-PRECISION).

Разбор: мантисса не обязана быть нормализованной, показатель
необязателен; значение = мантисса * 2^E вычисляется точно и затем
приводится к PRECISION десятичным знакам.
"""

from fractions import Fraction
from typing import Final

from src.core.codecs import radix
from src.core.domain.canonical import PRECISION, CanonicalValue
from src.core.domain.encoding import FLOAT_EXPONENT_MARKER
from src.core.domain.errors import MalformedNumber

ZERO_LITERAL: Final[str] = "0.0p+0"

# Предел |E| при разборе (как у binary64)
MAX_EXPONENT_MAGNITUDE: Final[int] = 1024


def split_exponent(literal: str) -> tuple[str, str]:
    """
    (significand, exponent) — exponent пустой, если маркера нет.

    Examples:
        >>> split_exponent("1.01p-3")
        ('1.01', '-3')
        >>> split_exponent("101")
        ('101', '')
    """
    folded = literal.replace(FLOAT_EXPONENT_MARKER.upper(), FLOAT_EXPONENT_MARKER)
    significand, _, exponent = folded.partition(FLOAT_EXPONENT_MARKER)
    return significand, exponent


def to_decimal(literal: str) -> CanonicalValue:
    """
    Двоичная научная запись → CanonicalValue.

    Examples:
        >>> str(to_decimal("1.01p+2"))
        '5'
        >>> str(to_decimal("-1p-1"))
        '-0.5'
    """
    significand, exponent_text = split_exponent(literal)
    exponent = int(exponent_text) if exponent_text else 0
    if abs(exponent) > MAX_EXPONENT_MAGNITUDE:
        raise MalformedNumber(
            f"Exponent {exponent} is outside ±{MAX_EXPONENT_MAGNITUDE}."
        )

    value = radix.to_fraction(significand, 2) * Fraction(2) ** exponent
    return CanonicalValue.from_fraction(value)


def normalized_exponent(magnitude: Fraction) -> int:
    """
    Показатель E такой, что 1 <= magnitude * 2^-E < 2.

    Examples:
        >>> normalized_exponent(Fraction(5))
        2
        >>> normalized_exponent(Fraction(3, 8))
        -2
    """
    if magnitude <= 0:
        raise ValueError(f"magnitude must be positive, got {magnitude}")

    exponent = magnitude.numerator.bit_length() - magnitude.denominator.bit_length()
    if magnitude < Fraction(2) ** exponent:
        exponent -= 1
    return exponent


def from_decimal(value: CanonicalValue) -> str:
    """
    CanonicalValue → нормализованная двоичная научная запись.

    Examples:
        >>> from_decimal(CanonicalValue.from_decimal(5))
        '1.01p+2'
        >>> from_decimal(CanonicalValue.from_decimal("-0.375"))
        '-1.1p-2'
    """
    magnitude = abs(value.as_fraction())
    if magnitude == 0:
        return ZERO_LITERAL

    exponent = normalized_exponent(magnitude)
    tail_length = PRECISION + max(exponent, 0)
    significand = magnitude / Fraction(2) ** exponent

    # floor(significand * 2^n) в [2^n, 2^(n+1)): ведущая '1' и n бит
    mantissa = int(significand * 2**tail_length)
    tail = radix.int_to_digits(mantissa, 2)[1:].rstrip("0") or "0"
    sign = radix.SIGN if value.negative else ""
    return f"{sign}1{radix.POINT}{tail}{FLOAT_EXPONENT_MARKER}{exponent:+d}"
