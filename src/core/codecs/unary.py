"""
Unary Codec — Унарная система счисления

Вырожденный случай RadixCodec: значение = длина литерала из маркеров '0'.
Только натуральные числа: без знака и без дробной части.
"""

from typing import Final, Optional

from src.core.domain.canonical import CanonicalValue
from src.core.domain.errors import LiteralTooLong

UNARY_MARKER: Final[str] = "0"


def to_decimal(literal: str) -> CanonicalValue:
    """
    Examples:
        >>> str(to_decimal("00000"))
        '5'
    """
    return CanonicalValue.from_parts(len(literal))


def from_decimal(value: CanonicalValue, max_length: Optional[int] = None) -> str:
    """
    Серия из value маркеров.

    Raises:
        LiteralTooLong: Если value > max_length
        ValueError: Если значение дробное или отрицательное
    """
    if value.negative or not value.is_integer:
        raise ValueError(f"Unary admits only natural numbers, got {value}")

    if max_length is not None and value.integer > max_length:
        raise LiteralTooLong(value.integer, max_length)

    return UNARY_MARKER * value.integer
