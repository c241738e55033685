"""
BCD Codec — Binary-Coded Decimal

Каждая десятичная цифра кодируется независимо группой из 4 бит.
Ровно десять допустимых групп (0000..1001); 1010..1111 — ошибка.
BCD не поддерживает знак и дробную часть (см. registry).
"""

from types import MappingProxyType
from typing import Final, Mapping

from src.core.domain.canonical import CanonicalValue
from src.core.domain.errors import MalformedBcd

GROUP_SIZE: Final[int] = 4

# Цифра → 4-битная группа
DIGIT_TO_GROUP: Final[Mapping[str, str]] = MappingProxyType(
    {str(digit): format(digit, "04b") for digit in range(10)}
)

# 4-битная группа → значение цифры
GROUP_TO_DIGIT: Final[Mapping[str, int]] = MappingProxyType(
    {group: int(digit) for digit, group in DIGIT_TO_GROUP.items()}
)


def to_decimal(bits: str) -> CanonicalValue:
    """
    BCD → CanonicalValue.

    Группы склеиваются старшими первыми в десятичное целое.

    Raises:
        MalformedBcd: Если длина не кратна 4 или группа вне 0000..1001

    Examples:
        >>> str(to_decimal("00010010"))
        '12'
    """
    if not bits or len(bits) % GROUP_SIZE != 0:
        raise MalformedBcd(
            f"BCD codify is not correct: length {len(bits)} is not a multiple of {GROUP_SIZE}."
        )

    value = 0
    for start in range(0, len(bits), GROUP_SIZE):
        group = bits[start:start + GROUP_SIZE]
        digit = GROUP_TO_DIGIT.get(group)
        if digit is None:
            raise MalformedBcd(f"BCD codify is not correct: invalid group {group!r}.")
        value = value * 10 + digit

    return CanonicalValue.from_parts(value)


def from_decimal(value: CanonicalValue) -> str:
    """
    CanonicalValue (целое >= 0) → BCD.

    Raises:
        ValueError: Если значение дробное или отрицательное
            (ошибка вызывающего: Validator/engine отсекают раньше)

    Examples:
        >>> from_decimal(CanonicalValue.from_decimal(12))
        '00010010'
    """
    if value.negative or not value.is_integer:
        raise ValueError(f"BCD requires a non-negative integer, got {value}")

    return "".join(DIGIT_TO_GROUP[digit] for digit in str(value.integer))
