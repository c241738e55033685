"""
Roman Codec — Римские цифры

Разбор: сканирование справа налево с порядковыми приоритетами
I < V < X < L < C < D < M. Символ с приоритетом >= максимального
встреченного справа прибавляется (и поднимает максимум), иначе
вычитается (вычитательная пара; максимум не понижается).

Вывод: 0 → "NULL" (латинское "nulla"), положительные целые —
жадным алгоритмом по таблице с вычитательными парами
(CM, CD, XC, XL, IX, IV).

Верхняя граница классической записи (3999) применяется только
при выводе и настраивается через limit; разбор не ограничен.
"""

from types import MappingProxyType
from typing import Final, Mapping, Optional

from src.core.domain.canonical import CanonicalValue
from src.core.domain.errors import MalformedRoman, RomanOutOfRange

# Символ → (значение, приоритет)
SYMBOLS: Final[Mapping[str, tuple[int, int]]] = MappingProxyType(
    {
        "I": (1, 1),
        "V": (5, 2),
        "X": (10, 3),
        "L": (50, 4),
        "C": (100, 5),
        "D": (500, 6),
        "M": (1000, 7),
    }
)

# Таблица жадного вывода, старшие значения первыми
GREEDY_TABLE: Final[tuple[tuple[int, str], ...]] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

ZERO_TOKEN: Final[str] = "NULL"

# Классический предел римской записи
ROMAN_MAX_CLASSIC: Final[int] = 3999


def to_decimal(literal: str) -> CanonicalValue:
    """
    Римская запись → CanonicalValue (регистронезависимо).

    Raises:
        MalformedRoman: Если встретился символ вне I, V, X, L, C, D, M

    Examples:
        >>> str(to_decimal("MCMXCIV"))
        '1994'
        >>> str(to_decimal("iv"))
        '4'
    """
    total = 0
    highest_priority = 0

    for char in reversed(literal):
        entry = SYMBOLS.get(char.upper()) if char.isascii() else None
        if entry is None:
            raise MalformedRoman(char)

        value, priority = entry
        if priority >= highest_priority:
            total += value
            highest_priority = priority
        else:
            total -= value

    # Патологические строки ("IIIIIIIIIIIX" = -1) могут уйти в минус
    return CanonicalValue.from_parts(abs(total), negative=total < 0)


def from_decimal(value: CanonicalValue, limit: Optional[int] = ROMAN_MAX_CLASSIC) -> str:
    """
    CanonicalValue (целое >= 0) → римская запись.

    Args:
        value: Каноническое значение
        limit: Максимальное выводимое значение (None — без ограничения,
            старшие тысячи повторяют 'M')

    Raises:
        RomanOutOfRange: Если значение больше limit
        ValueError: Если значение дробное или отрицательное

    Examples:
        >>> from_decimal(CanonicalValue.from_decimal(1994))
        'MCMXCIV'
        >>> from_decimal(CanonicalValue.from_decimal(0))
        'NULL'
    """
    if value.negative or not value.is_integer:
        raise ValueError(f"Roman numerals require a non-negative integer, got {value}")

    remaining = value.integer
    if remaining == 0:
        return ZERO_TOKEN

    if limit is not None and remaining > limit:
        raise RomanOutOfRange(remaining, limit)

    parts = []
    for amount, symbol in GREEDY_TABLE:
        count, remaining = divmod(remaining, amount)
        parts.append(symbol * count)

    return "".join(parts)
