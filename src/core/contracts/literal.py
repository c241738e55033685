"""
Literal Validator — Проверка литерала перед конверсией

Проверяет символы литерала, позицию знака и количество точек против
строк registry для исходной и целевой кодировок.

Порядок проверок (первая неудача побеждает):
1. Исходная и целевая кодировки совпадают → SameEncoding;
   затем пустой литерал / литерал длиннее лимита
2. Один проход: знаки и их позиции, количество точек
   (для кодировок с маркером экспоненты — только мантисса;
   экспонента должна быть [+-]?[0-9]+)
3. Точек > 1 → MalformedNumber; ровно 1 → обе кодировки должны
   допускать дробь, иначе FractionNotAllowed
4. Знак не на позиции 0 / несколько знаков → MalformedNumber;
   знак на позиции 0 → источник и назначение должны допускать минус,
   иначе NegativeNotAllowed
5. Мантисса без цифр ("-", ".") → MalformedNumber
6. checkBase для кодировок с digit_base → DigitOutOfRange
"""

import re
from dataclasses import dataclass
from typing import Final, Optional

from src.core.codecs.radix import POINT, SIGN, digit_value
from src.core.domain.encoding import EncodingId, EncodingMeta, lookup
from src.core.domain.errors import (
    ConversionError,
    DigitOutOfRange,
    FractionNotAllowed,
    LiteralTooLong,
    MalformedNumber,
    NegativeNotAllowed,
    SameEncoding,
)

# Лимит длины входного литерала по умолчанию
MAX_LITERAL_LENGTH_DEFAULT: Final[int] = 4096

_EXPONENT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class ValidationResult:
    """Результат проверки литерала."""

    valid: bool
    error: Optional[ConversionError]

    # Диагностика
    details: str

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


@dataclass(frozen=True)
class _LiteralScan:
    significand: str
    exponent: Optional[str]
    sign_positions: tuple[int, ...]
    point_count: int


class LiteralValidator:
    """
    Stateless проверка литерала.

    Порядок проверок описан в docstring модуля.
    """

    def __init__(self, max_literal_length: int = MAX_LITERAL_LENGTH_DEFAULT):
        """
        Args:
            max_literal_length: максимальная длина входного литерала
        """
        if max_literal_length <= 0:
            raise ValueError(
                f"max_literal_length must be positive, got {max_literal_length}"
            )
        self.max_literal_length = max_literal_length

    def evaluate(
        self,
        literal: str,
        source: EncodingId,
        dest: EncodingId,
    ) -> ValidationResult:
        """Проверка литерала для пары (source, dest)."""
        source_meta = lookup(source)
        dest_meta = lookup(dest)

        try:
            self._check(literal, source, dest, source_meta, dest_meta)
        except ConversionError as e:
            return ValidationResult(valid=False, error=e, details=str(e))

        return ValidationResult(
            valid=True,
            error=None,
            details=f"{source} -> {dest}: literal accepted",
        )

    def _check(
        self,
        literal: str,
        source: EncodingId,
        dest: EncodingId,
        source_meta: EncodingMeta,
        dest_meta: EncodingMeta,
    ) -> None:
        # 1. Одинаковые кодировки
        if source.canonical() == dest.canonical():
            raise SameEncoding()

        # 1a. Длина
        if not literal:
            raise MalformedNumber("Empty literal.")
        if len(literal) > self.max_literal_length:
            raise LiteralTooLong(len(literal), self.max_literal_length)

        # 2. Один проход по литералу
        scan = _scan(literal, source_meta.exponent_marker)
        if scan.exponent is not None and not _EXPONENT_PATTERN.fullmatch(scan.exponent):
            raise MalformedNumber(f"Malformed exponent: {scan.exponent!r}.")

        # 3. Десятичная точка
        if scan.point_count > 1:
            raise MalformedNumber("Multiple decimal points.")
        if scan.point_count == 1:
            for meta in (source_meta, dest_meta):
                if not meta.allows_fraction:
                    raise FractionNotAllowed(meta.name)

        # 4. Знак
        if len(scan.sign_positions) > 1 or any(scan.sign_positions):
            raise MalformedNumber("Minus sign is allowed only once, in first position.")
        if scan.sign_positions:
            if not source_meta.allows_negative_source:
                raise NegativeNotAllowed(source_meta.name)
            if not dest_meta.allows_negative_dest:
                raise NegativeNotAllowed(dest_meta.name)

        # 5. Пустая мантисса
        digits = scan.significand.replace(SIGN, "").replace(POINT, "")
        if not digits:
            raise MalformedNumber("Literal contains no digits.")

        # 6. checkBase
        if source_meta.digit_base is not None:
            check_base(digits, source_meta.digit_base)


def _scan(literal: str, exponent_marker: Optional[str]) -> _LiteralScan:
    significand, exponent = literal, None
    if exponent_marker is not None:
        folded = literal.replace(exponent_marker.upper(), exponent_marker)
        head, marker, tail = folded.partition(exponent_marker)
        if marker:
            significand, exponent = head, tail

    sign_positions = tuple(i for i, char in enumerate(significand) if char == SIGN)
    return _LiteralScan(
        significand=significand,
        exponent=exponent,
        sign_positions=sign_positions,
        point_count=significand.count(POINT),
    )


def check_base(digits: str, base: int) -> None:
    """
    Каждый символ — цифра со значением < base (0-9, затем A-Z для 10-35).

    Args:
        digits: Символы без знака и точки
        base: Основание (1 для унарной записи: допустим только '0')

    Raises:
        DigitOutOfRange: Первый недопустимый символ
    """
    for char in digits:
        try:
            value = digit_value(char)
        except ValueError:
            raise DigitOutOfRange(base, char) from None
        if value >= base:
            raise DigitOutOfRange(base, char)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_literal(
    literal: str,
    source: EncodingId,
    dest: EncodingId,
    max_literal_length: int = MAX_LITERAL_LENGTH_DEFAULT,
) -> None:
    """
    Проверка литерала с исключением.

    Raises:
        ConversionError: Первая нарушенная проверка
    """
    LiteralValidator(max_literal_length).evaluate(literal, source, dest).raise_for_error()
