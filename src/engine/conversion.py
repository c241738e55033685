"""Conversion Engine — оркестрация одной конверсии.

Поток данных (один проход на вызов):
    литерал → LiteralValidator → decode(source) → CanonicalValue
            → проверка возможностей назначения → render(dest) → bit width

Знаковые и FLOAT источники могут дать значение, которого не видно по
символам литерала (например, '1011' в дополнительном коде = -5), поэтому
возможности назначения перепроверяются по самому значению.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Final, Mapping, Optional

from src.core.codecs import bcd, floating, radix, roman, signed, unary
from src.core.codecs.width import apply_bit_width
from src.core.contracts.literal import MAX_LITERAL_LENGTH_DEFAULT, LiteralValidator
from src.core.contracts.validators import (
    validate_conversion_request,
    validate_conversion_result,
)
from src.core.domain.canonical import CanonicalValue
from src.core.domain.encoding import EncodingId, EncodingKind, lookup
from src.core.domain.errors import (
    FractionNotAllowed,
    NegativeNotAllowed,
    UnknownEncoding,
)

logger = logging.getLogger(__name__)

Decoder = Callable[[str, EncodingId], CanonicalValue]


@dataclass(frozen=True)
class ConversionConfig:
    """Конфигурация движка конверсии.

    - bit_width: разрядность двоичного вывода по умолчанию (0 — без ограничения)
    - roman_max: предел римского вывода (None — повторять 'M' без ограничения)
    - max_literal_length: предел длины входного литерала и унарного вывода
    """
    bit_width: int = 0
    roman_max: Optional[int] = roman.ROMAN_MAX_CLASSIC
    max_literal_length: int = MAX_LITERAL_LENGTH_DEFAULT

    def __post_init__(self) -> None:
        if self.bit_width < 0:
            raise ValueError(f"bit_width must be non-negative, got {self.bit_width}")
        if self.roman_max is not None and self.roman_max < 1:
            raise ValueError(f"roman_max must be positive, got {self.roman_max}")
        if self.max_literal_length <= 0:
            raise ValueError(
                f"max_literal_length must be positive, got {self.max_literal_length}"
            )


# =============================================================================
# DECODERS (литерал → CanonicalValue)
# =============================================================================


# Фиксированные основания позиционных кодировок вне RADIX/HEX/OCTAL
_FIXED_BASES: Final[Mapping[EncodingKind, int]] = MappingProxyType(
    {
        EncodingKind.BINARY: 2,
        EncodingKind.DECIMAL: 10,
    }
)


def _positional_base(encoding: EncodingId) -> int:
    return _FIXED_BASES.get(encoding.kind) or encoding.radix_base


def _decode_radix(literal: str, encoding: EncodingId) -> CanonicalValue:
    return radix.to_decimal(literal, _positional_base(encoding))


_DECODERS: Final[Mapping[EncodingKind, Decoder]] = MappingProxyType(
    {
        EncodingKind.BCD: lambda literal, _: bcd.to_decimal(literal),
        EncodingKind.BINARY: _decode_radix,
        EncodingKind.ONES_COMPLEMENT: lambda literal, _: signed.ones_complement_to_decimal(literal),
        EncodingKind.TWOS_COMPLEMENT: lambda literal, _: signed.twos_complement_to_decimal(literal),
        EncodingKind.DECIMAL: _decode_radix,
        EncodingKind.FLOAT: lambda literal, _: floating.to_decimal(literal),
        EncodingKind.HEX: _decode_radix,
        EncodingKind.SIGN_MAGNITUDE: lambda literal, _: signed.sign_magnitude_to_decimal(literal),
        EncodingKind.OCTAL: _decode_radix,
        EncodingKind.ROMAN: lambda literal, _: roman.to_decimal(literal),
        EncodingKind.UNARY: lambda literal, _: unary.to_decimal(literal),
        EncodingKind.RADIX: _decode_radix,
    }
)


# =============================================================================
# CONVERSION ENGINE
# =============================================================================


class ConversionEngine:
    """Stateless движок: Validator → decode → render.

    Экземпляр можно разделять между потоками: единственное общее
    состояние — read-only registry и неизменяемая конфигурация.
    """

    def __init__(self, config: Optional[ConversionConfig] = None):
        """
        Args:
            config: конфигурация (по умолчанию ConversionConfig())
        """
        self.config = config or ConversionConfig()
        self.validator = LiteralValidator(self.config.max_literal_length)

    def convert(
        self,
        literal: str,
        source: EncodingId,
        dest: EncodingId,
        bit_width: Optional[int] = None,
    ) -> str:
        """Конверсия литерала из source в dest.

        Args:
            literal: литерал в исходной кодировке
            source: исходная кодировка
            dest: целевая кодировка
            bit_width: разрядность двоичного вывода (None — из config)

        Returns:
            литерал в целевой кодировке

        Raises:
            ConversionError: первая нарушенная проверка или ошибка кодека
        """
        logger.debug("Converting %r from %s to %s", literal, source, dest)

        self.validator.evaluate(literal, source, dest).raise_for_error()

        value = self.decode(literal, source)
        logger.debug("Canonical value of %r is %s", literal, value)

        result = self.render(value, dest, bit_width)
        logger.debug("Rendered %s as %r in %s", value, result, dest)
        return result

    def decode(self, literal: str, source: EncodingId) -> CanonicalValue:
        """Литерал (уже провалидированный) → CanonicalValue."""
        lookup(source)
        return _DECODERS[source.kind](literal, source)

    def render(
        self,
        value: CanonicalValue,
        dest: EncodingId,
        bit_width: Optional[int] = None,
    ) -> str:
        """CanonicalValue → литерал в dest.

        Raises:
            NegativeNotAllowed: значение отрицательное, dest не допускает минус
            FractionNotAllowed: значение дробное, dest допускает только целые
            WidthTooSmall: значение не помещается в bit_width
        """
        meta = lookup(dest)

        if value.negative and not meta.allows_negative_dest:
            raise NegativeNotAllowed(meta.name)
        if not value.is_integer and not meta.allows_fraction:
            raise FractionNotAllowed(meta.name)

        literal = self._render_literal(value, dest)

        width = self.config.bit_width if bit_width is None else bit_width
        if meta.supports_bit_width:
            literal = apply_bit_width(literal, dest.kind, width)
        elif width:
            logger.debug("bit_width=%d ignored for %s", width, dest)

        return literal

    def _render_literal(self, value: CanonicalValue, dest: EncodingId) -> str:
        kind = dest.kind

        if kind == EncodingKind.BCD:
            return bcd.from_decimal(value)
        if kind == EncodingKind.ONES_COMPLEMENT:
            return signed.decimal_to_ones_complement(value)
        if kind == EncodingKind.TWOS_COMPLEMENT:
            return signed.decimal_to_twos_complement(value)
        if kind == EncodingKind.FLOAT:
            return floating.from_decimal(value)
        if kind == EncodingKind.SIGN_MAGNITUDE:
            return signed.decimal_to_sign_magnitude(value)
        if kind == EncodingKind.ROMAN:
            return roman.from_decimal(value, limit=self.config.roman_max)
        if kind == EncodingKind.UNARY:
            return unary.from_decimal(value, max_length=self.config.max_literal_length)
        if kind in _FIXED_BASES or dest.radix_base is not None:
            return radix.from_decimal(value, _positional_base(dest))

        raise UnknownEncoding(dest)

    def convert_request(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Конверсия по JSON-запросу (контракт conversion_request).

        Returns:
            dict по контракту conversion_result

        Raises:
            jsonschema.ValidationError: запрос/результат не соответствует схеме
            ConversionError: ошибка конверсии
        """
        validate_conversion_request(payload)

        source = EncodingId.model_validate(payload["source"])
        dest = EncodingId.model_validate(payload["destination"])
        literal = payload["literal"]

        self.validator.evaluate(literal, source, dest).raise_for_error()
        value = self.decode(literal, source)
        rendered = self.render(value, dest, payload.get("bit_width"))

        result = {
            "literal": rendered,
            "source": str(source),
            "destination": str(dest),
            "canonical": str(value),
        }
        validate_conversion_result(result)
        return result


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_DEFAULT_ENGINE: Final[ConversionEngine] = ConversionEngine()


def convert(
    literal: str,
    source: EncodingId,
    dest: EncodingId,
    bit_width: int = 0,
) -> str:
    """Конверсия движком с конфигурацией по умолчанию.

    Raises:
        ConversionError: первая нарушенная проверка или ошибка кодека
    """
    return _DEFAULT_ENGINE.convert(literal, source, dest, bit_width)
