"""
Тесты для ConversionEngine

Проверяет:
1. Сквозные конверсии между всеми семействами кодировок
2. Перепроверку возможностей назначения по значению
   (знаковые и FLOAT источники)
3. ConversionConfig: bit_width, roman_max, max_literal_length
4. decode/render по отдельности
5. convert_request: JSON-контракт запроса и результата
"""

import logging
from decimal import Decimal

import pytest
from jsonschema import ValidationError

from src.core.domain import (
    CanonicalValue,
    DigitOutOfRange,
    EncodingId,
    EncodingKind,
    FractionNotAllowed,
    LiteralTooLong,
    MalformedBcd,
    MalformedNumber,
    MalformedRoman,
    NegativeNotAllowed,
    RomanOutOfRange,
    SameEncoding,
    WidthTooSmall,
)
from src.engine import ConversionConfig, ConversionEngine, convert

BCD = EncodingId.of(EncodingKind.BCD)
BIN = EncodingId.of(EncodingKind.BINARY)
CO1 = EncodingId.of(EncodingKind.ONES_COMPLEMENT)
CO2 = EncodingId.of(EncodingKind.TWOS_COMPLEMENT)
DEC = EncodingId.of(EncodingKind.DECIMAL)
FLOAT = EncodingId.of(EncodingKind.FLOAT)
HEX = EncodingId.of(EncodingKind.HEX)
OCT = EncodingId.of(EncodingKind.OCTAL)
SM = EncodingId.of(EncodingKind.SIGN_MAGNITUDE)
ROMAN = EncodingId.of(EncodingKind.ROMAN)
UNARY = EncodingId.of(EncodingKind.UNARY)


@pytest.fixture
def engine() -> ConversionEngine:
    return ConversionEngine()


# =============================================================================
# СКВОЗНЫЕ КОНВЕРСИИ
# =============================================================================


class TestConvert:
    """Тесты convert"""

    @pytest.mark.parametrize(
        "literal,source,dest,expected",
        [
            ("1010011010", BIN, EncodingId.radix(15), "2E6"),
            ("18.05", DEC, BIN, "10010.00001100110011001100"),
            ("00010010", BCD, DEC, "12"),
            ("12", DEC, BCD, "00010010"),
            ("MCMXCIV", ROMAN, HEX, "7CA"),
            ("7ca", HEX, ROMAN, "MCMXCIV"),
            ("0", DEC, ROMAN, "NULL"),
            ("-5", DEC, CO2, "1011"),
            ("-5", DEC, CO1, "1010"),
            ("-5", DEC, SM, "1101"),
            ("1011", CO2, DEC, "-5"),
            ("1010", CO1, OCT, "-5"),
            ("1101", SM, CO2, "1011"),
            ("3", DEC, UNARY, "000"),
            ("00000", UNARY, DEC, "5"),
            ("5", DEC, FLOAT, "1.01p+2"),
            ("-0.375", DEC, FLOAT, "-1.1p-2"),
            ("1.01p+2", FLOAT, DEC, "5"),
            ("FF", HEX, EncodingId.radix(2), "11111111"),
            ("377", OCT, HEX, "FF"),
        ],
    )
    def test_examples(self, engine, literal, source, dest, expected) -> None:
        assert engine.convert(literal, source, dest) == expected

    def test_fraction_keeps_precision_digits(self, engine) -> None:
        """Дробный вывод позиционных кодировок — ровно 20 цифр"""
        assert engine.convert("-ff.8", HEX, BIN) == "-11111111.1" + "0" * 19
        assert engine.convert("1p-1", FLOAT, DEC) == "0.5" + "0" * 19

    def test_small_value_through_float(self, engine) -> None:
        """DEC → FLOAT → DEC сохраняет относительную точность 2^-20"""
        original = Decimal("0.000001")
        literal = engine.convert(str(original), DEC, FLOAT)
        restored = Decimal(engine.convert(literal, FLOAT, DEC))
        assert abs(restored - original) / original < Decimal("1e-6")

    def test_non_ascii_digit_rejected(self, engine) -> None:
        with pytest.raises(DigitOutOfRange):
            engine.convert("ı", EncodingId.radix(36), DEC)

    def test_binary_is_distinct_from_radix2(self, engine) -> None:
        assert engine.convert("101", BIN, EncodingId.radix(2)) == "101"

    def test_module_level_convert(self) -> None:
        assert convert("1010011010", BIN, EncodingId.radix(15)) == "2E6"
        assert convert("-5", DEC, CO2, bit_width=8) == "11111011"


class TestConvertErrors:
    """Ошибки validator и кодеков пробрасываются как есть"""

    def test_validator_errors(self, engine) -> None:
        with pytest.raises(MalformedNumber):
            engine.convert("1.2.3", DEC, BIN)
        with pytest.raises(NegativeNotAllowed, match="Unary Base"):
            engine.convert("-5", UNARY, DEC)
        with pytest.raises(SameEncoding):
            engine.convert("FF", HEX, EncodingId.radix(16))
        with pytest.raises(DigitOutOfRange):
            engine.convert("102", BIN, DEC)

    def test_codec_errors(self, engine) -> None:
        with pytest.raises(MalformedBcd):
            engine.convert("1010", BCD, DEC)
        with pytest.raises(MalformedRoman):
            engine.convert("XIZ", ROMAN, DEC)

    def test_roman_out_of_range(self, engine) -> None:
        with pytest.raises(RomanOutOfRange, match="limited to 3999"):
            engine.convert("4000", DEC, ROMAN)


# =============================================================================
# ПЕРЕПРОВЕРКА ВОЗМОЖНОСТЕЙ ПО ЗНАЧЕНИЮ
# =============================================================================


class TestValueCapabilityCheck:
    """Значение может быть отрицательным/дробным без '-' и '.' в литерале"""

    def test_twos_complement_negative_to_roman(self, engine) -> None:
        """'1011' в дополнительном коде = -5"""
        with pytest.raises(NegativeNotAllowed, match="Roman Numerals"):
            engine.convert("1011", CO2, ROMAN)

    def test_ones_complement_negative_to_bcd(self, engine) -> None:
        with pytest.raises(NegativeNotAllowed, match="Binary Coded Decimal"):
            engine.convert("1010", CO1, BCD)

    def test_float_fraction_to_bcd(self, engine) -> None:
        """'1p-1' = 0.5"""
        with pytest.raises(FractionNotAllowed, match="Binary Coded Decimal"):
            engine.convert("1p-1", FLOAT, BCD)

    def test_float_integer_to_bcd(self, engine) -> None:
        """'1.1p1' = 3, но точка в мантиссе отклоняется ещё validator-ом"""
        with pytest.raises(FractionNotAllowed):
            engine.convert("1.1p1", FLOAT, BCD)

    def test_negative_zero_renders_everywhere(self, engine) -> None:
        """'11' в обратном коде — отрицательный ноль, нормализуется в 0"""
        assert engine.convert("11", CO1, ROMAN) == "NULL"


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


class TestConversionConfig:
    """Тесты ConversionConfig"""

    def test_defaults(self) -> None:
        config = ConversionConfig()
        assert config.bit_width == 0
        assert config.roman_max == 3999
        assert config.max_literal_length == 4096

    def test_frozen(self) -> None:
        config = ConversionConfig()
        with pytest.raises(AttributeError):
            config.bit_width = 8  # type: ignore

    @pytest.mark.parametrize(
        "kwargs",
        [{"bit_width": -1}, {"roman_max": 0}, {"max_literal_length": 0}],
    )
    def test_invalid_values(self, kwargs) -> None:
        with pytest.raises(ValueError):
            ConversionConfig(**kwargs)

    def test_bit_width_from_config(self) -> None:
        engine = ConversionEngine(ConversionConfig(bit_width=8))
        assert engine.convert("5", DEC, BIN) == "00000101"
        assert engine.convert("-5", DEC, CO2) == "11111011"

    def test_bit_width_argument_overrides_config(self) -> None:
        engine = ConversionEngine(ConversionConfig(bit_width=8))
        assert engine.convert("5", DEC, BIN, bit_width=0) == "101"
        assert engine.convert("5", DEC, BIN, bit_width=4) == "0101"

    def test_bit_width_too_small(self, engine) -> None:
        """300 в дополнительном коде требует 10 бит"""
        with pytest.raises(WidthTooSmall, match="at least 10 bit"):
            engine.convert("300", DEC, CO2, bit_width=8)

    def test_bit_width_ignored_for_other_encodings(self, engine) -> None:
        assert engine.convert("255", DEC, HEX, bit_width=8) == "FF"
        assert engine.convert("4", DEC, ROMAN, bit_width=8) == "IV"

    def test_roman_unbounded(self) -> None:
        engine = ConversionEngine(ConversionConfig(roman_max=None))
        assert engine.convert("4000", DEC, ROMAN) == "MMMM"

    def test_roman_custom_limit(self) -> None:
        engine = ConversionEngine(ConversionConfig(roman_max=100))
        assert engine.convert("100", DEC, ROMAN) == "C"
        with pytest.raises(RomanOutOfRange, match="limited to 100"):
            engine.convert("101", DEC, ROMAN)

    def test_literal_length_limit(self) -> None:
        engine = ConversionEngine(ConversionConfig(max_literal_length=8))
        with pytest.raises(LiteralTooLong):
            engine.convert("101010101", BIN, DEC)

    def test_unary_output_limited(self) -> None:
        """Лимит длины распространяется на унарный вывод"""
        engine = ConversionEngine(ConversionConfig(max_literal_length=10))
        assert engine.convert("10", DEC, UNARY) == "0" * 10
        with pytest.raises(LiteralTooLong):
            engine.convert("11", DEC, UNARY)


# =============================================================================
# DECODE / RENDER
# =============================================================================


class TestDecodeRender:
    """Фазы конверсии по отдельности"""

    def test_decode(self, engine) -> None:
        assert engine.decode("1011", CO2) == CanonicalValue.from_decimal(-5)
        assert engine.decode("2E6", EncodingId.radix(15)) == CanonicalValue.from_decimal(666)

    def test_render(self, engine) -> None:
        value = CanonicalValue.from_decimal(-5)
        assert engine.render(value, CO2) == "1011"
        assert engine.render(value, CO2, bit_width=8) == "11111011"

    def test_render_checks_capabilities(self, engine) -> None:
        with pytest.raises(NegativeNotAllowed):
            engine.render(CanonicalValue.from_decimal(-1), UNARY)
        with pytest.raises(FractionNotAllowed):
            engine.render(CanonicalValue.from_decimal("0.5"), ROMAN)

    def test_debug_logging(self, engine, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.engine.conversion"):
            engine.convert("1011", CO2, DEC)
        assert "Converting '1011' from twos_complement to decimal" in caplog.text
        assert "Canonical value of '1011' is -5" in caplog.text


# =============================================================================
# JSON CONTRACT
# =============================================================================


class TestConvertRequest:
    """Тесты convert_request"""

    def test_radix_request(self, engine) -> None:
        result = engine.convert_request(
            {
                "literal": "1010011010",
                "source": {"kind": "binary"},
                "destination": {"kind": "radix", "base": 15},
            }
        )
        assert result == {
            "literal": "2E6",
            "source": "binary",
            "destination": "radix15",
            "canonical": "666",
        }

    def test_bit_width_request(self, engine) -> None:
        result = engine.convert_request(
            {
                "literal": "-5",
                "source": {"kind": "decimal"},
                "destination": {"kind": "twos_complement"},
                "bit_width": 8,
            }
        )
        assert result["literal"] == "11111011"
        assert result["canonical"] == "-5"

    def test_fractional_canonical(self, engine) -> None:
        result = engine.convert_request(
            {
                "literal": "18.05",
                "source": {"kind": "decimal"},
                "destination": {"kind": "binary"},
            }
        )
        assert result["canonical"] == "18.05"

    @pytest.mark.parametrize(
        "payload",
        [
            {"literal": "1", "source": {"kind": "binary"}},
            {"literal": "", "source": {"kind": "binary"}, "destination": {"kind": "hex"}},
            {"literal": "1", "source": {"kind": "radix"}, "destination": {"kind": "hex"}},
            {"literal": "1", "source": {"kind": "hex", "base": 16}, "destination": {"kind": "binary"}},
            {"literal": "1", "source": {"kind": "radix", "base": 37}, "destination": {"kind": "binary"}},
            {"literal": "1", "source": {"kind": "base64"}, "destination": {"kind": "binary"}},
            {"literal": "1", "source": {"kind": "binary"}, "destination": {"kind": "hex"}, "bit_width": -1},
            {"literal": "1", "source": {"kind": "binary"}, "destination": {"kind": "hex"}, "extra": 1},
        ],
    )
    def test_invalid_payload(self, engine, payload) -> None:
        with pytest.raises(ValidationError):
            engine.convert_request(payload)

    def test_conversion_error_propagates(self, engine) -> None:
        with pytest.raises(DigitOutOfRange):
            engine.convert_request(
                {
                    "literal": "2",
                    "source": {"kind": "binary"},
                    "destination": {"kind": "decimal"},
                }
            )
