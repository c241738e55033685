"""
Тесты для Float Codec (двоичная научная запись) и дополнения до bit width

Проверяет:
1. Разбор мантиссы и показателя 'p±E' (ненормализованная мантисса допустима)
2. Нормализованный вывод: ровно одна '1' до точки
3. Ноль и относительная точность малых значений
4. Дополнение с сохранением значения (расширение знака, '0' после знака)
5. WidthTooSmall при нехватке разрядов
"""

from fractions import Fraction

import pytest

from src.core.codecs import floating
from src.core.codecs.signed import twos_complement_to_decimal
from src.core.codecs.width import apply_bit_width
from src.core.domain.canonical import PRECISION, CanonicalValue
from src.core.domain.encoding import EncodingKind
from src.core.domain.errors import MalformedNumber, WidthTooSmall


def _value(n) -> CanonicalValue:
    return CanonicalValue.from_decimal(n)


# =============================================================================
# FLOAT
# =============================================================================


class TestFloatDecode:
    """Тесты floating.to_decimal"""

    def test_normalized(self) -> None:
        assert floating.to_decimal("1.01p+2") == _value(5)

    def test_negative_exponent(self) -> None:
        assert floating.to_decimal("-1p-1") == _value("-0.5")

    def test_exponent_optional(self) -> None:
        assert floating.to_decimal("101.1") == _value("5.5")

    def test_unnormalized_significand(self) -> None:
        """Мантисса не обязана быть нормализованной"""
        assert floating.to_decimal("0.0101p3") == _value("2.5")

    def test_uppercase_marker(self) -> None:
        assert floating.to_decimal("1.1P1") == _value(3)

    def test_exponent_limit(self) -> None:
        with pytest.raises(MalformedNumber, match="Exponent"):
            floating.to_decimal("1p+5000")

    def test_split_exponent(self) -> None:
        assert floating.split_exponent("1.01p-3") == ("1.01", "-3")
        assert floating.split_exponent("101") == ("101", "")


class TestFloatEncode:
    """Тесты floating.from_decimal"""

    def test_integer(self) -> None:
        assert floating.from_decimal(_value(5)) == "1.01p+2"
        assert floating.from_decimal(_value(1)) == "1.0p+0"

    def test_fraction_below_one(self) -> None:
        assert floating.from_decimal(_value("0.5")) == "1.0p-1"
        assert floating.from_decimal(_value("-0.375")) == "-1.1p-2"

    def test_mixed(self) -> None:
        """18.05 → 10010.00001100110011001100₂, хвостовые нули мантиссы отброшены"""
        assert floating.from_decimal(_value("18.05")) == "1.0010000011001100110011p+4"

    def test_zero(self) -> None:
        assert floating.from_decimal(_value(0)) == "0.0p+0"

    def test_small_value_keeps_significant_bits(self) -> None:
        """Мантисса нормализуется по точному значению, а не по 20 дробным битам"""
        value = _value("0.000001")
        literal = floating.from_decimal(value)
        assert literal.endswith("p-20")
        assert literal != "1.0p-20"

        restored = floating.to_decimal(literal)
        error = abs(restored.as_fraction() - value.as_fraction()) / value.as_fraction()
        assert error < Fraction(1, 2 ** (PRECISION - 1))

    def test_smallest_canonical_value(self) -> None:
        """1E-20 представим и восстанавливается точно"""
        value = _value("0." + "0" * (PRECISION - 1) + "1")
        literal = floating.from_decimal(value)
        assert literal.startswith("1.")
        assert literal.endswith("p-67")
        assert floating.to_decimal(literal) == value

    def test_normalized_exponent(self) -> None:
        assert floating.normalized_exponent(Fraction(1)) == 0
        assert floating.normalized_exponent(Fraction(7, 4)) == 0
        assert floating.normalized_exponent(Fraction(2)) == 1
        assert floating.normalized_exponent(Fraction(1, 1024)) == -10
        assert floating.normalized_exponent(Fraction(3, 2048)) == -10
        with pytest.raises(ValueError, match="positive"):
            floating.normalized_exponent(Fraction(0))

    def test_round_trip_dyadic(self) -> None:
        """Двоично-рациональные значения проходят туда-обратно точно"""
        for text in ("1", "-3", "0.75", "-1024.5", "6.125", "0.0009765625"):
            value = _value(text)
            assert floating.to_decimal(floating.from_decimal(value)) == value, text


# =============================================================================
# BIT WIDTH
# =============================================================================


class TestBitWidth:
    """Тесты apply_bit_width"""

    def test_zero_width_unchanged(self) -> None:
        assert apply_bit_width("1011", EncodingKind.TWOS_COMPLEMENT, 0) == "1011"

    def test_binary_pads_after_sign(self) -> None:
        assert apply_bit_width("101", EncodingKind.BINARY, 8) == "00000101"
        assert apply_bit_width("-101.1", EncodingKind.BINARY, 8) == "-00000101.1"

    def test_twos_complement_sign_extension(self) -> None:
        """Расширение знаковым битом сохраняет значение"""
        padded = apply_bit_width("1011", EncodingKind.TWOS_COMPLEMENT, 8)
        assert padded == "11111011"
        assert twos_complement_to_decimal(padded) == _value(-5)
        assert apply_bit_width("0101", EncodingKind.TWOS_COMPLEMENT, 8) == "00000101"

    def test_ones_complement_sign_extension(self) -> None:
        assert apply_bit_width("1010", EncodingKind.ONES_COMPLEMENT, 6) == "111010"

    def test_sign_magnitude_inserts_after_sign(self) -> None:
        assert apply_bit_width("1101", EncodingKind.SIGN_MAGNITUDE, 8) == "10000101"

    def test_exact_width(self) -> None:
        assert apply_bit_width("1011", EncodingKind.TWOS_COMPLEMENT, 4) == "1011"

    def test_width_too_small(self) -> None:
        with pytest.raises(WidthTooSmall, match="at least 10 bit"):
            apply_bit_width("0100101100", EncodingKind.TWOS_COMPLEMENT, 8)
        with pytest.raises(WidthTooSmall):
            apply_bit_width("-101", EncodingKind.BINARY, 2)

    def test_other_encodings_unchanged(self) -> None:
        assert apply_bit_width("FF", EncodingKind.RADIX, 8) == "FF"

    def test_negative_width_raises(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            apply_bit_width("1", EncodingKind.BINARY, -1)
