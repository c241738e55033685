"""
Signed Codec — Знаковые двоичные представления

Три представления поверх RadixCodec(base=2) для модуля:
- Ones' complement (обратный код)
- Two's complement (дополнительный код) = обратный код + 1 для отрицательных
- Sign-magnitude (прямой код): старший бит — знак, остальные — модуль

Ширина вывода — ровно столько бит, сколько нужно модулю, плюс один
знаковый бит. Фиксированная разрядность (bit_width) — забота вызывающего
(см. codecs.width).

Кодек не перепроверяет, что вход двоичный: это задача Validator.
Дробные значения отсекаются выше по потоку (allows_fraction=False).
"""

from src.core.codecs import radix
from src.core.domain.canonical import CanonicalValue


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ОПЕРАЦИИ НАД БИТАМИ
# =============================================================================


def complement_bits(bits: str) -> str:
    """
    Побитовая инверсия.

    Examples:
        >>> complement_bits("1010")
        '0101'
    """
    return bits.translate(str.maketrans("01", "10"))


def increment_bits(bits: str) -> str:
    """
    Двоичный +1 (ripple carry).

    Сканирование с младшего бита: ведущие '1' становятся '0', первый
    встреченный '0' становится '1'. Если все биты были '1', результат
    растёт на один бит с новой ведущей '1'.

    Examples:
        >>> increment_bits("1011")
        '1100'
        >>> increment_bits("111")
        '1000'
    """
    position = bits.rfind("0")
    if position < 0:
        return "1" + "0" * len(bits)
    return bits[:position] + "1" + "0" * (len(bits) - position - 1)


def _integer_magnitude_bits(value: CanonicalValue) -> str:
    return radix.int_to_digits(value.integer, 2)


# =============================================================================
# ONES' COMPLEMENT
# =============================================================================


def ones_complement_to_decimal(bits: str) -> CanonicalValue:
    """
    Обратный код → CanonicalValue.

    Ведущий '1' — отрицательное число, модуль = инверсия бит.

    Examples:
        >>> str(ones_complement_to_decimal("1010"))
        '-5'
        >>> str(ones_complement_to_decimal("0101"))
        '5'
    """
    if bits.startswith("1"):
        magnitude = radix.digits_to_int(complement_bits(bits), 2)
        return CanonicalValue.from_parts(magnitude, negative=True)
    return CanonicalValue.from_parts(radix.digits_to_int(bits, 2))


def decimal_to_ones_complement(value: CanonicalValue) -> str:
    """
    CanonicalValue → обратный код.

    Модуль в двоичном виде; для отрицательных — инверсия и ведущий '1',
    для неотрицательных — ведущий '0'.

    Examples:
        >>> decimal_to_ones_complement(CanonicalValue.from_decimal(-5))
        '1010'
        >>> decimal_to_ones_complement(CanonicalValue.from_decimal(0))
        '00'
    """
    magnitude_bits = _integer_magnitude_bits(value)
    if value.negative:
        return "1" + complement_bits(magnitude_bits)
    return "0" + magnitude_bits


# =============================================================================
# TWO'S COMPLEMENT
# =============================================================================


def twos_complement_to_decimal(bits: str) -> CanonicalValue:
    """
    Дополнительный код → CanonicalValue.

    Ведущий '1': значение = (декодирование обратного кода тех же бит) - 1.

    Examples:
        >>> str(twos_complement_to_decimal("1011"))
        '-5'
        >>> str(twos_complement_to_decimal("11"))
        '-1'
    """
    if bits.startswith("1"):
        ones = ones_complement_to_decimal(bits)
        return CanonicalValue.from_parts(ones.integer + 1, negative=True)
    return CanonicalValue.from_parts(radix.digits_to_int(bits, 2))


def decimal_to_twos_complement(value: CanonicalValue) -> str:
    """
    CanonicalValue → дополнительный код.

    Обратный код, затем +1 для отрицательных значений.

    Examples:
        >>> decimal_to_twos_complement(CanonicalValue.from_decimal(-4))
        '1100'
        >>> decimal_to_twos_complement(CanonicalValue.from_decimal(5))
        '0101'
    """
    bits = decimal_to_ones_complement(value)
    if value.negative:
        return increment_bits(bits)
    return bits


# =============================================================================
# SIGN-MAGNITUDE
# =============================================================================


def sign_magnitude_to_decimal(bits: str) -> CanonicalValue:
    """
    Прямой код → CanonicalValue.

    Examples:
        >>> str(sign_magnitude_to_decimal("1101"))
        '-5'
        >>> str(sign_magnitude_to_decimal("10"))
        '0'
    """
    magnitude = radix.digits_to_int(bits[1:], 2)
    return CanonicalValue.from_parts(magnitude, negative=bits.startswith("1"))


def decimal_to_sign_magnitude(value: CanonicalValue) -> str:
    """
    CanonicalValue → прямой код.

    Examples:
        >>> decimal_to_sign_magnitude(CanonicalValue.from_decimal(-5))
        '1101'
    """
    return ("1" if value.negative else "0") + _integer_magnitude_bits(value)
