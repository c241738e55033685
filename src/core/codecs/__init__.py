"""
Core codecs для baco

Кодеки "литерал ↔ CanonicalValue" для всех кодировок.
Каждая функция чистая: неизменяемый вход, новый результат.
"""

# Radix Codec (2..36)
from src.core.codecs.radix import (
    DIGITS,
    digit_char,
    digit_value,
    split_literal,
)

# Signed Codec
from src.core.codecs.signed import (
    complement_bits,
    decimal_to_ones_complement,
    decimal_to_sign_magnitude,
    decimal_to_twos_complement,
    increment_bits,
    ones_complement_to_decimal,
    sign_magnitude_to_decimal,
    twos_complement_to_decimal,
)

# Roman Codec
from src.core.codecs.roman import ROMAN_MAX_CLASSIC, ZERO_TOKEN

# Unary Codec
from src.core.codecs.unary import UNARY_MARKER

# Bit width
from src.core.codecs.width import apply_bit_width

__all__ = [
    # Radix — Constants
    "DIGITS",
    # Radix — Functions
    "digit_char",
    "digit_value",
    "split_literal",
    # Signed — Functions
    "complement_bits",
    "decimal_to_ones_complement",
    "decimal_to_sign_magnitude",
    "decimal_to_twos_complement",
    "increment_bits",
    "ones_complement_to_decimal",
    "sign_magnitude_to_decimal",
    "twos_complement_to_decimal",
    # Roman — Constants
    "ROMAN_MAX_CLASSIC",
    "ZERO_TOKEN",
    # Unary — Constants
    "UNARY_MARKER",
    # Bit width
    "apply_bit_width",
]
