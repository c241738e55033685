"""
Domain models and value objects.

Contains encoding identifiers and the registry, the canonical decimal value,
and the typed conversion errors.
"""

from src.core.domain.canonical import (
    FRACTION_QUANTUM,
    FRACTION_SCALE,
    PRECISION,
    CanonicalValue,
)
from src.core.domain.encoding import (
    RADIX_MAX,
    RADIX_MIN,
    EncodingId,
    EncodingKind,
    EncodingMeta,
    all_encodings,
    describe,
    lookup,
)
from src.core.domain.errors import (
    ConversionError,
    DigitOutOfRange,
    FractionNotAllowed,
    LiteralTooLong,
    MalformedBcd,
    MalformedNumber,
    MalformedRoman,
    NegativeNotAllowed,
    RomanOutOfRange,
    SameEncoding,
    UnknownEncoding,
    WidthTooSmall,
)

__all__ = [
    # Canonical value
    "PRECISION",
    "FRACTION_SCALE",
    "FRACTION_QUANTUM",
    "CanonicalValue",
    # Encoding registry
    "RADIX_MIN",
    "RADIX_MAX",
    "EncodingKind",
    "EncodingId",
    "EncodingMeta",
    "lookup",
    "describe",
    "all_encodings",
    # Errors
    "ConversionError",
    "SameEncoding",
    "MalformedNumber",
    "FractionNotAllowed",
    "NegativeNotAllowed",
    "DigitOutOfRange",
    "MalformedBcd",
    "MalformedRoman",
    "RomanOutOfRange",
    "WidthTooSmall",
    "LiteralTooLong",
    "UnknownEncoding",
]
