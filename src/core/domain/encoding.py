"""
Encoding Registry — Метаданные кодировок

Замкнутое множество кодировок и неизменяемая таблица их возможностей:
- допускает ли кодировка знак (в источнике / в назначении)
- допускает ли дробную часть
- каким основанием проверяются символы литерала (checkBase)

Таблица строится один раз при импорте и никогда не мутирует.
Резолвинг пользовательских алиасов ("hex", "base15") живёт вне ядра:
ядро получает уже готовый EncodingId.
"""

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from src.core.domain.errors import UnknownEncoding


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Диапазон параметрических оснований RadixN
RADIX_MIN: Final[int] = 2
RADIX_MAX: Final[int] = 36

# Маркер экспоненты в записи FLOAT (как в C "%a")
FLOAT_EXPONENT_MARKER: Final[str] = "p"


# =============================================================================
# ENUMS
# =============================================================================


class EncodingKind(str, Enum):
    """Вид кодировки (замкнутое множество)."""

    BCD = "bcd"
    BINARY = "binary"
    ONES_COMPLEMENT = "ones_complement"
    TWOS_COMPLEMENT = "twos_complement"
    DECIMAL = "decimal"
    FLOAT = "float"
    HEX = "hex"
    SIGN_MAGNITUDE = "sign_magnitude"
    OCTAL = "octal"
    ROMAN = "roman"
    UNARY = "unary"
    RADIX = "radix"


# HEX и OCTAL — алиасы RadixN
_RADIX_ALIASES: Final[Mapping[EncodingKind, int]] = MappingProxyType(
    {
        EncodingKind.HEX: 16,
        EncodingKind.OCTAL: 8,
    }
)


# =============================================================================
# ENCODING ID
# =============================================================================


class EncodingId(BaseModel):
    """
    Идентификатор кодировки.

    base обязателен для RADIX (2..36) и запрещён для остальных видов.
    """

    kind: EncodingKind = Field(..., description="Вид кодировки")
    base: Optional[int] = Field(None, description="Основание (только для RADIX)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_base(self) -> "EncodingId":
        if self.kind == EncodingKind.RADIX:
            if self.base is None or not RADIX_MIN <= self.base <= RADIX_MAX:
                raise ValueError(
                    f"radix base must be in [{RADIX_MIN}, {RADIX_MAX}], got {self.base}"
                )
        elif self.base is not None:
            raise ValueError(f"{self.kind.value} does not take a base")
        return self

    @classmethod
    def of(cls, kind: EncodingKind) -> "EncodingId":
        return cls(kind=kind)

    @classmethod
    def radix(cls, base: int) -> "EncodingId":
        """
        RadixN.

        Raises:
            UnknownEncoding: Если основание вне [2, 36]
        """
        try:
            return cls(kind=EncodingKind.RADIX, base=base)
        except ValidationError as e:
            raise UnknownEncoding(f"radix{base}") from e

    def canonical(self) -> "EncodingId":
        """HEX → RADIX(16), OCTAL → RADIX(8); остальные без изменений."""
        alias_base = _RADIX_ALIASES.get(self.kind)
        if alias_base is not None:
            return EncodingId(kind=EncodingKind.RADIX, base=alias_base)
        return self

    @property
    def radix_base(self) -> Optional[int]:
        """Основание позиционной записи для RADIX/HEX/OCTAL, иначе None."""
        return self.canonical().base

    def __str__(self) -> str:
        if self.kind == EncodingKind.RADIX:
            return f"radix{self.base}"
        return self.kind.value


# =============================================================================
# ENCODING META
# =============================================================================


class EncodingMeta(BaseModel):
    """Строка таблицы возможностей кодировки."""

    kind: EncodingKind
    name: str = Field(..., min_length=1, description="Отображаемое имя")
    allows_negative_source: bool
    allows_negative_dest: bool
    allows_fraction: bool
    digit_base: Optional[int] = Field(
        None, ge=1, le=RADIX_MAX, description="Основание для checkBase (None — без проверки)"
    )
    exponent_marker: Optional[str] = Field(None, min_length=1, max_length=1)
    supports_bit_width: bool = False

    model_config = {"frozen": True}


# Таблица возможностей (RADIX — параметрическая строка, digit_base подставляется)
_REGISTRY: Final[Mapping[EncodingKind, EncodingMeta]] = MappingProxyType(
    {
        EncodingKind.BCD: EncodingMeta(
            kind=EncodingKind.BCD,
            name="Binary Coded Decimal",
            allows_negative_source=False,
            allows_negative_dest=False,
            allows_fraction=False,
        ),
        EncodingKind.BINARY: EncodingMeta(
            kind=EncodingKind.BINARY,
            name="Binary Base",
            allows_negative_source=True,
            allows_negative_dest=True,
            allows_fraction=True,
            digit_base=2,
            supports_bit_width=True,
        ),
        EncodingKind.ONES_COMPLEMENT: EncodingMeta(
            kind=EncodingKind.ONES_COMPLEMENT,
            name="Ones' Complement",
            allows_negative_source=False,
            allows_negative_dest=True,
            allows_fraction=False,
            digit_base=2,
            supports_bit_width=True,
        ),
        EncodingKind.TWOS_COMPLEMENT: EncodingMeta(
            kind=EncodingKind.TWOS_COMPLEMENT,
            name="Two's Complement",
            allows_negative_source=False,
            allows_negative_dest=True,
            allows_fraction=False,
            digit_base=2,
            supports_bit_width=True,
        ),
        EncodingKind.DECIMAL: EncodingMeta(
            kind=EncodingKind.DECIMAL,
            name="Decimal Base",
            allows_negative_source=True,
            allows_negative_dest=True,
            allows_fraction=True,
            digit_base=10,
        ),
        EncodingKind.FLOAT: EncodingMeta(
            kind=EncodingKind.FLOAT,
            name="Floating Point",
            allows_negative_source=True,
            allows_negative_dest=True,
            allows_fraction=True,
            digit_base=2,
            exponent_marker=FLOAT_EXPONENT_MARKER,
        ),
        EncodingKind.HEX: EncodingMeta(
            kind=EncodingKind.HEX,
            name="Hexadecimal Base",
            allows_negative_source=True,
            allows_negative_dest=True,
            allows_fraction=True,
            digit_base=16,
        ),
        EncodingKind.SIGN_MAGNITUDE: EncodingMeta(
            kind=EncodingKind.SIGN_MAGNITUDE,
            name="Signed Magnitude Representation",
            allows_negative_source=False,
            allows_negative_dest=True,
            allows_fraction=False,
            digit_base=2,
            supports_bit_width=True,
        ),
        EncodingKind.OCTAL: EncodingMeta(
            kind=EncodingKind.OCTAL,
            name="Octal Base",
            allows_negative_source=True,
            allows_negative_dest=True,
            allows_fraction=True,
            digit_base=8,
        ),
        EncodingKind.ROMAN: EncodingMeta(
            kind=EncodingKind.ROMAN,
            name="Roman Numerals",
            allows_negative_source=False,
            allows_negative_dest=False,
            allows_fraction=False,
        ),
        EncodingKind.UNARY: EncodingMeta(
            kind=EncodingKind.UNARY,
            name="Unary Base",
            allows_negative_source=False,
            allows_negative_dest=False,
            allows_fraction=False,
            digit_base=1,
        ),
        EncodingKind.RADIX: EncodingMeta(
            kind=EncodingKind.RADIX,
            name="Generic Base",
            allows_negative_source=True,
            allows_negative_dest=True,
            allows_fraction=True,
        ),
    }
)


# =============================================================================
# LOOKUP
# =============================================================================


def lookup(encoding: EncodingId) -> EncodingMeta:
    """
    Метаданные кодировки.

    Тотальная функция над замкнутым множеством; для RADIX digit_base
    и name подставляются из параметра.

    Raises:
        UnknownEncoding: Если передан не EncodingId (ошибка программиста)
    """
    if not isinstance(encoding, EncodingId):
        raise UnknownEncoding(encoding)

    meta = _REGISTRY.get(encoding.kind)
    if meta is None:
        raise UnknownEncoding(encoding)

    if encoding.kind == EncodingKind.RADIX:
        return meta.model_copy(
            update={"name": f"Base {encoding.base}", "digit_base": encoding.base}
        )
    return meta


def describe(encoding: EncodingId) -> str:
    """Отображаемое имя кодировки."""
    return lookup(encoding).name


def all_encodings() -> Mapping[EncodingKind, EncodingMeta]:
    """Read-only вид всей таблицы."""
    return _REGISTRY
