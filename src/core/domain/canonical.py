"""
CanonicalValue — Каноническое десятичное значение

Единственный тип обмена между фазами decode (литерал → значение)
и render (значение → литерал). Ни один компонент не передаёт сырые
литералы между двумя фазами конверсии.

Представление:
- negative: знак (отдельно от модуля)
- integer: целая часть модуля (int >= 0)
- fraction: дробная часть модуля, Decimal в [0, 1), ровно PRECISION знаков

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Модуль неотрицателен, знак хранится отдельно
2. Ноль никогда не бывает отрицательным (-0 нормализуется в 0)
3. fraction квантована до PRECISION десятичных знаков
4. Значение immutable (frozen=True), создаётся один раз на вызов convert
"""

from decimal import ROUND_DOWN, ROUND_HALF_EVEN, Decimal, localcontext
from fractions import Fraction
from typing import Final, Union

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Количество дробных знаков, сохраняемых при конверсии дробной части
PRECISION: Final[int] = 20

# Масштаб дробной части: fraction_units = fraction * FRACTION_SCALE
FRACTION_SCALE: Final[int] = 10**PRECISION

# Квант дробной части (1E-20)
FRACTION_QUANTUM: Final[Decimal] = Decimal(1).scaleb(-PRECISION)


# =============================================================================
# CANONICAL VALUE
# =============================================================================


class CanonicalValue(BaseModel):
    """
    Знаковое десятичное значение с ограниченной дробной точностью.
    """

    negative: bool = Field(False, description="Знак значения")
    integer: int = Field(0, ge=0, description="Целая часть модуля")
    fraction: Decimal = Field(
        Decimal(0), ge=0, lt=1, description="Дробная часть модуля (PRECISION знаков)"
    )

    model_config = {"frozen": True}

    @field_validator("fraction")
    @classmethod
    def quantize_fraction(cls, v: Decimal) -> Decimal:
        """Лишние знаки отбрасываются (truncation)."""
        return v.quantize(FRACTION_QUANTUM, rounding=ROUND_DOWN)

    @model_validator(mode="after")
    def normalize_zero_sign(self) -> "CanonicalValue":
        if self.negative and self.integer == 0 and self.fraction == 0:
            # -0 → 0 (frozen модель: обходим через object.__setattr__)
            object.__setattr__(self, "negative", False)
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_parts(
        cls, integer: int, fraction_units: int = 0, negative: bool = False
    ) -> "CanonicalValue":
        """
        Сборка из целой части и дробной части в единицах 1E-PRECISION.

        Args:
            integer: Целая часть модуля (>= 0)
            fraction_units: Дробная часть * 10^PRECISION, в [0, 10^PRECISION)
            negative: Знак

        Raises:
            ValueError: Если fraction_units вне диапазона
        """
        if not 0 <= fraction_units < FRACTION_SCALE:
            raise ValueError(
                f"fraction_units must be in [0, {FRACTION_SCALE}), got {fraction_units}"
            )
        return cls(
            negative=negative,
            integer=integer,
            fraction=Decimal(fraction_units).scaleb(-PRECISION),
        )

    @classmethod
    def from_fraction(cls, value: Fraction) -> "CanonicalValue":
        """
        Сборка из точного рационального значения.

        Значение округляется до ближайшего кратного 1E-PRECISION
        (half-even), что сохраняет закон обратимости дробной части
        для оснований больше 10.

        Examples:
            >>> CanonicalValue.from_fraction(Fraction(1, 3)).fraction
            Decimal('0.33333333333333333333')
        """
        negative = value < 0
        magnitude = -value if negative else value
        scaled = round(magnitude * FRACTION_SCALE)
        integer, fraction_units = divmod(scaled, FRACTION_SCALE)
        return cls.from_parts(integer, fraction_units, negative)

    @classmethod
    def from_decimal(cls, value: Union[Decimal, int, str]) -> "CanonicalValue":
        """
        Сборка из Decimal/int/str.

        Дробные знаки сверх PRECISION отбрасываются (truncation).

        Examples:
            >>> CanonicalValue.from_decimal("-18.05").as_decimal()
            Decimal('-18.05000000000000000000')
        """
        number = Decimal(value)
        if not number.is_finite():
            raise ValueError(f"Canonical value must be finite, got {value}")

        magnitude = abs(number)
        with localcontext() as ctx:
            ctx.prec = max(magnitude.adjusted(), 0) + PRECISION + 2
            truncated = magnitude.quantize(FRACTION_QUANTUM, rounding=ROUND_DOWN)
            integer = int(truncated)
            fraction = truncated - integer

        return cls(negative=number.is_signed(), integer=integer, fraction=fraction)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def fraction_units(self) -> int:
        """Дробная часть в единицах 1E-PRECISION."""
        return int(self.fraction.scaleb(PRECISION))

    @property
    def is_zero(self) -> bool:
        return self.integer == 0 and self.fraction == 0

    @property
    def is_integer(self) -> bool:
        return self.fraction == 0

    def as_fraction(self) -> Fraction:
        """Точное рациональное значение (со знаком)."""
        magnitude = self.integer + Fraction(self.fraction_units, FRACTION_SCALE)
        return -magnitude if self.negative else magnitude

    def as_decimal(self) -> Decimal:
        """
        Точное значение как Decimal (со знаком, PRECISION дробных знаков).
        """
        with localcontext() as ctx:
            ctx.prec = len(str(self.integer)) + PRECISION + 2
            magnitude = Decimal(self.integer) + self.fraction
            result = -magnitude if self.negative else magnitude
            return result.quantize(FRACTION_QUANTUM, rounding=ROUND_HALF_EVEN)

    def __str__(self) -> str:
        """Десятичная запись без незначащих нулей дробной части."""
        text = str(self.integer)
        if self.fraction_units:
            digits = str(self.fraction_units).rjust(PRECISION, "0").rstrip("0")
            text = f"{text}.{digits}"
        return f"-{text}" if self.negative else text
