"""
Bit Width — Дополнение вывода до фиксированной разрядности

Опциональная подсказка bit_width (0 — без ограничения) для двоичных
представлений. Дополнение сохраняет значение:
- BINARY: '0' после знака '-' (ширина считает только целую часть)
- ONES_COMPLEMENT / TWOS_COMPLEMENT: расширение знаковым битом
- SIGN_MAGNITUDE: '0' между знаковым битом и модулем

Если естественная ширина уже больше запрошенной — WidthTooSmall.
"""

from src.core.codecs import radix
from src.core.domain.encoding import EncodingKind
from src.core.domain.errors import WidthTooSmall


def apply_bit_width(literal: str, kind: EncodingKind, width: int) -> str:
    """
    Дополнение литерала до width разрядов.

    Args:
        literal: Отрендеренный литерал
        kind: Вид целевой кодировки
        width: Разрядность (0 — литерал без изменений)

    Returns:
        Дополненный литерал (для прочих видов — без изменений)

    Raises:
        WidthTooSmall: Если литерал не помещается в width разрядов
        ValueError: Если width < 0

    Examples:
        >>> apply_bit_width("1011", EncodingKind.TWOS_COMPLEMENT, 8)
        '11111011'
        >>> apply_bit_width("-101.1", EncodingKind.BINARY, 8)
        '-00000101.1'
    """
    if width < 0:
        raise ValueError(f"width must be non-negative, got {width}")

    if width == 0:
        return literal

    if kind == EncodingKind.BINARY:
        negative, integer_digits, _ = radix.split_literal(literal)
        _check_fits(len(integer_digits), width)
        body = literal[1:] if negative else literal
        padded = "0" * (width - len(integer_digits)) + body
        return radix.SIGN + padded if negative else padded

    if kind in (EncodingKind.ONES_COMPLEMENT, EncodingKind.TWOS_COMPLEMENT):
        _check_fits(len(literal), width)
        return literal[0] * (width - len(literal)) + literal

    if kind == EncodingKind.SIGN_MAGNITUDE:
        _check_fits(len(literal), width)
        return literal[0] + "0" * (width - len(literal)) + literal[1:]

    return literal


def _check_fits(required: int, width: int) -> None:
    if required > width:
        raise WidthTooSmall(required, width)
