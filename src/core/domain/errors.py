"""
Conversion Errors — Типизированные ошибки конверсии

Все ошибки конверсии наследуются от ConversionError (ValueError) и
терминальны для одного вызова convert: ничего не ретраится, общего
состояния нет. Слой CLI сам решает, как показать ошибку пользователю
(сообщение + exit code); ядро только бросает типизированное исключение.

Каждый класс несёт стабильный `code` для сервисных адаптеров
и человекочитаемое сообщение.
"""

from typing import ClassVar, Optional


class ConversionError(ValueError):
    """Базовая ошибка конверсии."""

    code: ClassVar[str] = "conversion_error"

    def to_dict(self) -> dict[str, str]:
        """Сериализация для JSON-ответов."""
        return {"code": self.code, "message": str(self)}


class SameEncoding(ConversionError):
    """Исходная и целевая кодировки совпадают."""

    code = "same_encoding"

    def __init__(self) -> None:
        super().__init__("Source and destination are the same.")


class MalformedNumber(ConversionError):
    """Несколько знаков, несколько точек, знак не на позиции 0, пустой литерал."""

    code = "malformed_number"

    def __init__(self, reason: str = "The codify is not correct.") -> None:
        self.reason = reason
        super().__init__(reason)


class FractionNotAllowed(ConversionError):
    """Кодировка принимает только целые числа."""

    code = "fraction_not_allowed"

    def __init__(self, encoding: str) -> None:
        self.encoding = encoding
        super().__init__(f"{encoding} accepts only integer.")


class NegativeNotAllowed(ConversionError):
    """Кодировка принимает только положительные числа."""

    code = "negative_not_allowed"

    def __init__(self, encoding: str) -> None:
        self.encoding = encoding
        super().__init__(f"{encoding} accepts only positive numbers.")


class DigitOutOfRange(ConversionError):
    """Символ не является цифрой заданного основания."""

    code = "digit_out_of_range"

    def __init__(self, base: int, character: Optional[str] = None) -> None:
        self.base = base
        self.character = character
        message = f"Inserted number is not in base {base}."
        if character is not None:
            message = f"Inserted number is not in base {base} (invalid digit {character!r})."
        super().__init__(message)


class MalformedBcd(ConversionError):
    """Длина не кратна 4 или недопустимая 4-битная группа."""

    code = "malformed_bcd"

    def __init__(self, reason: str = "BCD codify is not correct.") -> None:
        self.reason = reason
        super().__init__(reason)


class MalformedRoman(ConversionError):
    """Символ вне семи римских цифр."""

    code = "malformed_roman"

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"Invalid Roman numeral symbol: {character!r}.")


class RomanOutOfRange(ConversionError):
    """Значение выше настроенного предела римской записи."""

    code = "roman_out_of_range"

    def __init__(self, value: int, limit: int) -> None:
        self.value = value
        self.limit = limit
        super().__init__(f"Roman numerals are limited to {limit}, got {value}.")


class WidthTooSmall(ConversionError):
    """Запрошенная разрядность не вмещает закодированное значение."""

    code = "width_too_small"

    def __init__(self, required: int, requested: int) -> None:
        self.required = required
        self.requested = requested
        super().__init__(
            f"Too few bit. It requires at least {required} bit, got {requested}."
        )


class LiteralTooLong(ConversionError):
    """Литерал (входной или выходной) длиннее настроенного лимита."""

    code = "literal_too_long"

    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(f"Literal length {length} exceeds limit {limit}.")


class UnknownEncoding(ConversionError, LookupError):
    """
    Идентификатор вне замкнутого множества кодировок.

    Ошибка программиста (резолвинг алиасов вне ядра), а не пользователя.
    """

    code = "unknown_encoding"

    def __init__(self, encoding: object) -> None:
        self.encoding = encoding
        super().__init__(f"Unknown encoding: {encoding!r}")
