"""Conversion engine — оркестрация Validator → codecs → rendered literal.

Точка входа для внешних адаптеров (CLI, сервисы): convert() с уже
разрешёнными EncodingId, либо convert_request() с JSON-контрактом.
"""

from .conversion import (
    ConversionConfig,
    ConversionEngine,
    convert,
)

__all__ = [
    "ConversionConfig",
    "ConversionEngine",
    "convert",
]
