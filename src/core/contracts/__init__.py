"""
Contract Validation Module

- Проверка литералов против registry (LiteralValidator)
- Валидация JSON контрактов запроса/результата конверсии (jsonschema)
"""

from .literal import (
    MAX_LITERAL_LENGTH_DEFAULT,
    LiteralValidator,
    ValidationResult,
    check_base,
    validate_literal,
)
from .validators import (
    REQUEST_VALIDATOR,
    RESULT_VALIDATOR,
    ContractValidator,
    ConversionRequestValidator,
    ConversionResultValidator,
    SchemaLoader,
    validate_conversion_request,
    validate_conversion_result,
)

__all__ = [
    # Literal validation
    "MAX_LITERAL_LENGTH_DEFAULT",
    "LiteralValidator",
    "ValidationResult",
    "check_base",
    "validate_literal",
    # JSON contracts — Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionRequestValidator",
    "ConversionResultValidator",
    "REQUEST_VALIDATOR",
    "RESULT_VALIDATOR",
    # JSON contracts — Functions
    "validate_conversion_request",
    "validate_conversion_result",
]
