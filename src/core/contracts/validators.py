"""
JSON Schema Contract Validators

Валидация JSON-запросов и результатов конверсии против формальных
контрактов (Draft 2020-12). Схемы лежат в schema/ рядом с модулем и
поставляются как package data.

Схемы:
- conversion_request.json (запрос конверсии от сервисного адаптера)
- conversion_result.json (результат конверсии)

Схемы и валидаторы собираются один раз при импорте; validate_* не
перечитывают файлы и не пересобирают Draft202012Validator на каждый вызов.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

REQUEST_SCHEMA: Final[str] = "conversion_request"
RESULT_SCHEMA: Final[str] = "conversion_result"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем.

    Каждая схема проходит meta-validation перед кэшированием.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        """
        Args:
            schema_dir: Каталог со схемами (по умолчанию schema/ пакета)

        Raises:
            RuntimeError: Если каталог не существует
        """
        if not schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")
        self._schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema по имени.

        Args:
            schema_name: Имя схемы без расширения (например, 'conversion_request')

        Returns:
            Схема как dict (один и тот же объект при повторных вызовах)

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если документ не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор одного контракта.

    Обёртка над Draft202012Validator: validate бросает первую ошибку,
    error_messages собирает все нарушения в детерминированном порядке.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader = _SCHEMA_LOADER):
        self.schema_name = schema_name
        self.schema = loader.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        """Все нарушения, отсортированные по JSON-пути."""
        return iter(sorted(self.validator.iter_errors(data), key=lambda e: list(e.path)))

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """
        Нарушения в виде '<json path>: <message>'.

        Examples:
            >>> REQUEST_VALIDATOR.error_messages({"literal": "1"})[0]
            "$: 'source' is a required property"
        """
        return [f"{error.json_path}: {error.message}" for error in self.iter_errors(data)]


class ConversionRequestValidator(ContractValidator):
    """Валидатор для conversion_request контракта."""

    def __init__(self, loader: SchemaLoader = _SCHEMA_LOADER):
        super().__init__(REQUEST_SCHEMA, loader)


class ConversionResultValidator(ContractValidator):
    """Валидатор для conversion_result контракта."""

    def __init__(self, loader: SchemaLoader = _SCHEMA_LOADER):
        super().__init__(RESULT_SCHEMA, loader)


# Общие экземпляры: валидаторы stateless, схемы read-only
REQUEST_VALIDATOR: Final[ConversionRequestValidator] = ConversionRequestValidator()
RESULT_VALIDATOR: Final[ConversionResultValidator] = ConversionResultValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_conversion_request(data: Dict[str, Any]) -> None:
    """
    Валидация запроса конверсии.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    REQUEST_VALIDATOR.validate(data)


def validate_conversion_result(data: Dict[str, Any]) -> None:
    """
    Валидация результата конверсии.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    RESULT_VALIDATOR.validate(data)
