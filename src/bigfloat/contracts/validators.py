"""
Contract validation — JSON Schema контракт значения BigFloat

Схема bigfloat.json поставляется как package data (contracts/schema/)
и читается через importlib.resources, поэтому доступна и из wheel.

JSON-представление проверяется в две ступени:
1. JSON Schema: структура, enum kind, pattern мантиссы, sentinel-правила
2. BigFloatPayload (pydantic) → каноническое значение BigFloat
"""

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from bigfloat.domain.bigfloat import BigFloat
from bigfloat.domain.payload import BigFloatPayload

BIGFLOAT_SCHEMA = "bigfloat"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema.

    Без аргументов читает package data bigfloat.contracts/schema;
    schema_dir подставляет каталог на диске.
    """

    def __init__(self, schema_dir: Path | None = None):
        if schema_dir is None:
            self._root = resources.files("bigfloat.contracts") / "schema"
        elif schema_dir.is_dir():
            self._root = schema_dir
        else:
            raise RuntimeError(f"Schema directory not found: {schema_dir}")

        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения; проходит meta-валидацию
        Draft 2020-12 до попадания в кэш.

        Raises:
            FileNotFoundError: Если файла схемы нет
            ValueError: Если файл не является корректной схемой
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        source = self._root / f"{schema_name}.json"
        if not source.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_name}.json in {self._root}")

        schema = json.loads(source.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def default_loader() -> SchemaLoader:
    """Загрузчик package data, общий на процесс."""
    return SchemaLoader()


# =============================================================================
# VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка произвольных данных против одной схемы."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or default_loader()).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Наиболее релевантное нарушение схемы
        """
        self._validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        return self._validator.iter_errors(data)

    def error_messages(self, data: Any) -> list[str]:
        """Все нарушения в виде "<json path>: <сообщение>", по порядку путей."""
        errors = sorted(self._validator.iter_errors(data), key=lambda error: error.json_path)
        return [f"{error.json_path}: {error.message}" for error in errors]


class BigFloatPayloadValidator(ContractValidator):
    """Валидатор JSON-представления BigFloat."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(BIGFLOAT_SCHEMA, loader)

    def to_bigfloat(self, data: Any) -> BigFloat:
        """
        Проверка схемой, затем конверсия через BigFloatPayload.

        Examples:
            >>> BigFloatPayloadValidator().to_bigfloat(
            ...     {"kind": "FINITE", "mantissa": "628", "scale": 2}
            ... )
            BigFloat('6.28')
        """
        self.validate(data)
        return BigFloatPayload.model_validate(data).to_bigfloat()


@lru_cache(maxsize=None)
def _payload_validator() -> BigFloatPayloadValidator:
    return BigFloatPayloadValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_bigfloat_payload(data: Any) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют bigfloat.json
    """
    _payload_validator().validate(data)


def bigfloat_from_payload(data: Any) -> BigFloat:
    """
    Значение BigFloat из уже разобранного JSON (dict).

    Raises:
        ValidationError: Если данные не соответствуют bigfloat.json
    """
    return _payload_validator().to_bigfloat(data)
