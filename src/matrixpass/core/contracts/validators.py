"""
JSON Schema Contract Validators

Модуль для валидации JSON ответов numbers API согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (package data в schema/):
- row_response.json (ответ на запрос строки матрицы)
"""

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema из ресурсов пакета.

    По умолчанию читает matrixpass.core.contracts/schema через
    importlib.resources, поэтому работает и из установленного wheel.
    Каждая схема проходит meta-validation один раз при первой загрузке.
    """

    def __init__(self, root: Optional[Path] = None):
        """
        Args:
            root: каталог со схемами, Path или Traversable
                (default: schema/ ресурсов пакета)
        """
        self._root = root if root is not None else resources.files(__package__) / "schema"
        if not self._root.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._root}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема `schema_name` (без расширения .json).

        Raises:
            FileNotFoundError: Если ресурса нет
            ValueError: Если файл не является валидной JSON Schema
        """
        schema = self._schemas.get(schema_name)
        if schema is None:
            schema = self._read(schema_name)
            self._schemas[schema_name] = schema
        return schema

    def _read(self, schema_name: str) -> Dict[str, Any]:
        resource = self._root / f"{schema_name}.json"
        if not resource.is_file():
            raise FileNotFoundError(f"Schema not found: {resource}")

        schema = json.loads(resource.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e
        return schema


# Схемы read-only после загрузки, загрузчик общий для всех валидаторов
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Draft202012Validator не хранит состояние между вызовами validate,
    поэтому один экземпляр безопасно использовать из нескольких потоков.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)


class RowResponseValidator(ContractValidator):
    """
    Валидатор для row_response контракта.
    """

    def __init__(self):
        super().__init__("row_response")
