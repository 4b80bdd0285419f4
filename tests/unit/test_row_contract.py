"""
Tests for JSON Schema Contract Validators

Покрывает:
- Валидность самой схемы row_response
- Валидация правильных данных
- Детекция нарушений required полей и типов
- Диапазон int32 для значений
"""

from pathlib import Path

import pytest
from jsonschema import ValidationError

from matrixpass.core.contracts import (
    RowResponseValidator,
    SchemaLoader,
)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


def test_schema_loader_loads_row_response():
    loader = SchemaLoader()
    schema = loader.load_schema("row_response")

    assert schema["required"] == ["Value"]
    # Кэш
    assert loader.load_schema("row_response") is schema


def test_schema_loader_missing_schema():
    with pytest.raises(FileNotFoundError):
        SchemaLoader().load_schema("does_not_exist")


def test_schema_loader_missing_directory(tmp_path):
    with pytest.raises(RuntimeError):
        SchemaLoader(tmp_path / "nowhere")


def test_schema_loader_rejects_invalid_schema(tmp_path: Path):
    (tmp_path / "broken.json").write_text('{"type": 42}', encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid JSON Schema"):
        SchemaLoader(tmp_path).load_schema("broken")


def test_schema_loader_reads_custom_directory(tmp_path: Path):
    (tmp_path / "row_response.json").write_text(
        '{"type": "object", "required": ["Value"]}', encoding="utf-8"
    )

    schema = SchemaLoader(tmp_path).load_schema("row_response")

    assert schema == {"type": "object", "required": ["Value"]}


# =============================================================================
# VALIDATION
# =============================================================================


@pytest.mark.parametrize(
    "payload",
    [
        {"Value": [1, -2, 3]},
        {"Value": []},
        {"Value": [0], "Success": True, "Cause": None},
        {"Value": [2147483647, -2147483648]},
        {"Value": [3.0]},
    ],
)
def test_valid_row_payloads(payload):
    RowResponseValidator().validate(payload)


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"value": [1, 2]},
        {"Value": None},
        {"Value": "1,2"},
        {"Value": ["1", "2"]},
        {"Value": [1.5]},
        {"Value": [True]},
        {"Value": [2147483648]},
        {"Value": [-2147483649]},
        [1, 2, 3],
        "Value",
    ],
)
def test_invalid_row_payloads(payload):
    with pytest.raises(ValidationError):
        RowResponseValidator().validate(payload)
