"""
PipelineResult — итог одного запуска pipeline

Immutable Pydantic модель. Passphrase — непрозрачная строка от
validation endpoint, внутренняя структура не предполагается.
"""

from typing import Final

from pydantic import BaseModel, Field

DIGEST_HEX_LENGTH: Final[int] = 32
DIGEST_PATTERN: Final[str] = r"^[0-9A-F]{32}$"


class PipelineResult(BaseModel):
    """
    Результат успешного запуска pipeline.
    """

    passphrase: str = Field(..., description="Ответ validation endpoint (verbatim)")
    digest: str = Field(
        ..., pattern=DIGEST_PATTERN, description="Uppercase hex MD5 от flattened C"
    )
    matrix_size: int = Field(..., gt=0, description="Размер N")
    flattened_length: int = Field(
        ..., ge=0, description="Длина flattened строки (символы)"
    )
    elapsed_ms: float = Field(..., ge=0, description="Wall-clock время запуска (ms)")

    model_config = {"frozen": True}
