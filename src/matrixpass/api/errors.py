"""Ошибки pipeline.

Таксономия:
- FetchError — сеть / HTTP статус / парсинг / контракт / размер строки
- ValidationError — non-2xx ответ validation endpoint
- Прочие исключения транспорта (requests.RequestException) при validate
  пробрасываются без классификации.
"""

from enum import Enum
from typing import Optional


class FetchErrorKind(str, Enum):
    """Причина неудачной загрузки строки."""

    NETWORK = "NETWORK"
    HTTP_STATUS = "HTTP_STATUS"
    PARSE = "PARSE"
    CONTRACT = "CONTRACT"
    SHAPE = "SHAPE"


class MatrixPassError(Exception):
    """Базовый класс классифицированных ошибок pipeline."""


class FetchError(MatrixPassError):
    """Строка матрицы не получена: сборка матрицы прервана."""

    def __init__(
        self,
        dataset: str,
        row_index: int,
        kind: FetchErrorKind,
        details: str,
        status_code: Optional[int] = None,
    ):
        self.dataset = dataset
        self.row_index = row_index
        self.kind = kind
        self.details = details
        self.status_code = status_code
        super().__init__(
            f"Error fetching row {row_index} of {dataset} matrix: {details}"
        )


class ValidationError(MatrixPassError):
    """Validation endpoint вернул non-2xx статус."""

    def __init__(self, status_code: int, details: str = ""):
        self.status_code = status_code
        self.details = details
        message = f"Failed to validate result. Status code: {status_code}"
        if details:
            message = f"{message} ({details})"
        super().__init__(message)
