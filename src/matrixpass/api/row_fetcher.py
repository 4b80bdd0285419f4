"""Row Fetcher — загрузка одной строки матрицы.

GET {base_url}api/numbers/{dataset}/row/{i}
- 2xx статус обязателен
- Тело — JSON объект с полем "Value" (контракт row_response.json)
- "Value" содержит ровно N целых int32; больше или меньше — ошибка,
  без усечения

Fetcher не бросает исключений для классифицированных ошибок: результат
возвращается как RowFetchResult с error_kind, решение abort/continue
принимает вызывающий код (MatrixBuilder).
"""

import json
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import requests
from jsonschema import ValidationError as SchemaValidationError

from matrixpass.api.errors import FetchError, FetchErrorKind
from matrixpass.api.transport import create_session, is_success_status
from matrixpass.config import PipelineConfig
from matrixpass.core.contracts.validators import RowResponseValidator
from matrixpass.core.domain.matrix import Dataset

logger = logging.getLogger(__name__)

VALUE_FIELD = "Value"


@dataclass(frozen=True)
class RowFetchResult:
    """Результат загрузки строки."""

    ok: bool
    dataset: Dataset
    row_index: int

    # Значения строки (только при ok=True)
    row: Optional[Tuple[int, ...]]

    # Диагностика ошибки
    error_kind: Optional[FetchErrorKind]
    status_code: Optional[int]
    details: str

    def to_error(self) -> FetchError:
        """FetchError для неуспешного результата."""
        if self.ok:
            raise ValueError("Successful RowFetchResult cannot be converted to FetchError")
        return FetchError(
            dataset=self.dataset.value,
            row_index=self.row_index,
            kind=self.error_kind,
            details=self.details,
            status_code=self.status_code,
        )


class RowFetcher:
    """Загрузка и разбор строк numbers API.

    Порядок проверок:
    1. Сетевой вызов → NETWORK
    2. HTTP статус → HTTP_STATUS
    3. JSON парсинг → PARSE
    4. Контракт row_response → CONTRACT
    5. Длина "Value" == N → SHAPE
    """

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        session: Optional[requests.Session] = None,
        row_validator: Optional[RowResponseValidator] = None,
    ):
        """
        Args:
            config: конфигурация pipeline (default: PipelineConfig())
            session: HTTP сессия (default: создается автоматически)
            row_validator: валидатор контракта (default: RowResponseValidator())
        """
        self.config = config or PipelineConfig()
        self.session = session or create_session()
        self.row_validator = row_validator or RowResponseValidator()

    def fetch(self, dataset: Dataset, row_index: int) -> RowFetchResult:
        """Загрузка строки `row_index` набора `dataset`.

        Args:
            dataset: "A" или "B"
            row_index: индекс строки в [0, N)

        Returns:
            RowFetchResult (ok=True с row, либо ok=False с error_kind)

        Raises:
            ValueError: если row_index вне [0, N)
        """
        dataset = Dataset(dataset)
        size = self.config.matrix_size
        if not 0 <= row_index < size:
            raise ValueError(f"row_index must be in [0, {size}), got {row_index}")

        url = self.config.row_url(dataset, row_index)
        logger.debug("GET %s", url)

        # 1. Сеть
        try:
            response = self.session.get(url, timeout=self.config.request_timeout_sec)
        except requests.RequestException as e:
            return self._failure(dataset, row_index, FetchErrorKind.NETWORK, str(e))

        # 2. HTTP статус
        if not is_success_status(response.status_code):
            return self._failure(
                dataset,
                row_index,
                FetchErrorKind.HTTP_STATUS,
                f"Response status code does not indicate success: {response.status_code}",
                status_code=response.status_code,
            )

        # 3. JSON
        try:
            payload = json.loads(response.text)
        except ValueError as e:
            return self._failure(
                dataset, row_index, FetchErrorKind.PARSE, f"Invalid JSON body: {e}",
                status_code=response.status_code,
            )

        # 4. Контракт
        try:
            self.row_validator.validate(payload)
        except SchemaValidationError as e:
            return self._failure(
                dataset, row_index, FetchErrorKind.CONTRACT,
                f"Row payload violates contract: {e.message}",
                status_code=response.status_code,
            )

        # 5. Размер строки
        values = payload[VALUE_FIELD]
        if len(values) != size:
            return self._failure(
                dataset, row_index, FetchErrorKind.SHAPE,
                f"Expected {size} values, got {len(values)}",
                status_code=response.status_code,
            )

        # JSON integer может прийти как 3.0
        row = tuple(int(v) for v in values)
        return RowFetchResult(
            ok=True,
            dataset=dataset,
            row_index=row_index,
            row=row,
            error_kind=None,
            status_code=response.status_code,
            details="",
        )

    @staticmethod
    def _failure(
        dataset: Dataset,
        row_index: int,
        kind: FetchErrorKind,
        details: str,
        status_code: Optional[int] = None,
    ) -> RowFetchResult:
        return RowFetchResult(
            ok=False,
            dataset=dataset,
            row_index=row_index,
            row=None,
            error_kind=kind,
            status_code=status_code,
            details=details,
        )
