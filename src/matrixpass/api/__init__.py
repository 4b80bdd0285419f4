"""API — взаимодействие с numbers API.

- RowFetcher: GET одной строки, результат с error_kind
- MatrixBuilder: параллельная сборка матрицы, abort на первой ошибке
- PassphraseValidator: POST digest, passphrase в ответе
"""

from .errors import FetchError, FetchErrorKind, MatrixPassError, ValidationError
from .matrix_builder import MatrixBuilder
from .row_fetcher import RowFetcher, RowFetchResult
from .transport import create_session, is_success_status
from .validator import PassphraseValidator

__all__ = [
    "FetchError",
    "FetchErrorKind",
    "MatrixPassError",
    "ValidationError",
    "MatrixBuilder",
    "RowFetcher",
    "RowFetchResult",
    "PassphraseValidator",
    "create_session",
    "is_success_status",
]
