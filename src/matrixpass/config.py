"""PipelineConfig — конфигурация pipeline.

Один immutable объект передается явно в конструктор каждого компонента
(RowFetcher, MatrixBuilder, MatrixMultiplier, PassphraseValidator).
Глобальных изменяемых констант нет.
"""

from dataclasses import dataclass
from typing import Final, Optional

from matrixpass.core.domain.matrix import Dataset

DEFAULT_BASE_URL: Final[str] = "https://recruitment-test.investcloud.com/"
DEFAULT_MATRIX_SIZE: Final[int] = 10

ROW_PATH_TEMPLATE: Final[str] = "api/numbers/{dataset}/row/{index}"
VALIDATE_PATH: Final[str] = "api/numbers/validate"


@dataclass(frozen=True)
class PipelineConfig:
    """Конфигурация pipeline.

    max_fetch_workers / max_compute_workers = None означает один worker
    на строку (fan-out без явного ограничения сверх N).
    request_timeout_sec = None означает поведение транспорта по умолчанию.
    """

    base_url: str = DEFAULT_BASE_URL
    matrix_size: int = DEFAULT_MATRIX_SIZE
    max_fetch_workers: Optional[int] = None
    max_compute_workers: Optional[int] = None
    request_timeout_sec: Optional[float] = None

    def __post_init__(self):
        if not self.base_url:
            raise ValueError("base_url cannot be empty")
        if not self.base_url.endswith("/"):
            # frozen dataclass: нормализация через object.__setattr__
            object.__setattr__(self, "base_url", self.base_url + "/")

        if isinstance(self.matrix_size, bool) or not isinstance(self.matrix_size, int):
            raise ValueError(f"matrix_size must be an int, got {self.matrix_size!r}")
        if self.matrix_size < 1:
            raise ValueError(f"matrix_size must be >= 1, got {self.matrix_size}")

        for name in ("max_fetch_workers", "max_compute_workers"):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ValueError(f"{name} must be >= 1, got {value}")

        if self.request_timeout_sec is not None and self.request_timeout_sec <= 0:
            raise ValueError(
                f"request_timeout_sec must be positive, got {self.request_timeout_sec}"
            )

    @property
    def fetch_workers(self) -> int:
        """Фактическое число потоков для загрузки строк."""
        return min(self.max_fetch_workers or self.matrix_size, self.matrix_size)

    @property
    def compute_workers(self) -> int:
        """Фактическое число потоков для вычисления строк произведения."""
        return min(self.max_compute_workers or self.matrix_size, self.matrix_size)

    def row_url(self, dataset: Dataset, index: int) -> str:
        """URL строки `index` набора `dataset`."""
        path = ROW_PATH_TEMPLATE.format(dataset=Dataset(dataset).value, index=index)
        return f"{self.base_url}{path}"

    def validate_url(self) -> str:
        """URL validation endpoint."""
        return f"{self.base_url}{VALIDATE_PATH}"
