"""Matrix Builder — сборка матрицы N×N из строк numbers API.

- Все N строк загружаются параллельно (ThreadPoolExecutor)
- Каждый результат пишется в свой слот rows[i], а не append:
  порядок завершения запросов не влияет на матрицу
- Первая неудачная строка прерывает сборку: ожидающие запросы
  отменяются, уже загруженные строки отбрасываются, бросается FetchError
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Tuple

from matrixpass.api.row_fetcher import RowFetcher, RowFetchResult
from matrixpass.config import PipelineConfig
from matrixpass.core.domain.matrix import Dataset, Matrix

logger = logging.getLogger(__name__)


class MatrixBuilder:
    """Сборка матрицы набора данных через RowFetcher."""

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        fetcher: Optional[RowFetcher] = None,
    ):
        """
        Args:
            config: конфигурация pipeline (default: PipelineConfig())
            fetcher: загрузчик строк (default: RowFetcher(config))
        """
        self.config = config or PipelineConfig()
        self.fetcher = fetcher or RowFetcher(self.config)

    def build(self, dataset: Dataset) -> Matrix:
        """Загрузка всех строк `dataset` и сборка Matrix.

        Raises:
            FetchError: при первой неудачной строке
        """
        dataset = Dataset(dataset)
        size = self.config.matrix_size
        rows: List[Optional[Tuple[int, ...]]] = [None] * size
        failure: Optional[RowFetchResult] = None

        logger.info(
            "Fetching matrix %s (%d rows, %d workers)",
            dataset.value, size, self.config.fetch_workers,
        )
        with ThreadPoolExecutor(
            max_workers=self.config.fetch_workers,
            thread_name_prefix=f"fetch-{dataset.value}",
        ) as pool:
            futures = [pool.submit(self.fetcher.fetch, dataset, i) for i in range(size)]
            try:
                for future in as_completed(futures):
                    result = future.result()
                    if not result.ok:
                        failure = result
                        break
                    rows[result.row_index] = result.row
            finally:
                # Запросы в полете не прерываются, ожидающие отменяются
                for future in futures:
                    future.cancel()

        if failure is not None:
            error = failure.to_error()
            logger.error("%s", error)
            raise error

        logger.debug("Matrix %s complete", dataset.value)
        return Matrix.from_rows(rows)
