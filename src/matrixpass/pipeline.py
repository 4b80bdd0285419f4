"""MatrixPipeline — оркестрация всех стадий.

Порядок (строго последовательный):
1. MatrixBuilder(A) — полностью
2. MatrixBuilder(B) — полностью
3. MatrixMultiplier — barrier после всех строк
4. flatten_matrix
5. compute_digest
6. PassphraseValidator

Первая ошибка любой стадии прерывает запуск, частичных результатов нет.
"""

import logging
import time
from typing import Optional

import requests

from matrixpass.api.matrix_builder import MatrixBuilder
from matrixpass.api.row_fetcher import RowFetcher
from matrixpass.api.transport import create_session
from matrixpass.api.validator import PassphraseValidator
from matrixpass.config import PipelineConfig
from matrixpass.core.compute.matmul import MatrixMultiplier
from matrixpass.core.domain.matrix import Dataset
from matrixpass.core.domain.result import PipelineResult
from matrixpass.core.fingerprint.digest import compute_digest
from matrixpass.core.fingerprint.flatten import flatten_matrix

logger = logging.getLogger(__name__)


class MatrixPipeline:
    """Полный запуск: матрицы A и B -> C -> digest -> passphrase."""

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            config: конфигурация pipeline (default: PipelineConfig())
            session: общая HTTP сессия для всех стадий (default: создается
                автоматически и закрывается в close())
        """
        self.config = config or PipelineConfig()
        self._owns_session = session is None
        self.session = session or create_session()

        self.builder = MatrixBuilder(self.config, RowFetcher(self.config, self.session))
        self.multiplier = MatrixMultiplier(self.config)
        self.validator = PassphraseValidator(self.config, self.session)

    def run(self) -> PipelineResult:
        """Запуск pipeline.

        Raises:
            FetchError: строка A или B не получена (validator не вызывается)
            ValidationError: validation endpoint вернул non-2xx
        """
        started = time.perf_counter()

        a = self.builder.build(Dataset.A)
        b = self.builder.build(Dataset.B)

        c = self.multiplier.multiply(a, b)
        flattened = flatten_matrix(c)
        digest = compute_digest(flattened)
        logger.info("Product digest %s (%d chars flattened)", digest, len(flattened))

        passphrase = self.validator.validate(digest)

        elapsed_ms = (time.perf_counter() - started) * 1000.0
        return PipelineResult(
            passphrase=passphrase,
            digest=digest,
            matrix_size=self.config.matrix_size,
            flattened_length=len(flattened),
            elapsed_ms=elapsed_ms,
        )

    def close(self) -> None:
        """Закрытие сессии, если pipeline создал ее сам."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "MatrixPipeline":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
