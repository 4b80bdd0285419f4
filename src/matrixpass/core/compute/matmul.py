"""Matrix Multiplier — произведение двух квадратных int32 матриц.

C[i][j] = Σ_k A[i][k] * B[k][j], результат усекается до signed 32-bit.

Параллелизм:
- Одна задача на строку i (ThreadPoolExecutor)
- Внутри задачи циклы по j и k последовательные
- Задача i пишет только слот product_rows[i]; слоты не пересекаются,
  поэтому lock не нужен. Barrier — ожидание всех futures перед сборкой C.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from typing import List, Optional, Tuple

from matrixpass.config import PipelineConfig
from matrixpass.core.domain.matrix import Matrix
from matrixpass.core.math.int32 import wrap_int32

logger = logging.getLogger(__name__)


def _multiply_row(a: Matrix, b_columns: Tuple[Tuple[int, ...], ...], i: int) -> Tuple[int, ...]:
    """Строка i произведения."""
    a_row = a.row(i)
    return tuple(
        wrap_int32(sum(x * y for x, y in zip(a_row, column)))
        for column in b_columns
    )


def _check_operands(a: Matrix, b: Matrix) -> None:
    if a.size != b.size:
        raise ValueError(
            f"Matrix sizes must match: A is {a.size}x{a.size}, B is {b.size}x{b.size}"
        )


class MatrixMultiplier:
    """Параллельное по строкам умножение матриц.

    Размер пула берется из PipelineConfig.compute_workers.
    """

    def __init__(self, config: Optional[PipelineConfig] = None):
        """
        Args:
            config: конфигурация pipeline (default: PipelineConfig())
        """
        self.config = config or PipelineConfig()

    def multiply(self, a: Matrix, b: Matrix) -> Matrix:
        """Вычисление C = A × B.

        Args:
            a: левый операнд N×N
            b: правый операнд N×N

        Returns:
            Matrix C (N×N, int32 wraparound)

        Raises:
            ValueError: если размеры A и B различаются
        """
        _check_operands(a, b)
        n = a.size
        workers = min(self.config.compute_workers, n)

        # Столбцы B один раз, read-only для всех задач
        b_columns = tuple(b.column(j) for j in range(n))
        product_rows: List[Optional[Tuple[int, ...]]] = [None] * n

        def compute_row(i: int) -> None:
            # Задача владеет только слотом i
            product_rows[i] = _multiply_row(a, b_columns, i)

        logger.debug("Multiplying %dx%d matrices with %d workers", n, n, workers)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="matmul") as pool:
            futures = [pool.submit(compute_row, i) for i in range(n)]
            wait(futures)

        # Barrier пройден: пробрасываем первую ошибку задачи, если была
        for future in futures:
            future.result()

        return Matrix.from_rows(product_rows)
