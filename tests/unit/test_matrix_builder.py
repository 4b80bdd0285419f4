"""Unit тесты для Matrix Builder.

Coverage:
- Сборка матрицы из строк
- Строки пишутся по индексу, порядок завершения не важен
- Abort на первой неудачной строке (FetchError)
- Ограничение fan-out
"""

import logging
import threading
import time

import pytest

from matrixpass.api import FetchError, FetchErrorKind, MatrixBuilder, RowFetcher
from matrixpass.api.row_fetcher import RowFetchResult
from matrixpass.config import PipelineConfig
from matrixpass.core.domain import Dataset, Matrix
from tests.conftest import TEST_BASE_URL, FakeNumbersApi, make_response


class DelayedFetcher:
    """Fetcher, у которого строки с меньшим индексом завершаются позже."""

    def __init__(self, size):
        self.size = size
        self.lock = threading.Lock()
        self.in_flight = 0
        self.max_in_flight = 0

    def fetch(self, dataset, row_index):
        with self.lock:
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
        time.sleep((self.size - row_index) * 0.01)
        with self.lock:
            self.in_flight -= 1
        return RowFetchResult(
            ok=True,
            dataset=Dataset(dataset),
            row_index=row_index,
            row=tuple(row_index * 10 + j for j in range(self.size)),
            error_kind=None,
            status_code=200,
            details="",
        )


# =============================================================================
# SUCCESS
# =============================================================================


def test_build_matrix(config_2x2, numbers_api_2x2):
    builder = MatrixBuilder(config_2x2, RowFetcher(config_2x2, numbers_api_2x2.session))

    a = builder.build(Dataset.A)
    b = builder.build("B")

    assert a == Matrix.from_rows([[1, 2], [3, 4]])
    assert b == Matrix.from_rows([[5, 6], [7, 8]])
    assert sorted(numbers_api_2x2.requested_rows) == [("A", 0), ("A", 1), ("B", 0), ("B", 1)]


def test_rows_placed_by_index_not_completion_order():
    config = PipelineConfig(matrix_size=5)
    builder = MatrixBuilder(config, DelayedFetcher(5))

    m = builder.build(Dataset.A)

    assert m == Matrix.from_rows([[i * 10 + j for j in range(5)] for i in range(5)])


def test_rows_fetched_concurrently_by_default():
    """Без max_fetch_workers строки запрашиваются параллельно."""
    config = PipelineConfig(matrix_size=6)
    fetcher = DelayedFetcher(6)

    MatrixBuilder(config, fetcher).build(Dataset.A)

    assert fetcher.max_in_flight > 1


def test_fetch_workers_bound_concurrency():
    config = PipelineConfig(matrix_size=6, max_fetch_workers=2)
    fetcher = DelayedFetcher(6)

    MatrixBuilder(config, fetcher).build(Dataset.B)

    assert fetcher.max_in_flight <= 2


def test_default_fetcher_created_from_config(config_2x2):
    builder = MatrixBuilder(config_2x2)
    assert isinstance(builder.fetcher, RowFetcher)
    assert builder.fetcher.config is config_2x2


# =============================================================================
# FAILURE
# =============================================================================


def test_failed_row_aborts_build(config_2x2, numbers_api_2x2):
    numbers_api_2x2.overrides[("A", 1)] = make_response(500, "boom")
    builder = MatrixBuilder(config_2x2, RowFetcher(config_2x2, numbers_api_2x2.session))

    with pytest.raises(FetchError) as exc_info:
        builder.build(Dataset.A)

    error = exc_info.value
    assert error.dataset == "A"
    assert error.row_index == 1
    assert error.kind == FetchErrorKind.HTTP_STATUS
    assert error.status_code == 500


def test_short_row_aborts_build(config_2x2):
    api = FakeNumbersApi({"A": [[1, 2], [3]], "B": [[5, 6], [7, 8]]})
    builder = MatrixBuilder(config_2x2, RowFetcher(config_2x2, api.session))

    with pytest.raises(FetchError) as exc_info:
        builder.build(Dataset.A)

    assert exc_info.value.kind == FetchErrorKind.SHAPE
    assert exc_info.value.row_index == 1


def test_failure_is_logged(config_2x2, numbers_api_2x2, caplog):
    numbers_api_2x2.overrides[("B", 0)] = make_response(404, "")
    builder = MatrixBuilder(config_2x2, RowFetcher(config_2x2, numbers_api_2x2.session))

    with caplog.at_level(logging.ERROR, logger="matrixpass.api.matrix_builder"):
        with pytest.raises(FetchError):
            builder.build(Dataset.B)

    assert "Error fetching row 0 of B matrix" in caplog.text


def test_unexpected_fetcher_exception_propagates():
    class BrokenFetcher:
        def fetch(self, dataset, row_index):
            raise RuntimeError("bug")

    builder = MatrixBuilder(PipelineConfig(base_url=TEST_BASE_URL, matrix_size=3), BrokenFetcher())

    with pytest.raises(RuntimeError, match="bug"):
        builder.build(Dataset.A)
