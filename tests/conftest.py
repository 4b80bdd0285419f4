"""Общие test doubles: numbers API поверх Mock(spec=requests.Session)."""

import json
import re
from typing import Dict, List, Optional, Sequence, Tuple
from unittest.mock import Mock

import pytest
import requests

from matrixpass.config import PipelineConfig

TEST_BASE_URL = "http://numbers.test/"

_ROW_URL_RE = re.compile(r"api/numbers/(?P<dataset>[^/]+)/row/(?P<index>\d+)$")


def make_response(status_code: int = 200, text: str = "") -> Mock:
    """Минимальный двойник requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.text = text
    return response


def row_body(values: Sequence) -> str:
    """Тело ответа row endpoint."""
    return json.dumps({"Value": list(values), "Success": True})


class FakeNumbersApi:
    """numbers API в памяти.

    matrices: {"A": [[...], ...], "B": [[...], ...]}
    overrides: {("A", 3): Mock response} — подменяет ответ для строки
    """

    def __init__(
        self,
        matrices: Dict[str, List[List[int]]],
        validate_response: Optional[Mock] = None,
    ):
        self.matrices = matrices
        self.overrides: Dict[Tuple[str, int], Mock] = {}
        self.validate_response = validate_response or make_response(200, "passphrase")
        self.requested_rows: List[Tuple[str, int]] = []

        self.session = Mock(spec=requests.Session)
        self.session.get.side_effect = self._get
        self.session.post.side_effect = self._post

    def _get(self, url, timeout=None, **kwargs):
        match = _ROW_URL_RE.search(url)
        if match is None:
            return make_response(404, "not found")
        key = (match.group("dataset"), int(match.group("index")))
        self.requested_rows.append(key)
        if key in self.overrides:
            return self.overrides[key]
        rows = self.matrices.get(key[0])
        if rows is None or key[1] >= len(rows):
            return make_response(404, "not found")
        return make_response(200, row_body(rows[key[1]]))

    def _post(self, url, data=None, headers=None, timeout=None, **kwargs):
        return self.validate_response


@pytest.fixture
def config_2x2():
    """Конфигурация для 2×2 матриц."""
    return PipelineConfig(base_url=TEST_BASE_URL, matrix_size=2)


@pytest.fixture
def numbers_api_2x2():
    """A=[[1,2],[3,4]], B=[[5,6],[7,8]]."""
    return FakeNumbersApi({"A": [[1, 2], [3, 4]], "B": [[5, 6], [7, 8]]})
