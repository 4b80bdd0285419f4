"""HTTP транспорт: сессия requests и проверка статуса."""

import requests

from matrixpass import __version__


def create_session() -> requests.Session:
    """Новая requests.Session для numbers API."""
    session = requests.Session()
    session.headers["User-Agent"] = f"matrixpass/{__version__}"
    return session


def is_success_status(status_code: int) -> bool:
    """2xx — успех, все остальное — ошибка."""
    return 200 <= status_code < 300
