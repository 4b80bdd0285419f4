"""Validator — отправка digest и получение passphrase.

POST {base_url}api/numbers/validate
- Content-Type: application/json
- Тело — голая hex строка digest, НЕ JSON объект. Несоответствие
  заголовка и тела — часть контракта внешнего API, не исправлять.
- 2xx: тело ответа как есть — passphrase
- non-2xx: ValidationError со статусом, без повторов
"""

import logging
from typing import Final, Optional

import requests

from matrixpass.api.errors import ValidationError
from matrixpass.api.transport import create_session, is_success_status
from matrixpass.config import PipelineConfig
from matrixpass.core.fingerprint.digest import is_valid_digest

logger = logging.getLogger(__name__)

VALIDATE_CONTENT_TYPE: Final[str] = "application/json"

# Сколько символов тела ошибки попадает в сообщение
_ERROR_BODY_PREVIEW: Final[int] = 200


class PassphraseValidator:
    """Обмен digest на passphrase."""

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or PipelineConfig()
        self.session = session or create_session()

    def validate(self, digest: str) -> str:
        """Отправка digest в validation endpoint.

        Args:
            digest: 32 символа uppercase hex

        Returns:
            Passphrase (тело ответа verbatim)

        Raises:
            ValueError: если digest не в формате uppercase hex
            ValidationError: если статус ответа не 2xx
            requests.RequestException: ошибки транспорта (без классификации)
        """
        if not is_valid_digest(digest):
            raise ValueError(f"digest must be 32 uppercase hex characters, got {digest!r}")

        url = self.config.validate_url()
        logger.info("POST %s", url)
        response = self.session.post(
            url,
            data=digest.encode("utf-8"),
            headers={"Content-Type": VALIDATE_CONTENT_TYPE},
            timeout=self.config.request_timeout_sec,
        )

        if not is_success_status(response.status_code):
            details = (response.text or "").strip()[:_ERROR_BODY_PREVIEW]
            raise ValidationError(response.status_code, details)

        return response.text
