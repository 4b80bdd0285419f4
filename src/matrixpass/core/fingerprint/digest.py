"""
Digest Computer — MD5 fingerprint flattened строки

MD5 здесь не выполняет функцию безопасности: это фиксированный формат
отпечатка, который ожидает validation endpoint. Замена алгоритма или
регистра hex ломает совместимость с внешним API.

Формат:
- MD5 от UTF-8 байтов строки
- 16 байт -> 32 hex символа, верхний регистр, без разделителей
"""

import hashlib
import re
from typing import Final

from matrixpass.core.domain.result import DIGEST_HEX_LENGTH, DIGEST_PATTERN

_DIGEST_RE: Final[re.Pattern] = re.compile(DIGEST_PATTERN)


def compute_digest(text: str) -> str:
    """
    MD5 от UTF-8 кодировки `text` в виде uppercase hex.

    Args:
        text: Flattened строка

    Returns:
        Строка из 32 символов [0-9A-F]

    Examples:
        >>> compute_digest("")
        'D41D8CD98F00B204E9800998ECF8427E'
    """
    md5 = hashlib.md5(text.encode("utf-8"), usedforsecurity=False)
    return md5.hexdigest().upper()


def is_valid_digest(value: str) -> bool:
    """Проверка формата: ровно DIGEST_HEX_LENGTH uppercase hex символов."""
    return len(value) == DIGEST_HEX_LENGTH and _DIGEST_RE.match(value) is not None
