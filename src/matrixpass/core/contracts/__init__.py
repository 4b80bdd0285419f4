"""
Contract Validation Module

Модуль для валидации JSON контрактов numbers API.
"""

from .validators import (
    ContractValidator,
    RowResponseValidator,
    SchemaLoader,
)

__all__ = [
    "SchemaLoader",
    "ContractValidator",
    "RowResponseValidator",
]
