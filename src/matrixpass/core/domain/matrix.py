"""
Matrix — Модель квадратной целочисленной матрицы

Immutable Pydantic модель: матрица создается полностью заполненной и
больше не меняется. Все элементы — signed 32-bit целые.
"""

from enum import Enum
from typing import Sequence, Tuple

from pydantic import BaseModel, Field, StrictInt, field_validator

from matrixpass.core.math.int32 import is_int32


# =============================================================================
# ENUMS
# =============================================================================


class Dataset(str, Enum):
    """
    Имя входного набора данных numbers API.
    """

    A = "A"
    B = "B"


# =============================================================================
# MATRIX
# =============================================================================


class Matrix(BaseModel):
    """
    Квадратная матрица N×N из signed 32-bit целых.

    Строки хранятся как tuple of tuples (row-major), поэтому модель
    hashable и не допускает модификации после создания.
    """

    rows: Tuple[Tuple[StrictInt, ...], ...] = Field(
        ..., min_length=1, description="Строки матрицы (row-major)"
    )

    model_config = {"frozen": True}

    @field_validator("rows")
    @classmethod
    def validate_square_int32(
        cls, v: Tuple[Tuple[int, ...], ...]
    ) -> Tuple[Tuple[int, ...], ...]:
        """Проверка: матрица квадратная, элементы в диапазоне int32."""
        size = len(v)
        for i, row in enumerate(v):
            if len(row) != size:
                raise ValueError(
                    f"Matrix must be square: row {i} has {len(row)} cells, expected {size}"
                )
            for j, cell in enumerate(row):
                if not is_int32(cell):
                    raise ValueError(
                        f"Cell [{i}][{j}]={cell} is outside the signed 32-bit range"
                    )
        return v

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Matrix":
        """Создание матрицы из любой последовательности строк."""
        return cls(rows=tuple(tuple(row) for row in rows))

    @property
    def size(self) -> int:
        """Размер N."""
        return len(self.rows)

    def row(self, i: int) -> Tuple[int, ...]:
        return self.rows[i]

    def column(self, j: int) -> Tuple[int, ...]:
        return tuple(row[j] for row in self.rows)
