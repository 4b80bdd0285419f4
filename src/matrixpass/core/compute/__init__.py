"""Compute — вычислительные стадии pipeline (без I/O)."""

from .matmul import MatrixMultiplier

__all__ = [
    "MatrixMultiplier",
]
