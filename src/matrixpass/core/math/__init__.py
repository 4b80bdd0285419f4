"""
Core math modules для matrixpass

Целочисленные примитивы с фиксированной разрядностью.
"""

from matrixpass.core.math.int32 import (
    INT32_BITS,
    INT32_MAX,
    INT32_MIN,
    is_int32,
    wrap_int32,
)

__all__ = [
    "INT32_BITS",
    "INT32_MAX",
    "INT32_MIN",
    "is_int32",
    "wrap_int32",
]
