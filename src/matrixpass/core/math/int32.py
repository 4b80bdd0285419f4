"""
Int32 Arithmetic — 32-bit signed wraparound

Значения матриц и результат умножения живут в диапазоне signed 32-bit.
Python int не переполняется, поэтому wraparound эмулируется явно.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат wrap_int32 всегда в [INT32_MIN, INT32_MAX]
2. wrap_int32 совпадает с two's complement усечением до 32 бит
3. Сумма произведений, усеченная один раз в конце, равна сумме с
   усечением на каждом шаге (арифметика по модулю 2**32)
"""

from typing import Final

INT32_BITS: Final[int] = 32
INT32_MIN: Final[int] = -(2 ** (INT32_BITS - 1))
INT32_MAX: Final[int] = 2 ** (INT32_BITS - 1) - 1

_MODULUS: Final[int] = 2 ** INT32_BITS


def wrap_int32(value: int) -> int:
    """
    Усечение целого до signed 32-bit (two's complement).

    Args:
        value: Произвольное целое

    Returns:
        Значение в [INT32_MIN, INT32_MAX], сравнимое с value по модулю 2**32

    Examples:
        >>> wrap_int32(2**31)
        -2147483648
        >>> wrap_int32(-2**31 - 1)
        2147483647
        >>> wrap_int32(42)
        42
    """
    wrapped = value % _MODULUS
    if wrapped > INT32_MAX:
        wrapped -= _MODULUS
    return wrapped


def is_int32(value: object) -> bool:
    """True если value — int (не bool) в диапазоне signed 32-bit."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return INT32_MIN <= value <= INT32_MAX
