"""Integer math helpers for 256-bit unsigned values."""

from __future__ import annotations

import math as _math

U256_MAX = (1 << 256) - 1


def _check_u256(value: int, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= U256_MAX:
        raise ValueError(f"{name} is out of the uint256 range: {value}")
    return value


def sqrt(a: int) -> int:
    """Return the square root of ``a`` rounded towards zero."""
    _check_u256(a, "a")
    return _math.isqrt(a)


def average(a: int, b: int) -> int:
    """Return the average of ``a`` and ``b`` rounded towards zero, without overflow."""
    _check_u256(a, "a")
    _check_u256(b, "b")
    # a ^ b is the carry-less sum and a & b holds the carries.
    return (a & b) + ((a ^ b) >> 1)


def add_unchecked(current: int, rhs: int) -> int:
    """Add ``rhs`` to a stored uint256 value, wrapping on overflow."""
    return (current + rhs) & U256_MAX


def sub_unchecked(current: int, rhs: int) -> int:
    """Subtract ``rhs`` from a stored uint256 value, wrapping on underflow."""
    return (current - rhs) & U256_MAX