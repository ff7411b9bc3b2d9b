"""Arithmetic modulo the alphabet length."""

from typing import Optional, TypeVar

import numpy as np

from hill.consts import MODULUS

N = TypeVar('N', int, np.ndarray)


def normalize_mod26(x: N) -> N:
    """Reduce `x` (an integer or an integer array) into [0, 26)."""
    # Python and numpy both take the sign of the divisor, so negative
    # operands already land in range.
    if isinstance(x, np.ndarray):
        return np.mod(x, MODULUS)
    return int(x) % MODULUS


def egcd(a: int, b: int) -> tuple[int, int, int]:
    """Extended Euclid: `(g, x, y)` with `a*x + b*y == g == gcd(a, b)`."""
    x0, x1, y0, y1 = 1, 0, 0, 1

    while b:
        q, a, b = a // b, b, a % b
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1

    return a, x0, y0


def modular_inverse(a: int, m: int = MODULUS) -> Optional[int]:
    """Unique x in [1, m) with `a*x % m == 1`, or None if gcd(a, m) != 1."""
    if m < 2:
        raise ValueError('Modulus must be at least 2.')

    g, x, _ = egcd(int(a) % m, m)

    if g != 1:
        return None

    return x % m
