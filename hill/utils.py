"""General utilities."""

import math
from typing import Sequence

from hill.alphabet import ALPHABET
from hill.error import CipherError, ErrorKind


def nonalphabet(chars: str) -> str:
    """Get the first character outside the alphabet, if any."""
    for char in chars:
        if char not in ALPHABET:
            return char
    return ''


def square(values: Sequence[int]) -> list[list[int]]:
    """Arrange n*n row-major values as an n x n matrix."""
    row = math.isqrt(len(values))

    if not values or row * row != len(values):
        raise CipherError(
            ErrorKind.NOT_SQUARE,
            f'{len(values)} values cannot form a square matrix.',
        )

    return [list(values[i:i + row]) for i in range(0, len(values), row)]
