"""Message <-> block grid conversion."""

import numpy as np

from hill.alphabet import ALPHABET
from hill.consts import BLOCK_SIZE, FILLER
from hill.error import CipherError, ErrorKind
from hill.matrix import IntMatrix, as_matrix
from hill.modular import normalize_mod26
from hill.result import Result, capture
from hill.utils import nonalphabet


def check_message(message: str) -> str:
    """Return `message` unchanged, or raise if it holds a non-letter."""
    if char := nonalphabet(message):
        raise CipherError(
            ErrorKind.NON_ALPHABETIC_CHARACTER,
            f'Not all characters are letters, found {char!r}.',
        )
    return message


def validate_message(message: str) -> Result[str]:
    return capture(check_message, message)


def pad(message: str, block_size: int = BLOCK_SIZE) -> str:
    """Append fillers until the length is a multiple of `block_size`."""
    return message + FILLER * (-len(message) % block_size)


def encode(message: str, block_size: int = BLOCK_SIZE) -> IntMatrix:
    """Build a `block_size`-row grid, one block per column.

    Letters fill each column top to bottom before moving to the next.
    """
    if block_size < 1:
        raise ValueError('Block size must be positive.')

    numbers = [ALPHABET.index_of(char) for char in pad(message, block_size).lower()]

    col = len(numbers) // block_size

    return np.array(numbers, dtype=np.int64).reshape((block_size, col), order='F')


def decode(grid) -> str:
    """Read a grid back in the column order `encode` used.

    Padding is kept.
    """
    grid = normalize_mod26(as_matrix(grid))

    return ''.join(ALPHABET.symbol_at(int(i)) for i in grid.flatten(order='F'))
