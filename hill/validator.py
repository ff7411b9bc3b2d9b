"""Key checks."""

import logging
import math
from typing import Any

from hill.consts import BLOCK_SIZE, MODULUS
from hill.error import CipherError, ErrorKind
from hill.matrix import IntMatrix, as_matrix_mod26, determinant
from hill.modular import normalize_mod26
from hill.result import Result, capture

logger = logging.getLogger(__name__)


def check_key(key: Any) -> IntMatrix:
    """Return the key reduced mod 26, or raise `CipherError`.

    A key that passes is usable for both encryption and decryption.
    """
    matrix = as_matrix_mod26(key, kind=ErrorKind.NOT_SQUARE)

    row, col = matrix.shape

    if row != col:
        raise CipherError(
            ErrorKind.NOT_SQUARE,
            f'Key matrix is {row}x{col}, not square, and thus not invertible.',
        )

    if row != BLOCK_SIZE:
        raise CipherError(
            ErrorKind.UNSUPPORTED_DIMENSION,
            f'The key must be a {BLOCK_SIZE}x{BLOCK_SIZE} matrix, not {row}x{col}.',
        )

    det = normalize_mod26(determinant(matrix))

    if math.gcd(det, MODULUS) != 1:
        raise CipherError(
            ErrorKind.NOT_INVERTIBLE_MOD26,
            f'Key determinant {det} and alphabet length {MODULUS} are not co-prime.',
        )

    logger.debug('Key accepted, determinant %d mod %d.', det, MODULUS)

    return matrix


def validate_key(key: Any) -> Result[IntMatrix]:
    """`Ok` with the reduced key, or `Err` naming why the key is unusable."""
    return capture(check_key, key)
