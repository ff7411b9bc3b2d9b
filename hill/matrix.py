"""Integer matrix operations modulo the alphabet length."""

from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any

import numpy as np
from numpy.typing import NDArray

from hill.consts import MODULUS
from hill.error import CipherError, ErrorKind
from hill.modular import modular_inverse, normalize_mod26

IntMatrix = NDArray[np.int64]
Rows = list[list[int]]


def as_matrix(values: Any, kind: ErrorKind = ErrorKind.DIMENSION_MISMATCH) -> IntMatrix:
    """Create a two-dimensional integer matrix from nested sequences.

    Floating entries are rounded to the nearest integer. Anything that is
    not a rectangular 2-D grid of numbers raises `CipherError` of `kind`.
    """
    try:
        matrix = np.array(values)
    except ValueError:
        raise CipherError(kind, 'Matrix rows differ in length.') from None

    if matrix.ndim != 2:
        raise CipherError(kind, 'Matrix must be a rectangular 2-D grid.')

    if matrix.dtype == bool:
        matrix = matrix.astype(np.int64)

    if matrix.size and not np.issubdtype(matrix.dtype, np.number):
        raise CipherError(kind, f'Matrix entries must be 64-bit numbers, not {matrix.dtype}.')

    if np.issubdtype(matrix.dtype, np.unsignedinteger) and matrix.size:
        if matrix.max() > np.iinfo(np.int64).max:
            raise CipherError(kind, 'Matrix entries do not fit in 64 bits.')

    if np.issubdtype(matrix.dtype, np.floating):
        matrix = np.rint(matrix)

    return matrix.astype(np.int64)


def as_matrix_mod26(values: Any, kind: ErrorKind = ErrorKind.DIMENSION_MISMATCH) -> IntMatrix:
    """`as_matrix` reduced mod 26.

    Integer entries of nested lists are reduced before conversion, so
    entries of any size keep their residue.
    """
    if isinstance(values, (list, tuple)) and all(
        isinstance(row, (list, tuple)) for row in values
    ):
        values = [
            [int(v) % MODULUS if isinstance(v, (int, np.integer)) else v for v in row]
            for row in values
        ]

    return normalize_mod26(as_matrix(values, kind))


def _require_square(matrix: IntMatrix) -> None:
    row, col = matrix.shape
    if row != col:
        raise CipherError(ErrorKind.NOT_SQUARE, f'Matrix is {row}x{col}, not square.')


def _minor(rows: Rows, i: int, j: int) -> Rows:
    """Drop row `i` and column `j`."""
    return [row[:j] + row[j + 1:] for k, row in enumerate(rows) if k != i]


def _det(rows: Rows) -> int:
    """Cofactor expansion along the first row."""
    n = len(rows)

    if n == 0:
        return 1
    if n == 1:
        return rows[0][0]
    if n == 2:
        (a, b), (c, d) = rows
        return a * d - b * c

    return sum(
        (-1) ** j * rows[0][j] * _det(_minor(rows, 0, j)) for j in range(n)
    )


def determinant(matrix: Any) -> int:
    """Exact integer determinant of a square matrix."""
    matrix = as_matrix(matrix)
    _require_square(matrix)
    return _det(matrix.tolist())


def adjugate(matrix: Any) -> IntMatrix:
    """Transposed cofactor matrix.

    For 2x2 this is the diagonal swapped and the off-diagonal negated.
    """
    matrix = as_matrix(matrix)
    _require_square(matrix)

    rows = matrix.tolist()
    n = len(rows)

    if n == 1:
        return np.ones((1, 1), dtype=np.int64)
    if n == 2:
        (a, b), (c, d) = rows
        return np.array([[d, -b], [-c, a]], dtype=np.int64)

    cofactors = [
        [(-1) ** (i + j) * _det(_minor(rows, i, j)) for j in range(n)]
        for i in range(n)
    ]

    return np.array(cofactors, dtype=np.int64).T


def invert_mod26(matrix: Any) -> IntMatrix:
    """Inverse of a square matrix modulo 26, every entry in [0, 26)."""
    matrix = as_matrix_mod26(matrix)
    _require_square(matrix)

    det = normalize_mod26(determinant(matrix))

    inv = modular_inverse(det)

    if inv is None:
        raise CipherError(
            ErrorKind.NOT_INVERTIBLE_MOD26,
            f'Determinant {det} has no inverse modulo 26.',
        )

    return normalize_mod26(adjugate(matrix) * inv)


def invert_2x2_mod26(matrix: Any) -> IntMatrix:
    """Inverse of a 2x2 matrix modulo 26."""
    matrix = as_matrix_mod26(matrix)
    _require_square(matrix)

    if matrix.shape != (2, 2):
        raise CipherError(
            ErrorKind.UNSUPPORTED_DIMENSION,
            f'Expected a 2x2 matrix, got {matrix.shape[0]}x{matrix.shape[1]}.',
        )

    return invert_mod26(matrix)


def multiply_matrix_vector(matrix: Any, vector: Any) -> NDArray[np.int64]:
    """Row-by-row dot product of `matrix` and `vector`."""
    matrix = as_matrix(matrix)
    vector = np.asarray(vector, dtype=np.int64)

    if vector.ndim != 1 or matrix.shape[1] != vector.shape[0]:
        raise CipherError(
            ErrorKind.DIMENSION_MISMATCH,
            f'Cannot multiply a {matrix.shape[0]}x{matrix.shape[1]} matrix '
            f'by a vector of shape {vector.shape}.',
        )

    return np.matmul(matrix, vector)


def multiply_into_columns(matrix: Any, grid: Any, workers: int = 1) -> IntMatrix:
    """Multiply `matrix` into every column of `grid`.

    Columns are independent; with `workers` above 1 they are spread over a
    thread pool and joined in column order.
    """
    matrix = as_matrix(matrix)
    grid = as_matrix(grid)

    if matrix.shape[1] != grid.shape[0]:
        raise CipherError(
            ErrorKind.DIMENSION_MISMATCH,
            f'Matrix has {matrix.shape[1]} columns but blocks have '
            f'{grid.shape[0]} rows.',
        )

    columns = [grid[:, j] for j in range(grid.shape[1])]

    if not columns:
        return np.zeros((matrix.shape[0], 0), dtype=np.int64)

    multiply = partial(multiply_matrix_vector, matrix)

    if workers > 1 and len(columns) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            products = list(pool.map(multiply, columns))
    else:
        products = [multiply(column) for column in columns]

    return np.column_stack(products)
