import numpy as np
import pytest

from hill.error import ErrorKind
from hill.result import Err, Ok
from hill.validator import check_key, validate_key


def test_valid_key():
    result = validate_key([[3, 3], [2, 5]])
    assert isinstance(result, Ok)
    assert result.value.tolist() == [[3, 3], [2, 5]]


def test_valid_key_is_reduced():
    assert check_key([[29, -23], [28, 5]]).tolist() == [[3, 3], [2, 5]]


def test_numpy_key():
    assert validate_key(np.array([[1, 3], [2, 5]])).ok


@pytest.mark.parametrize('key', [
    [[1, 2], [3, 4], [5, 6]],
    [[1, 2, 3], [4, 5, 6]],
    [[1, 2], [3]],
    [1, 2, 3, 4],
    [],
    [[]],
])
def test_not_square(key):
    result = validate_key(key)
    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.NOT_SQUARE


@pytest.mark.parametrize('key', [[[5]], [[6, 24, 1], [13, 16, 10], [20, 17, 15]]])
def test_unsupported_dimension(key):
    result = validate_key(key)
    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.UNSUPPORTED_DIMENSION


@pytest.mark.parametrize('key', [
    [[1, 2], [2, 4]],
    [[2, 4], [1, 3]],
    [[13, 0], [0, 1]],
    [[-1, 3], [9, 5]],
    [[25, 3], [9, 5]],
    [[0, 0], [0, 0]],
])
def test_not_invertible_mod26(key):
    result = validate_key(key)
    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.NOT_INVERTIBLE_MOD26


def test_every_rejected_determinant_shares_a_factor_with_26():
    for a in range(26):
        for d in range(26):
            det = (a * d - 1) % 26
            result = validate_key([[a, 1], [1, d]])
            assert result.ok == (det % 2 != 0 and det % 13 != 0)
