"""Hill cipher."""

import logging
from typing import Any

from hill import config
from hill.codec import check_message, decode, encode
from hill.matrix import IntMatrix, invert_2x2_mod26, multiply_into_columns
from hill.modular import normalize_mod26
from hill.result import Result, capture
from hill.validator import check_key

logger = logging.getLogger(__name__)


class Hill:
    """Hill cipher bound to one validated key.

    Raises `CipherError` on construction if the key cannot be used for a
    round trip, and from `encrypt`/`decrypt` if the text holds a non-letter.
    """

    name = 'Hill'

    def __init__(self, key: Any, workers: int = 0) -> None:
        self._key = check_key(key)
        self._inv = None
        self._workers = workers or config.WORKERS

    @property
    def key(self) -> IntMatrix:
        """Key matrix reduced mod 26."""
        return self._key.copy()

    @property
    def inverse(self) -> IntMatrix:
        """Decryption matrix, computed on first use."""
        if self._inv is None:
            self._inv = invert_2x2_mod26(self._key)
        return self._inv.copy()

    @property
    def size(self) -> int:
        """Block size."""
        return self._key.shape[0]

    def encrypt(self, txt: str) -> str:
        return self._do(self._key, txt)

    def decrypt(self, txt: str) -> str:
        return self._do(self.inverse, txt)

    def _do(self, matrix: IntMatrix, txt: str) -> str:
        """Encrypt/decrypt."""
        vectors = encode(check_message(txt), self.size)

        logger.debug('Transforming %d block(s) of %d.', vectors.shape[1], self.size)

        multiplied = multiply_into_columns(matrix, vectors, workers=self._workers)

        return decode(normalize_mod26(multiplied))


def encrypt(key: Any, message: str) -> Result[str]:
    """Encrypt `message` under `key`."""
    return capture(lambda: Hill(key).encrypt(message))


def decrypt(key: Any, message: str) -> Result[str]:
    """Decrypt `message` under `key`. Padding added on encryption is kept."""
    return capture(lambda: Hill(key).decrypt(message))
