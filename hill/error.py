"""Custom exceptions."""

import enum


class ErrorKind(enum.Enum):
    """Categories of cipher failures."""

    NOT_SQUARE = 'not square'
    UNSUPPORTED_DIMENSION = 'unsupported dimension'
    NOT_INVERTIBLE_MOD26 = 'not invertible mod 26'
    NON_ALPHABETIC_CHARACTER = 'non-alphabetic character'
    DIMENSION_MISMATCH = 'dimension mismatch'
    UNKNOWN_SYMBOL = 'unknown symbol'


class HillError(Exception):
    """Base class for all Hill exceptions."""


class CipherError(HillError):
    """A key, message or matrix the cipher cannot work with."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(kind, message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f'{self.kind.value}: {self.message}'
