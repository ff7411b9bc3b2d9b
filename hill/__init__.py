"""Hill cipher over the 26 lowercase Latin letters."""

from hill.__version__ import __version__
from hill.engine import Hill, decrypt, encrypt
from hill.error import CipherError, ErrorKind, HillError
from hill.result import Err, Ok, Result

__all__ = [
    '__version__',
    'CipherError',
    'Err',
    'ErrorKind',
    'Hill',
    'HillError',
    'Ok',
    'Result',
    'decrypt',
    'encrypt',
]
