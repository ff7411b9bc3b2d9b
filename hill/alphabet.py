"""Letter <-> number lookup."""

import dataclasses
import types
from typing import Mapping

from hill.consts import LETTERS
from hill.error import CipherError, ErrorKind


@dataclasses.dataclass(frozen=True)
class Alphabet:
    """Ordered, read-only set of symbols numbered from 0."""

    symbols: str

    indices: Mapping[str, int] = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(set(self.symbols)) != len(self.symbols):
            raise ValueError('Alphabet symbols must be unique.')

        object.__setattr__(
            self,
            'indices',
            types.MappingProxyType({s: i for i, s in enumerate(self.symbols)}),
        )

    def __len__(self) -> int:
        return len(self.symbols)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and symbol.lower() in self.indices

    def index_of(self, symbol: str) -> int:
        """Number of `symbol`, case-insensitively."""
        try:
            return self.indices[symbol.lower()]
        except KeyError:
            raise CipherError(
                ErrorKind.UNKNOWN_SYMBOL, f'{symbol!r} is not in the alphabet.'
            ) from None

    def symbol_at(self, index: int) -> str:
        """Symbol numbered `index`, which must already lie in [0, len)."""
        if not 0 <= index < len(self.symbols):
            raise IndexError(f'Index {index} is outside the alphabet.')
        return self.symbols[index]


ALPHABET = Alphabet(LETTERS)
