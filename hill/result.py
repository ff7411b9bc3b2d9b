"""Explicit success/failure values returned by the public operations."""

import dataclasses
from typing import Callable, Generic, Literal, TypeVar, Union

from hill.error import CipherError

V = TypeVar('V')


@dataclasses.dataclass(frozen=True)
class Ok(Generic[V]):
    """A successful outcome."""

    value: V

    ok: Literal[True] = dataclasses.field(default=True, init=False, repr=False)

    def unwrap(self) -> V:
        return self.value


@dataclasses.dataclass(frozen=True)
class Err:
    """A failed outcome."""

    error: CipherError

    ok: Literal[False] = dataclasses.field(default=False, init=False, repr=False)

    def unwrap(self):
        """Raise the carried error."""
        raise self.error


Result = Union[Ok[V], Err]


def capture(func: Callable[..., V], *args, **kwargs) -> 'Result[V]':
    """Call `func`, turning a raised `CipherError` into an `Err`."""
    try:
        return Ok(func(*args, **kwargs))
    except CipherError as err:
        return Err(err)
