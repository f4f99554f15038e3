"""Fallible values flowing through the loader stages.

Every stage yields ``Ok(value)`` or ``Err(error)``. Callers branch with
``isinstance`` or the ``is_ok``/``is_err`` properties::

    for item in EpubFileLoader.with_dir("books").load():
        if isinstance(item, Err):
            print(item.error)
        else:
            print(item.value.title)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from .exceptions import EpubLoaderException

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def map(self, func: Callable[[T], U]) -> "Ok[U]":
        return Ok(func(self.value))


@dataclass(frozen=True)
class Err:
    error: EpubLoaderException

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise self.error

    def map(self, func: Callable) -> "Err":
        return self


Fallible = Union[Ok[T], Err]

__all__ = ["Ok", "Err", "Fallible"]
