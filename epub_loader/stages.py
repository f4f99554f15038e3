"""Single-pass loader stage shared by every pipeline step."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

from .backends.base import EpubBackend
from .exceptions import LoaderConsumedError
from .result import Ok

T = TypeVar("T")


class Stage(Generic[T]):
    """Wraps one lazy iterator of ``T`` items.

    The wrapped iterator is handed out exactly once, to a transition, to
    :meth:`collect` or to a ``for`` loop. Any later use raises
    :class:`~epub_loader.exceptions.LoaderConsumedError`.
    """

    def __init__(self, iterator: Iterable[T], *, backend: Optional[EpubBackend] = None) -> None:
        self._iterator: Optional[Iterator[T]] = iter(iterator)
        # Set while a caller's for-loop drives the iterator, so close() can still reach it.
        self._running: Optional[Iterator[T]] = None
        self.backend = backend

    @property
    def consumed(self) -> bool:
        return self._iterator is None

    def _take(self) -> Iterator[T]:
        if self._iterator is None:
            raise LoaderConsumedError(
                f"{type(self).__name__} has already been consumed by a previous stage."
            )
        iterator, self._iterator = self._iterator, None
        return iterator

    def __iter__(self) -> Iterator[T]:
        self._running = self._take()
        return self._running

    def collect(self) -> List[T]:
        """Drive the pipeline to completion and return every item in order."""
        return list(self._take())

    def ignore_errors(self) -> "Stage[Any]":
        """Drop ``Err`` items and unwrap ``Ok`` items."""
        return Stage((item.value for item in self._take() if isinstance(item, Ok)), backend=self.backend)

    def close(self) -> None:
        """Abandon the remaining items, releasing anything a pending step holds open."""
        iterator = self._iterator if self._iterator is not None else self._running
        self._iterator = self._running = None
        close = getattr(iterator, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "Stage[T]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["Stage"]
