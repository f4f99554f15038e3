"""Staged, lazily evaluated EPUB loading pipeline.

Each stage is its own class and only offers the transitions that are valid
for the items it carries::

    EpubFileLoader                  Fallible[str]
      .load()           -> EpubDocumentLoader       Fallible[EpubDocument]
      .load_with_path() -> EpubPathDocumentLoader   Fallible[(str, EpubDocument)]
      .read()           -> TextLoader               Fallible[str], one per document
      .read_with_path() -> TextLoader               Fallible[(str, str)], one per document

    EpubDocumentLoader.extract_text()               Fallible[str], one per page
    EpubPathDocumentLoader.extract_text_with_path() Fallible[(str, str)], one per page

A transition consumes the loader it is called on. Nothing is opened until the
caller pulls the next item, and an ``Err`` from an earlier stage is forwarded
unchanged by every later one.

Example::

    loader = EpubFileLoader.with_glob("library/*.epub")
    for item in loader.load_with_path():
        if item.is_ok:
            path, document = item.value
            with document:
                print(path, document.title)
        else:
            print("failed:", item.error)
"""

from __future__ import annotations

import os
from typing import Iterable, Iterator, Optional, Tuple, TypeVar, Union

from . import resolver
from .backends.base import EpubBackend
from .document import EpubDocument
from .enumeration import PathLike, iter_dir, iter_glob
from .exceptions import EpubLoaderException
from .result import Err, Fallible, Ok
from .stages import Stage
from .types import ExtractionOptions

T = TypeVar("T")

PathItem = Union[PathLike, Ok, Err]


class TextLoader(Stage[Fallible[T]]):
    """Terminal stage carrying extracted text."""


class EpubFileLoader(Stage[Fallible[str]]):
    """Initial stage: fallible candidate paths from a glob, a directory or a list."""

    @classmethod
    def with_glob(cls, pattern: str, *, backend: Optional[EpubBackend] = None) -> "EpubFileLoader":
        """Enumerate ``pattern`` now; raises ``EnumerationError`` if it is malformed."""
        return cls(iter_glob(pattern), backend=backend)

    @classmethod
    def with_dir(cls, directory: PathLike, *, backend: Optional[EpubBackend] = None) -> "EpubFileLoader":
        """Enumerate every entry of ``directory``; raises ``EnumerationError`` if it cannot be read."""
        return cls(iter_dir(directory), backend=backend)

    @classmethod
    def from_paths(cls, paths: Iterable[PathItem], *, backend: Optional[EpubBackend] = None) -> "EpubFileLoader":
        return cls((_as_fallible(path) for path in paths), backend=backend)

    def load(self) -> "EpubDocumentLoader":
        backend = self.backend
        return EpubDocumentLoader(
            (resolver.load(item, backend) for item in self._take()),
            backend=backend,
        )

    def load_with_path(self) -> "EpubPathDocumentLoader":
        backend = self.backend
        return EpubPathDocumentLoader(
            (resolver.load_with_path(item, backend) for item in self._take()),
            backend=backend,
        )

    def read(self, options: Optional[ExtractionOptions] = None) -> "TextLoader[str]":
        """Open each document and join its page texts; any bad page fails that document."""
        backend = self.backend
        return TextLoader(
            (_read(resolver.load(item, backend), options) for item in self._take()),
            backend=backend,
        )

    def read_with_path(self, options: Optional[ExtractionOptions] = None) -> "TextLoader[Tuple[str, str]]":
        backend = self.backend
        return TextLoader(
            (_read_with_path(resolver.load_with_path(item, backend), options) for item in self._take()),
            backend=backend,
        )


class EpubDocumentLoader(Stage[Fallible[EpubDocument]]):
    """Stage of opened documents. The caller owns each document it receives."""

    def extract_text(self, options: Optional[ExtractionOptions] = None) -> "TextLoader[str]":
        """Expand every document into one fallible item per spine page."""
        return TextLoader(_pages(self._take(), options), backend=self.backend)


class EpubPathDocumentLoader(Stage[Fallible[Tuple[str, EpubDocument]]]):
    """Stage of opened documents paired with the path they were opened from."""

    def extract_text_with_path(self, options: Optional[ExtractionOptions] = None) -> "TextLoader[Tuple[str, str]]":
        return TextLoader(_pages_with_path(self._take(), options), backend=self.backend)


def _as_fallible(path: PathItem) -> Fallible[str]:
    if isinstance(path, (Ok, Err)):
        return path
    return Ok(os.fspath(path))


def _read(result: Fallible[EpubDocument], options: Optional[ExtractionOptions]) -> Fallible[str]:
    if isinstance(result, Err):
        return result
    with result.value as document:
        try:
            return Ok(document.read_text(options))
        except EpubLoaderException as exc:
            return Err(exc)


def _read_with_path(
    result: Fallible[Tuple[str, EpubDocument]],
    options: Optional[ExtractionOptions],
) -> Fallible[Tuple[str, str]]:
    if isinstance(result, Err):
        return result
    path, document = result.value
    return _read(Ok(document), options).map(lambda text: (path, text))


def _pages(
    items: Iterator[Fallible[EpubDocument]],
    options: Optional[ExtractionOptions],
) -> Iterator[Fallible[str]]:
    for item in items:
        if isinstance(item, Err):
            yield item
            continue
        with item.value as document:
            yield from document.iter_page_texts(options)


def _pages_with_path(
    items: Iterator[Fallible[Tuple[str, EpubDocument]]],
    options: Optional[ExtractionOptions],
) -> Iterator[Fallible[Tuple[str, str]]]:
    for item in items:
        if isinstance(item, Err):
            yield item
            continue
        path, document = item.value
        with document:
            for page in document.iter_page_texts(options):
                yield page.map(lambda text: (path, text))


__all__ = [
    "EpubFileLoader",
    "EpubDocumentLoader",
    "EpubPathDocumentLoader",
    "TextLoader",
]
