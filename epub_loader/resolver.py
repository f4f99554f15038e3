"""Open candidate paths as EPUB documents without raising per-file errors.

:func:`load` and :func:`load_with_path` accept a bare path or a value that is
already fallible. An ``Err`` input is returned as-is, an ``Ok`` input is
unwrapped and opened, so the same resolver serves single paths and the output
of enumeration alike.
"""

from __future__ import annotations

import logging
import os
from functools import singledispatch
from typing import Optional, Tuple

from .backends.base import EpubBackend
from .document import EpubDocument
from .exceptions import EpubLoaderException
from .result import Err, Fallible, Ok

LOGGER = logging.getLogger(__name__)


def _open(source, backend: Optional[EpubBackend]) -> Fallible[EpubDocument]:
    path = os.fspath(source)
    LOGGER.debug("Opening %s", path)
    try:
        return Ok(EpubDocument(path, backend=backend))
    except EpubLoaderException as exc:
        LOGGER.debug("Failed to open %s: %s", path, exc)
        return Err(exc)


@singledispatch
def load(source, backend: Optional[EpubBackend] = None) -> Fallible[EpubDocument]:
    """Open ``source`` (a path) and return the document or the classified error."""
    return _open(source, backend)


@load.register
def _(source: Ok, backend: Optional[EpubBackend] = None) -> Fallible[EpubDocument]:
    return load(source.value, backend)


@load.register
def _(source: Err, backend: Optional[EpubBackend] = None) -> Fallible[EpubDocument]:
    return source


@singledispatch
def load_with_path(source, backend: Optional[EpubBackend] = None) -> Fallible[Tuple[object, EpubDocument]]:
    """Like :func:`load`, pairing the document with the caller's original path value."""
    return _open(source, backend).map(lambda document: (source, document))


@load_with_path.register
def _(source: Ok, backend: Optional[EpubBackend] = None) -> Fallible[Tuple[object, EpubDocument]]:
    return load_with_path(source.value, backend)


@load_with_path.register
def _(source: Err, backend: Optional[EpubBackend] = None) -> Fallible[Tuple[object, EpubDocument]]:
    return source


__all__ = ["load", "load_with_path"]
