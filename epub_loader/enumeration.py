"""Candidate path enumeration from glob patterns and directories.

Both entry points fail eagerly with :class:`EnumerationError` when the source
itself cannot be enumerated, and otherwise return a lazy iterator of
``Fallible[str]`` candidates in sorted order.
"""

from __future__ import annotations

import glob
import logging
import os
import re
from typing import Iterator, Union

from .exceptions import EnumerationError
from .result import Err, Fallible, Ok

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

_SEPARATORS = re.compile(r"[\\/]")


def validate_pattern(pattern: str) -> None:
    """Reject glob patterns with unclosed classes or misplaced ``**``."""

    for component in _SEPARATORS.split(pattern):
        if "**" in component and component != "**":
            raise EnumerationError(
                f"Invalid glob pattern '{pattern}': recursive wildcards must form a whole path component."
            )

    index = 0
    while index < len(pattern):
        if pattern[index] != "[":
            index += 1
            continue

        start = index + 1
        if pattern[start:start + 1] == "!":
            start += 1
        # A ']' directly after the opening bracket is a literal member.
        if pattern[start:start + 1] == "]":
            start += 1

        close = pattern.find("]", start)
        if close == -1:
            raise EnumerationError(
                f"Invalid glob pattern '{pattern}': unclosed character class at position {index}."
            )
        index = close + 1


def iter_glob(pattern: str) -> Iterator[Fallible[str]]:
    validate_pattern(pattern)

    try:
        matches = sorted(glob.glob(pattern, recursive=True))
    except (OSError, ValueError) as exc:
        raise EnumerationError(f"Unable to expand glob pattern '{pattern}'. Error: {exc}") from exc

    LOGGER.debug("Glob %r matched %d paths", pattern, len(matches))
    return (Ok(match) for match in matches)


def iter_dir(directory: PathLike) -> Iterator[Fallible[str]]:
    try:
        with os.scandir(directory) as entries:
            listing = sorted(entries, key=lambda entry: entry.name)
    except OSError as exc:
        raise EnumerationError(f"Unable to read directory: {directory}. Error: {exc}") from exc

    LOGGER.debug("Directory %s holds %d entries", directory, len(listing))
    return (_entry_result(entry) for entry in listing)


def _entry_result(entry: "os.DirEntry[str]") -> Fallible[str]:
    try:
        entry.stat()
    except OSError as exc:
        return Err(EnumerationError(f"Unable to stat directory entry: {entry.path}. Error: {exc}"))
    return Ok(entry.path)


__all__ = ["validate_pattern", "iter_glob", "iter_dir"]
