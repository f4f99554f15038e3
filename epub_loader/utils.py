"""Utility functions for EPUB operations."""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional, Tuple

from .backends.base import EpubBackend
from .document import EpubDocument
from .exceptions import EpubLoaderException
from .types import EpubInfo


def configure_logging(level: int = logging.INFO) -> None:
    """Configure package-wide logging."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@contextmanager
def time_block(logger: logging.Logger, message: str) -> Iterator[None]:
    """Context manager that logs the execution time of a code block."""
    start = datetime.now(tz=timezone.utc)
    logger.debug("Starting %s", message)
    try:
        yield
    finally:
        elapsed = (datetime.now(tz=timezone.utc) - start).total_seconds()
        logger.info("%s completed in %.2fs", message, elapsed)


def get_epub_info(epub_path: str, *, backend: Optional[EpubBackend] = None) -> EpubInfo:
    """Return information about an EPUB document using :class:`EpubInfo`."""

    with EpubDocument(epub_path, backend=backend) as document:
        return document.to_epub_info()


def validate_epub(epub_path: str, *, backend: Optional[EpubBackend] = None) -> Tuple[bool, str]:
    """Perform lightweight validation of an EPUB file."""

    if not os.path.exists(epub_path):
        return False, f"File not found: {epub_path}"

    if not os.path.isfile(epub_path):
        return False, f"Path is not a file: {epub_path}"

    if not os.access(epub_path, os.R_OK):
        return False, f"Cannot read file (permission denied): {epub_path}"

    try:
        with EpubDocument(epub_path, backend=backend) as document:
            if document.num_pages == 0:
                return False, f"EPUB has no spine items: {epub_path}"
        return True, ""
    except EpubLoaderException as exc:
        return False, str(exc)


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500 KB")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"
