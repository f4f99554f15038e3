"""ebooklib backend implementation for EPUB File Loader."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ebooklib import epub

from ..exceptions import DocumentFormatError, PageOutOfBoundsError
from ..types import TocEntry
from .base import BackendDocument, EpubBackend

LOGGER = logging.getLogger(__name__)

DEFAULT_READER_OPTIONS: Dict[str, Any] = {"ignore_ncx": False}


@dataclass
class EbooklibDocument(BackendDocument):
    book: Optional[epub.EpubBook]

    def page_content(self, index: int) -> bytes:
        if self.book is None:
            raise DocumentFormatError(f"EPUB document is closed: {self.path}")
        if index < 0 or index >= self.num_pages:
            raise PageOutOfBoundsError(
                f"Page index {index} is out of bounds for {self.path} ({self.num_pages} pages)."
            )

        idref = self.page_ids[index]
        item = self.book.get_item_with_id(idref)
        if item is None:
            raise DocumentFormatError(
                f"Spine item '{idref}' is missing from the manifest of {self.path}."
            )
        return item.get_content()

    def close(self) -> None:
        self.book = None


def _first_metadata(book: epub.EpubBook, name: str) -> Optional[str]:
    values = book.get_metadata("DC", name)
    if not values:
        return None
    value = values[0][0]
    return str(value) if value is not None else None


def _flatten_toc(entries: Iterable[Any], depth: int = 0) -> List[TocEntry]:
    flattened: List[TocEntry] = []
    for entry in entries:
        if isinstance(entry, (tuple, list)):
            # (Section, [children]) pairs
            section = entry[0]
            children = entry[1] if len(entry) > 1 else []
            flattened.extend(_flatten_toc([section], depth))
            flattened.extend(_flatten_toc(children, depth + 1))
            continue

        title = getattr(entry, "title", None) or ""
        href = getattr(entry, "href", None) or getattr(entry, "file_name", None) or ""
        flattened.append(TocEntry(title=str(title), href=str(href), depth=depth))
    return flattened


class EbooklibBackend(EpubBackend):
    """Backend implementation that uses `ebooklib` under the hood."""

    def __init__(self, options: Optional[Dict[str, Any]] = None) -> None:
        self.options: Dict[str, Any] = dict(DEFAULT_READER_OPTIONS)
        if options:
            self.options.update(options)

    def load(self, epub_path: str) -> EbooklibDocument:
        path = Path(epub_path)
        if not path.exists() or not path.is_file():
            raise DocumentFormatError(f"EPUB file not found: {epub_path}")

        try:
            file_size = path.stat().st_size
        except OSError as exc:
            raise DocumentFormatError(f"Unable to read EPUB file: {epub_path}. Error: {exc}") from exc

        try:
            book = epub.read_epub(str(path), options=dict(self.options))
        except epub.EpubException as exc:
            raise DocumentFormatError(f"Corrupted or invalid EPUB file: {epub_path}. Error: {exc}") from exc
        except Exception as exc:
            raise DocumentFormatError(f"Unexpected error reading EPUB: {epub_path}. Error: {exc}") from exc

        page_ids = [idref for idref, _linear in book.spine]
        LOGGER.debug("Parsed %s: %d spine items", epub_path, len(page_ids))

        toc = book.toc
        if not isinstance(toc, (list, tuple)):
            # An NCX with an empty navMap parses to a single bare Link.
            toc = [toc] if getattr(toc, "href", "") else []

        return EbooklibDocument(
            path=str(epub_path),
            file_size=file_size,
            page_ids=page_ids,
            toc=_flatten_toc(toc),
            title=_first_metadata(book, "title"),
            authors=[str(value) for value, _attrs in book.get_metadata("DC", "creator")],
            language=_first_metadata(book, "language"),
            identifier=_first_metadata(book, "identifier"),
            book=book,
        )
