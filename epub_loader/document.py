"""Adapter around a backend-specific EPUB document."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional

from .backends import BackendDocument, EbooklibBackend
from .backends.base import EpubBackend
from .exceptions import DocumentFormatError, EncodingError
from .result import Err, Fallible, Ok
from .text import decode_content, html_to_text
from .types import EpubInfo, ExtractionOptions, TocEntry


class EpubDocument:
    """Opened EPUB handle owning its parsed container until :meth:`close`."""

    def __init__(
        self,
        epub_path: str,
        *,
        backend: Optional[EpubBackend] = None,
    ) -> None:
        self.path = Path(epub_path)
        self.backend: EpubBackend = backend or EbooklibBackend()
        self._document: BackendDocument = self.backend.load(str(epub_path))
        self._closed = False

    # ------------------------------------------------------------------
    # Basic document information helpers
    # ------------------------------------------------------------------
    @property
    def document(self) -> BackendDocument:
        return self._document

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def num_pages(self) -> int:
        return self._document.num_pages

    @property
    def page_ids(self) -> List[str]:
        return list(self._document.page_ids)

    @property
    def file_size(self) -> int:
        return self._document.file_size

    @property
    def title(self) -> Optional[str]:
        return self._document.title

    @property
    def authors(self) -> List[str]:
        return list(self._document.authors)

    @property
    def language(self) -> Optional[str]:
        return self._document.language

    @property
    def identifier(self) -> Optional[str]:
        return self._document.identifier

    @property
    def toc(self) -> List[TocEntry]:
        return list(self._document.toc)

    # ------------------------------------------------------------------
    # Text extraction
    # ------------------------------------------------------------------
    def extract_text(self, page_index: int, options: Optional[ExtractionOptions] = None) -> str:
        """Return the plain text of one spine page.

        Raises :class:`~epub_loader.exceptions.DocumentFormatError` for a bad
        index or missing page and :class:`~epub_loader.exceptions.EncodingError`
        when the page is not valid text.
        """
        if self._closed:
            raise DocumentFormatError(f"EPUB document is closed: {self.path}")

        options = options or ExtractionOptions()
        raw = self._document.page_content(page_index)
        html = decode_content(raw, options.encoding, source=f"{self.path} page {page_index}")
        return html_to_text(html, options)

    def iter_page_texts(self, options: Optional[ExtractionOptions] = None) -> Iterator[Fallible[str]]:
        """Lazily yield each page's text, one independent result per page."""
        for index in range(self.num_pages):
            try:
                yield Ok(self.extract_text(index, options))
            except (DocumentFormatError, EncodingError) as exc:
                yield Err(exc)

    def read_text(self, options: Optional[ExtractionOptions] = None) -> str:
        """Return the whole document's text, failing on the first bad page."""
        options = options or ExtractionOptions()
        pages = [self.extract_text(index, options) for index in range(self.num_pages)]
        return options.page_separator.join(page for page in pages if page)

    # ------------------------------------------------------------------
    # Reporting helpers
    # ------------------------------------------------------------------
    def to_epub_info(self) -> EpubInfo:
        return EpubInfo(
            path=str(self.path),
            num_pages=self.num_pages,
            file_size=self.file_size,
            title=self.title,
            authors=self.authors,
            language=self.language,
            identifier=self.identifier,
            toc_entries=len(self._document.toc),
        )

    # ------------------------------------------------------------------
    # Resource handling
    # ------------------------------------------------------------------
    def close(self) -> None:
        if not self._closed:
            self._document.close()
            self._closed = True

    def __enter__(self) -> "EpubDocument":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"{self.num_pages} pages"
        return f"EpubDocument({str(self.path)!r}, {state})"


__all__ = ["EpubDocument"]
