"""Backend protocol for EPUB parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol

from ..types import TocEntry


@dataclass
class BackendDocument:
    """Represents a parsed EPUB container with backend-specific helpers."""

    path: str
    file_size: int
    page_ids: List[str]
    toc: List[TocEntry]
    title: Optional[str]
    authors: List[str]
    language: Optional[str]
    identifier: Optional[str]

    @property
    def num_pages(self) -> int:
        return len(self.page_ids)

    def page_content(self, index: int) -> bytes:
        """Return the raw XHTML bytes of the spine item at ``index``."""
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError


class EpubBackend(Protocol):
    """Protocol defining backend operations for EPUB reading."""

    def load(self, epub_path: str) -> BackendDocument:
        """Open and parse an EPUB container, raising ``DocumentFormatError`` on failure."""
