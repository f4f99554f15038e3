"""
Type definitions and dataclasses for EPUB File Loader.

This module defines data structures used throughout the library.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class TocEntry:
    """
    A single table-of-contents entry.

    Attributes:
        title: Display title of the entry
        href: Target inside the container, possibly with a fragment
        depth: Nesting level, 0 for top-level entries
    """
    title: str
    href: str
    depth: int = 0


@dataclass
class EpubInfo:
    """
    EPUB document information and metadata.

    Attributes:
        path: Path the document was opened from
        num_pages: Number of spine items
        file_size: File size in bytes
        title: Dublin Core title
        authors: Dublin Core creators
        language: Dublin Core language
        identifier: Dublin Core identifier
        toc_entries: Number of table-of-contents entries, nested ones included
    """
    path: str
    num_pages: int
    file_size: int
    title: Optional[str] = None
    authors: List[str] = field(default_factory=list)
    language: Optional[str] = None
    identifier: Optional[str] = None
    toc_entries: int = 0


@dataclass(frozen=True)
class ExtractionOptions:
    """
    Options controlling page text extraction.

    Attributes:
        encoding: Encoding used to decode page XHTML
        parser: BeautifulSoup parser name
        separator: Separator inserted between text nodes of a page
        page_separator: Separator used when joining pages of a document
    """
    encoding: str = "utf-8"
    parser: str = "html.parser"
    separator: str = "\n"
    page_separator: str = "\n\n"
