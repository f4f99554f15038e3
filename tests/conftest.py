from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

# Ensure the project root is importable when tests are executed without the
# package being installed.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest
from ebooklib import epub

from epub_loader.backends.base import BackendDocument
from epub_loader.exceptions import DocumentFormatError

DEFAULT_CHAPTERS: Tuple[Tuple[str, str], ...] = (
    ("Intro", "<p>Hello world</p>"),
    ("Chapter Two", "<p>Second page text</p>"),
)


def write_epub(
    path: Path,
    *,
    title: str = "Sample Book",
    author: str = "Jane Doe",
    chapters: Sequence[Tuple[str, str]] = DEFAULT_CHAPTERS,
) -> Path:
    book = epub.EpubBook()
    book.set_identifier(f"urn:test:{path.stem}")
    book.set_title(title)
    book.set_language("en")
    book.add_author(author)

    items = []
    for index, (chapter_title, body) in enumerate(chapters, start=1):
        chapter = epub.EpubHtml(title=chapter_title, file_name=f"chap_{index:02d}.xhtml", lang="en")
        chapter.content = f"<h1>{chapter_title}</h1>{body}"
        book.add_item(chapter)
        items.append(chapter)

    book.toc = [
        epub.Link(chapter.file_name, chapter.title, f"link_{index}")
        for index, chapter in enumerate(items, start=1)
    ]
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = items

    epub.write_epub(str(path), book)
    return path


@pytest.fixture()
def sample_epub(tmp_path: Path) -> Path:
    return write_epub(tmp_path / "sample.epub")


@pytest.fixture()
def library_dir(tmp_path: Path) -> Path:
    """Directory holding a valid, an invalid and another valid file."""
    library = tmp_path / "library"
    library.mkdir()
    write_epub(library / "a.epub", title="Book A")
    (library / "b.txt").write_text("not an epub", encoding="utf-8")
    write_epub(library / "c.epub", title="Book C")
    return library


@dataclass
class FakeDocument(BackendDocument):
    pages: List[object]
    closed: bool = False

    def page_content(self, index: int) -> bytes:
        page = self.pages[index]
        if isinstance(page, Exception):
            raise page
        return page

    def close(self) -> None:
        self.closed = True


@dataclass
class FakeBackend:
    """In-memory backend; pages are raw bytes or an exception to raise."""

    documents: Dict[str, List[object]] = field(default_factory=dict)
    titles: Dict[str, str] = field(default_factory=dict)
    opened: List[FakeDocument] = field(default_factory=list)
    load_calls: List[str] = field(default_factory=list)

    def register(self, path: str, pages: List[object], title: Optional[str] = None) -> str:
        self.documents[path] = pages
        if title is not None:
            self.titles[path] = title
        return path

    def load(self, epub_path: str) -> FakeDocument:
        self.load_calls.append(epub_path)
        if epub_path not in self.documents:
            raise DocumentFormatError(f"EPUB file not found: {epub_path}")
        pages = self.documents[epub_path]
        document = FakeDocument(
            path=epub_path,
            file_size=sum(len(page) for page in pages if isinstance(page, bytes)),
            page_ids=[f"page_{index}" for index in range(len(pages))],
            toc=[],
            title=self.titles.get(epub_path),
            authors=[],
            language=None,
            identifier=None,
            pages=pages,
        )
        self.opened.append(document)
        return document


@pytest.fixture()
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture()
def make_epub():
    return write_epub
