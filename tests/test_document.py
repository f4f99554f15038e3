from __future__ import annotations

from pathlib import Path

import pytest

from epub_loader.backends import EbooklibBackend
from epub_loader.document import EpubDocument
from epub_loader.exceptions import DocumentFormatError, EncodingError, PageOutOfBoundsError
from epub_loader.result import Err, Ok
from epub_loader.types import EpubInfo, ExtractionOptions


def test_document_metadata(sample_epub: Path):
    with EpubDocument(str(sample_epub)) as document:
        assert document.title == "Sample Book"
        assert document.authors == ["Jane Doe"]
        assert document.language == "en"
        assert document.identifier == "urn:test:sample"
        assert document.num_pages == 2
        assert document.file_size == sample_epub.stat().st_size


def test_document_toc(sample_epub: Path):
    with EpubDocument(str(sample_epub)) as document:
        titles = [entry.title for entry in document.toc]

    assert titles == ["Intro", "Chapter Two"]


def test_extract_text_per_page(sample_epub: Path):
    with EpubDocument(str(sample_epub)) as document:
        first = document.extract_text(0)
        second = document.extract_text(1)

    assert "Hello world" in first
    assert "Intro" in first
    assert "Second page text" in second
    assert "Hello world" not in second


def test_extract_text_out_of_bounds(sample_epub: Path):
    with EpubDocument(str(sample_epub)) as document:
        with pytest.raises(PageOutOfBoundsError):
            document.extract_text(5)


def test_read_text_joins_pages(sample_epub: Path):
    with EpubDocument(str(sample_epub)) as document:
        text = document.read_text(ExtractionOptions(page_separator="\n---\n"))

    assert text.index("Hello world") < text.index("---") < text.index("Second page text")


def test_closed_document_refuses_extraction(sample_epub: Path):
    document = EpubDocument(str(sample_epub))
    document.close()

    assert document.closed
    with pytest.raises(DocumentFormatError):
        document.extract_text(0)


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(DocumentFormatError, match="not found"):
        EpubDocument(str(tmp_path / "missing.epub"))


def test_corrupted_zip_raises(tmp_path: Path):
    broken = tmp_path / "broken.epub"
    broken.write_bytes(b"PK\x03\x04 definitely not a zip")

    with pytest.raises(DocumentFormatError):
        EpubDocument(str(broken))


def test_to_epub_info(sample_epub: Path):
    with EpubDocument(str(sample_epub)) as document:
        info = document.to_epub_info()

    assert isinstance(info, EpubInfo)
    assert info.num_pages == 2
    assert info.title == "Sample Book"
    assert info.toc_entries == 2


def test_backend_options_are_merged():
    backend = EbooklibBackend(options={"ignore_ncx": True})

    assert backend.options["ignore_ncx"] is True


def test_iter_page_texts_isolates_bad_pages(fake_backend):
    fake_backend.register(
        "mixed.epub",
        [b"<p>good one</p>", b"\xff\xfe\xfa", DocumentFormatError("missing spine item"), b"<p>good two</p>"],
    )

    with EpubDocument("mixed.epub", backend=fake_backend) as document:
        pages = list(document.iter_page_texts())

    assert pages[0] == Ok("good one")
    assert isinstance(pages[1], Err) and isinstance(pages[1].error, EncodingError)
    assert isinstance(pages[2], Err) and isinstance(pages[2].error, DocumentFormatError)
    assert pages[3] == Ok("good two")


def test_close_releases_backend_document(fake_backend):
    fake_backend.register("one.epub", [b"<p>x</p>"])

    with EpubDocument("one.epub", backend=fake_backend):
        pass

    assert fake_backend.opened[0].closed
