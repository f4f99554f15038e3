"""XHTML page to plain text conversion."""

from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup

from .exceptions import EncodingError
from .types import ExtractionOptions


def decode_content(raw: bytes, encoding: str = "utf-8", *, source: str = "") -> str:
    """Strictly decode page bytes, raising :class:`EncodingError` on invalid input."""

    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as exc:
        where = f" in {source}" if source else ""
        raise EncodingError(f"{encoding} conversion error{where}: {exc}") from exc
    except LookupError as exc:
        raise EncodingError(f"Unknown encoding '{encoding}'") from exc


def html_to_text(html: str, options: Optional[ExtractionOptions] = None) -> str:
    """Return the visible text of an XHTML page, one non-blank line per text block."""

    options = options or ExtractionOptions()
    soup = BeautifulSoup(html, options.parser)
    for tag in soup(["script", "style", "head"]):
        tag.decompose()

    text = soup.get_text(separator=options.separator)
    lines = [line.strip() for line in text.splitlines()]
    return "\n".join(line for line in lines if line)


__all__ = ["decode_content", "html_to_text"]
