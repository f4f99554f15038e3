"""Backend abstractions for EPUB File Loader."""

from .base import BackendDocument, EpubBackend
from .ebooklib_backend import EbooklibBackend

__all__ = [
    "BackendDocument",
    "EpubBackend",
    "EbooklibBackend",
]
