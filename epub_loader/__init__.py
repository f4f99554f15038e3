"""
EPUB File Loader - Lazily load EPUB files from globs and directories.

Loading is a chain of stages. Each stage offers only the operations that
make sense for the items it carries, and every item is an ``Ok`` or an
``Err`` so one bad file never stops the rest.

Quick Start:
    >>> from epub_loader import EpubFileLoader
    >>> for item in EpubFileLoader.with_dir('books/').load_with_path():
    ...     if item.is_ok:
    ...         path, document = item.value
    ...         print(path, document.title)

Main Classes:
    - EpubFileLoader: Entry stage of fallible candidate paths
    - EpubDocumentLoader / EpubPathDocumentLoader: Opened document stages
    - TextLoader: Extracted text stage
    - EpubDocument: Opened EPUB handle

Exceptions:
    - EpubLoaderException: Base exception
    - EnumerationError: Glob pattern or directory could not be enumerated
    - EncodingError: Page content is not valid text
    - DocumentFormatError: Missing, invalid or corrupted EPUB
    - PageOutOfBoundsError: Page index outside the spine
    - LoaderConsumedError: Loader reused after a transition

For CLI usage, use the 'epub-loader' command after installation.
"""

# Core classes
from epub_loader.loader import (
    EpubFileLoader,
    EpubDocumentLoader,
    EpubPathDocumentLoader,
    TextLoader,
)
from epub_loader.document import EpubDocument
from epub_loader.resolver import load, load_with_path

# Data types
from epub_loader.result import Ok, Err, Fallible
from epub_loader.types import EpubInfo, ExtractionOptions, TocEntry

# Exceptions
from epub_loader.exceptions import (
    EpubLoaderException,
    EnumerationError,
    EncodingError,
    DocumentFormatError,
    PageOutOfBoundsError,
    LoaderConsumedError,
)

# Utility functions
from epub_loader.utils import get_epub_info, validate_epub, format_file_size

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Main classes
    "EpubFileLoader",
    "EpubDocumentLoader",
    "EpubPathDocumentLoader",
    "TextLoader",
    "EpubDocument",
    "load",
    "load_with_path",
    # Data types
    "Ok",
    "Err",
    "Fallible",
    "EpubInfo",
    "ExtractionOptions",
    "TocEntry",
    # Exceptions
    "EpubLoaderException",
    "EnumerationError",
    "EncodingError",
    "DocumentFormatError",
    "PageOutOfBoundsError",
    "LoaderConsumedError",
    # Utility functions
    "get_epub_info",
    "validate_epub",
    "format_file_size",
    # Version info
    "__version__",
]
