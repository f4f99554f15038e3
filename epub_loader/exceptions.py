"""
Custom exceptions for EPUB File Loader.

Per-item failures are carried inside :class:`~epub_loader.result.Err` values
rather than raised, so every class here doubles as an error value.
"""


class EpubLoaderException(Exception):
    """Base exception for all EPUB loader errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown EPUB loader error occurred."


class EnumerationError(EpubLoaderException):
    """Raised when a glob pattern or directory cannot be enumerated."""

    @property
    def default_message(self) -> str:
        return "Unable to enumerate candidate files."


class EncodingError(EpubLoaderException):
    """Raised when document content cannot be decoded to text."""

    @property
    def default_message(self) -> str:
        return "Document content is not valid text in the expected encoding."


class DocumentFormatError(EpubLoaderException):
    """Raised when an EPUB container or its page data is missing or malformed."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted EPUB file."


class PageOutOfBoundsError(DocumentFormatError):
    """Raised when a requested page index is outside the spine."""

    @property
    def default_message(self) -> str:
        return "Requested page index is out of bounds."


class LoaderConsumedError(EpubLoaderException):
    """Raised when a loader is used again after a stage transition consumed it."""

    @property
    def default_message(self) -> str:
        return "Loader has already been consumed by a previous stage."
