class ExtractionError(Exception):
    """Base exception for all text-extraction errors."""


class UnsupportedFormatError(ExtractionError):
    """Raised when a file extension has no extraction strategy."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(f"Unsupported file format: '{extension}'")


class ExtractionIOError(ExtractionError):
    """Raised when the underlying OCR or file-read step fails."""


class ExtractionTimeoutError(ExtractionIOError):
    """Raised when extraction does not finish within the configured timeout."""
