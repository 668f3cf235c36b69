from abc import ABC, abstractmethod

from docanalysis.extraction.models import RawInput


class BaseExtractor(ABC):
    """Contract for all format-specific text extraction adapters."""

    @abstractmethod
    def extract(self, raw: RawInput) -> str:
        """Extract plain text from an uploaded file.

        Args:
            raw: The captured upload (filename, bytes, size).

        Returns:
            Extracted text as a single string.

        Raises:
            ExtractionIOError: if the backend cannot read the payload.
        """
