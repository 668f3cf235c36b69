from docanalysis.extraction.base import BaseExtractor
from docanalysis.extraction.models import RawInput


class PlaceholderAdapter(BaseExtractor):
    """Describes a binary document without parsing it.

    Used when no parser is configured for a format, and as the fallback
    when a configured parser fails.
    """

    def __init__(self, kind: str) -> None:
        self._kind = kind.upper()

    def extract(self, raw: RawInput) -> str:
        return (
            f"Extracted text from {self._kind}: {raw.filename}\n\n"
            f"This document contains {raw.size} bytes of data. "
            "The content might require specialized parsing."
        )
