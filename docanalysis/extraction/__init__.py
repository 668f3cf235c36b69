from docanalysis.extraction.exceptions import (
    ExtractionError,
    ExtractionIOError,
    ExtractionTimeoutError,
    UnsupportedFormatError,
)
from docanalysis.extraction.extractor import TextExtractor
from docanalysis.extraction.factory import ExtractorFactory
from docanalysis.extraction.models import RawInput

__all__ = [
    "ExtractionError",
    "ExtractionIOError",
    "ExtractionTimeoutError",
    "ExtractorFactory",
    "RawInput",
    "TextExtractor",
    "UnsupportedFormatError",
]
