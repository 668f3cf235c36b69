from docanalysis.extraction.base import BaseExtractor
from docanalysis.extraction.exceptions import ExtractionError
from docanalysis.extraction.models import RawInput
from docanalysis.logging.logger import Log


class FallbackAdapter(BaseExtractor):
    """Tries a primary parser and degrades to a fallback on failure or empty text."""

    def __init__(self, primary: BaseExtractor, fallback: BaseExtractor) -> None:
        self._primary = primary
        self._fallback = fallback

    def extract(self, raw: RawInput) -> str:
        try:
            text = self._primary.extract(raw)
        except ExtractionError as exc:
            Log.warning(
                f"{type(self._primary).__name__} failed, using fallback: {exc}",
                filename=raw.filename,
            )
            return self._fallback.extract(raw)
        if not text.strip():
            Log.warning(
                f"{type(self._primary).__name__} found no text, using fallback",
                filename=raw.filename,
            )
            return self._fallback.extract(raw)
        return text
