from collections.abc import Mapping
from types import MappingProxyType

from docanalysis.extraction.base import BaseExtractor
from docanalysis.extraction.exceptions import UnsupportedFormatError
from docanalysis.extraction.models import RawInput
from docanalysis.logging.logger import Log

IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "bmp", "gif", "tiff", "webp"})
PDF_EXTENSIONS = frozenset({"pdf"})
WORD_EXTENSIONS = frozenset({"doc", "docx"})
TEXT_EXTENSIONS = frozenset({"txt", "text", "md", "markdown", "csv"})


class TextExtractor:
    """Dispatches an upload to the adapter registered for its extension."""

    def __init__(
        self,
        *,
        image: BaseExtractor,
        pdf: BaseExtractor,
        word: BaseExtractor,
        text: BaseExtractor,
    ) -> None:
        routes: dict[str, BaseExtractor] = {}
        for extensions, adapter in (
            (IMAGE_EXTENSIONS, image),
            (PDF_EXTENSIONS, pdf),
            (WORD_EXTENSIONS, word),
            (TEXT_EXTENSIONS, text),
        ):
            routes.update(dict.fromkeys(extensions, adapter))
        self._routes: Mapping[str, BaseExtractor] = MappingProxyType(routes)

    @property
    def supported_extensions(self) -> frozenset[str]:
        return frozenset(self._routes)

    def extract(self, raw: RawInput) -> str:
        """Extract plain text from *raw* using the adapter for its extension.

        Raises:
            UnsupportedFormatError: if no adapter handles the extension.
            ExtractionIOError: if the adapter's backend fails.
        """
        extension = raw.extension
        adapter = self._routes.get(extension)
        if adapter is None:
            raise UnsupportedFormatError(extension)
        Log.debug(
            f"Extracting {raw.filename} with {type(adapter).__name__}",
            size=raw.size,
        )
        return adapter.extract(raw)
