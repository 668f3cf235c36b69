from docanalysis.extraction.base import BaseExtractor
from docanalysis.extraction.models import RawInput


class PlainTextAdapter(BaseExtractor):
    """Decodes text-like uploads as UTF-8.

    Undecodable sequences become U+FFFD instead of failing the upload.
    """

    ENCODING = "utf-8"

    def extract(self, raw: RawInput) -> str:
        return raw.payload.decode(self.ENCODING, errors="replace")
