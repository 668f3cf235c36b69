import io

import pdfplumber

from docanalysis.extraction.base import BaseExtractor
from docanalysis.extraction.exceptions import ExtractionIOError
from docanalysis.extraction.models import RawInput


class PdfPlumberAdapter(BaseExtractor):
    """Extracts the text layer of a PDF using pdfplumber."""

    def extract(self, raw: RawInput) -> str:
        try:
            with pdfplumber.open(io.BytesIO(raw.payload)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return "\n".join(pages).strip()
        except Exception as exc:
            raise ExtractionIOError(
                f"pdfplumber could not read {raw.filename}: {exc}"
            ) from exc
