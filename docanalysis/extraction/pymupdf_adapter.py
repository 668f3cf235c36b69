import pymupdf

from docanalysis.extraction.base import BaseExtractor
from docanalysis.extraction.exceptions import ExtractionIOError
from docanalysis.extraction.models import RawInput


class PyMuPdfAdapter(BaseExtractor):
    """Extracts the text layer of a PDF using PyMuPDF."""

    def extract(self, raw: RawInput) -> str:
        try:
            with pymupdf.open(stream=raw.payload, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
            return "\n".join(pages).strip()
        except Exception as exc:
            raise ExtractionIOError(
                f"pymupdf could not read {raw.filename}: {exc}"
            ) from exc
