import io

import docx

from docanalysis.extraction.base import BaseExtractor
from docanalysis.extraction.exceptions import ExtractionIOError
from docanalysis.extraction.models import RawInput


class PythonDocxAdapter(BaseExtractor):
    """Extracts paragraphs and table rows from a Word document via python-docx.

    Only the OOXML (.docx) container is readable; legacy binary .doc files
    fail here and are left to the placeholder fallback.
    """

    def extract(self, raw: RawInput) -> str:
        try:
            document = docx.Document(io.BytesIO(raw.payload))
        except Exception as exc:
            raise ExtractionIOError(
                f"python-docx could not read {raw.filename}: {exc}"
            ) from exc

        blocks = [p.text for p in document.paragraphs if p.text.strip()]
        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    blocks.append(" | ".join(cells))
        return "\n".join(blocks).strip()
