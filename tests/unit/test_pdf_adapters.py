import pytest

from docanalysis.extraction.base import BaseExtractor
from docanalysis.extraction.exceptions import ExtractionIOError
from docanalysis.extraction.models import RawInput
from docanalysis.extraction.pdfplumber_adapter import PdfPlumberAdapter
from docanalysis.extraction.pymupdf_adapter import PyMuPdfAdapter

ADAPTERS = [PdfPlumberAdapter, PyMuPdfAdapter]


def _raw(payload: bytes) -> RawInput:
    return RawInput(filename="report.pdf", payload=payload)


@pytest.mark.parametrize("adapter_cls", ADAPTERS)
class TestPdfAdapters:
    def test_extract_returns_text(
        self, adapter_cls: type[BaseExtractor], sample_pdf_bytes: bytes
    ) -> None:
        result = adapter_cls().extract(_raw(sample_pdf_bytes))
        assert isinstance(result, str)
        assert "Hello PDF World" in result

    def test_extract_multi_page(
        self, adapter_cls: type[BaseExtractor], multi_page_pdf_bytes: bytes
    ) -> None:
        result = adapter_cls().extract(_raw(multi_page_pdf_bytes))
        assert "Page one content" in result
        assert "Page two content" in result

    def test_extract_empty_pdf_returns_empty_string(
        self, adapter_cls: type[BaseExtractor], empty_pdf_bytes: bytes
    ) -> None:
        assert adapter_cls().extract(_raw(empty_pdf_bytes)) == ""

    def test_extract_raises_on_invalid_bytes(self, adapter_cls: type[BaseExtractor]) -> None:
        with pytest.raises(ExtractionIOError, match="report.pdf"):
            adapter_cls().extract(_raw(b"not a pdf"))

    def test_extract_result_is_stripped(
        self, adapter_cls: type[BaseExtractor], sample_pdf_bytes: bytes
    ) -> None:
        result = adapter_cls().extract(_raw(sample_pdf_bytes))
        assert result == result.strip()
