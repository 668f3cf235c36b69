from unittest.mock import MagicMock

import pytest

from docanalysis.extraction.base import BaseExtractor
from docanalysis.extraction.exceptions import ExtractionIOError
from docanalysis.extraction.fallback_adapter import FallbackAdapter
from docanalysis.extraction.models import RawInput
from docanalysis.extraction.placeholder_adapter import PlaceholderAdapter


def _raw() -> RawInput:
    return RawInput(filename="scan.pdf", payload=b"x" * 2048)


class TestPlaceholderAdapter:
    def test_names_file_and_byte_size(self) -> None:
        result = PlaceholderAdapter("pdf").extract(_raw())
        assert result == (
            "Extracted text from PDF: scan.pdf\n\n"
            "This document contains 2048 bytes of data. "
            "The content might require specialized parsing."
        )

    def test_is_deterministic(self) -> None:
        adapter = PlaceholderAdapter("DOCX")
        assert adapter.extract(_raw()) == adapter.extract(_raw())

    def test_empty_payload(self) -> None:
        result = PlaceholderAdapter("DOCX").extract(RawInput(filename="blank.docx", payload=b""))
        assert "blank.docx" in result
        assert "0 bytes" in result


class TestFallbackAdapter:
    def _make(self, primary_result: object) -> tuple[FallbackAdapter, MagicMock]:
        primary = MagicMock(spec=BaseExtractor)
        if isinstance(primary_result, Exception):
            primary.extract.side_effect = primary_result
        else:
            primary.extract.return_value = primary_result
        return FallbackAdapter(primary=primary, fallback=PlaceholderAdapter("PDF")), primary

    def test_returns_primary_text(self) -> None:
        adapter, primary = self._make("real text")
        assert adapter.extract(_raw()) == "real text"
        primary.extract.assert_called_once()

    def test_falls_back_on_extraction_error(self) -> None:
        adapter, _primary = self._make(ExtractionIOError("corrupt"))
        assert adapter.extract(_raw()).startswith("Extracted text from PDF: scan.pdf")

    def test_falls_back_on_blank_text(self) -> None:
        adapter, _primary = self._make("  \n ")
        assert "2048 bytes" in adapter.extract(_raw())

    def test_does_not_hide_unexpected_errors(self) -> None:
        adapter, _primary = self._make(KeyError("bug"))
        with pytest.raises(KeyError):
            adapter.extract(_raw())
