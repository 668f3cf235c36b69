from unittest.mock import patch

import pytest
import pytesseract

from docanalysis.extraction.exceptions import ExtractionIOError, ExtractionTimeoutError
from docanalysis.extraction.models import RawInput
from docanalysis.extraction.ocr_adapter import TesseractOcrAdapter

IMAGE_TO_STRING = "docanalysis.extraction.ocr_adapter.pytesseract.image_to_string"


def _raw(payload: bytes) -> RawInput:
    return RawInput(filename="scan.png", payload=payload)


class TestRecognition:
    def test_returns_tesseract_text(self, sample_png_bytes: bytes) -> None:
        with patch(IMAGE_TO_STRING, return_value="Invoice 42\n") as mock_ocr:
            result = TesseractOcrAdapter().extract(_raw(sample_png_bytes))

        assert result == "Invoice 42\n"
        mock_ocr.assert_called_once()

    def test_passes_language_and_timeout(self, sample_png_bytes: bytes) -> None:
        with patch(IMAGE_TO_STRING, return_value="") as mock_ocr:
            TesseractOcrAdapter(language="deu", timeout_seconds=7).extract(_raw(sample_png_bytes))

        _args, kwargs = mock_ocr.call_args
        assert kwargs["lang"] == "deu"
        assert kwargs["timeout"] == 7

    def test_converts_image_to_rgb(self, sample_png_bytes: bytes) -> None:
        modes: list[str] = []

        def _capture(image, **_kwargs):  # type: ignore[no-untyped-def]
            modes.append(image.mode)
            return ""

        with patch(IMAGE_TO_STRING, side_effect=_capture):
            TesseractOcrAdapter().extract(_raw(sample_png_bytes))

        assert modes == ["RGB"]


class TestFailures:
    def test_undecodable_image_raises_io_error(self) -> None:
        with pytest.raises(ExtractionIOError, match="Cannot decode image"):
            TesseractOcrAdapter().extract(_raw(b"definitely not an image"))

    def test_missing_tesseract_raises_io_error(self, sample_png_bytes: bytes) -> None:
        with patch(IMAGE_TO_STRING, side_effect=pytesseract.TesseractNotFoundError()):
            with pytest.raises(ExtractionIOError, match="not installed"):
                TesseractOcrAdapter().extract(_raw(sample_png_bytes))

    def test_tesseract_error_raises_io_error(self, sample_png_bytes: bytes) -> None:
        with patch(IMAGE_TO_STRING, side_effect=pytesseract.TesseractError(1, "bad lang")):
            with pytest.raises(ExtractionIOError, match="bad lang") as exc_info:
                TesseractOcrAdapter().extract(_raw(sample_png_bytes))
        assert not isinstance(exc_info.value, ExtractionTimeoutError)

    def test_timeout_raises_timeout_error(self, sample_png_bytes: bytes) -> None:
        with patch(IMAGE_TO_STRING, side_effect=RuntimeError("Tesseract process timeout")):
            with pytest.raises(ExtractionTimeoutError, match="exceeded 3s"):
                TesseractOcrAdapter(timeout_seconds=3).extract(_raw(sample_png_bytes))
