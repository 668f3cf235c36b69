import io

import pytesseract
from PIL import Image, UnidentifiedImageError

from docanalysis.extraction.base import BaseExtractor
from docanalysis.extraction.exceptions import ExtractionIOError, ExtractionTimeoutError
from docanalysis.extraction.models import RawInput


class TesseractOcrAdapter(BaseExtractor):
    """Runs Tesseract OCR over an image payload.

    The recognized text is returned as-is; Tesseract's confidence data is
    not requested.
    """

    def __init__(self, language: str = "eng", timeout_seconds: int = 30) -> None:
        self._language = language
        self._timeout_seconds = timeout_seconds

    def extract(self, raw: RawInput) -> str:
        image = self._open_image(raw)
        try:
            text: str = pytesseract.image_to_string(
                image,
                lang=self._language,
                timeout=self._timeout_seconds,
            )
        except pytesseract.TesseractNotFoundError as exc:
            raise ExtractionIOError(f"Tesseract is not installed: {exc}") from exc
        except pytesseract.TesseractError as exc:
            raise ExtractionIOError(
                f"Tesseract failed on {raw.filename}: {exc.message}"
            ) from exc
        except RuntimeError as exc:
            # pytesseract signals a killed subprocess with a bare RuntimeError
            raise ExtractionTimeoutError(
                f"OCR of {raw.filename} exceeded {self._timeout_seconds}s"
            ) from exc
        finally:
            image.close()
        return text

    @staticmethod
    def _open_image(raw: RawInput) -> Image.Image:
        try:
            image = Image.open(io.BytesIO(raw.payload))
            image.load()
        except (UnidentifiedImageError, OSError) as exc:
            raise ExtractionIOError(f"Cannot decode image {raw.filename}: {exc}") from exc
        if image.mode != "RGB":
            converted = image.convert("RGB")
            image.close()
            return converted
        return image
