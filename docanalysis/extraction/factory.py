from docanalysis.config.settings import Settings
from docanalysis.extraction.base import BaseExtractor
from docanalysis.extraction.docx_adapter import PythonDocxAdapter
from docanalysis.extraction.extractor import TextExtractor
from docanalysis.extraction.fallback_adapter import FallbackAdapter
from docanalysis.extraction.ocr_adapter import TesseractOcrAdapter
from docanalysis.extraction.pdfplumber_adapter import PdfPlumberAdapter
from docanalysis.extraction.placeholder_adapter import PlaceholderAdapter
from docanalysis.extraction.plain_text_adapter import PlainTextAdapter
from docanalysis.extraction.pymupdf_adapter import PyMuPdfAdapter

PLACEHOLDER_ENGINE = "placeholder"


class ExtractorFactory:
    """Creates a TextExtractor wired with the adapters chosen in settings."""

    PDF_ADAPTERS: dict[str, type[BaseExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }
    DOCX_ADAPTERS: dict[str, type[BaseExtractor]] = {
        "python-docx": PythonDocxAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> TextExtractor:
        return TextExtractor(
            image=TesseractOcrAdapter(
                language=settings.ocr_language,
                timeout_seconds=settings.ocr_timeout_seconds,
            ),
            pdf=cls._with_fallback(settings.pdf_engine, cls.PDF_ADAPTERS, "PDF"),
            word=cls._with_fallback(settings.docx_engine, cls.DOCX_ADAPTERS, "DOCX"),
            text=PlainTextAdapter(),
        )

    @staticmethod
    def _with_fallback(
        engine: str,
        adapters: dict[str, type[BaseExtractor]],
        kind: str,
    ) -> BaseExtractor:
        engine = engine.lower()
        placeholder = PlaceholderAdapter(kind)
        if engine == PLACEHOLDER_ENGINE:
            return placeholder
        adapter_cls = adapters.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown {kind} engine '{engine}'. "
                f"Choose from: {[*adapters, PLACEHOLDER_ENGINE]}"
            )
        return FallbackAdapter(primary=adapter_cls(), fallback=placeholder)
