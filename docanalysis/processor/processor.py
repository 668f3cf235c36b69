from docanalysis.config.settings import Settings
from docanalysis.extraction.exceptions import UnsupportedFormatError
from docanalysis.extraction.factory import ExtractorFactory
from docanalysis.extraction.models import RawInput
from docanalysis.logging.logger import Log
from docanalysis.nlp.classifier import DocumentClassifier
from docanalysis.nlp.entities import EntityExtractor
from docanalysis.nlp.keywords import KeywordRanker
from docanalysis.nlp.models import DocumentType
from docanalysis.nlp.sentiment import SentimentScorer
from docanalysis.nlp.summarizer import Summarizer
from docanalysis.nlp.tags import TagGenerator
from docanalysis.processor.exceptions import AnalysisFailedError
from docanalysis.processor.models import AnalysisResult
from docanalysis.processor.pipeline import PipelineContext, PipelineStep
from docanalysis.processor.steps import (
    ClassifyStep,
    ExtractEntitiesStep,
    ExtractTextStep,
    RankKeywordsStep,
    ScoreSentimentStep,
    SummarizeStep,
)


class Processor:
    """Orchestrates the document analysis pipeline.

    Pipeline: extract -> classify -> entities -> keywords -> sentiment -> summarize.
    Nothing is persisted here; the caller stores the returned result.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        tag_generator: TagGenerator,
    ) -> None:
        self._steps = steps
        self._tag_generator = tag_generator

    def analyze(self, raw_input: RawInput, document_id: object) -> AnalysisResult:
        """Run every stage for one upload and assemble the result.

        Raises:
            UnsupportedFormatError: if the file extension has no extractor.
            AnalysisFailedError: if any other stage fails; chained to the cause.
        """
        Log.info(
            f"Analyzing document {document_id}",
            filename=raw_input.filename,
            size=raw_input.size,
        )
        context = PipelineContext(document_id=document_id, raw_input=raw_input)
        for step in self._steps:
            context = self._run_step(step, context)

        return AnalysisResult(
            extracted_text=context.extracted_text,
            document_type=context.document_type,
            entities=context.entities,
            keywords=context.keywords,
            summary=context.summary,
            sentiment=context.sentiment,
        )

    def generate_tags(self, text: str, document_type: DocumentType | str) -> list[str]:
        """Compute the tag set persisted on the document record."""
        return self._tag_generator.generate_tags(text, DocumentType(document_type))

    @staticmethod
    def _run_step(step: PipelineStep, context: PipelineContext) -> PipelineContext:
        try:
            return step.run(context)
        except UnsupportedFormatError as exc:
            Log.warning(
                f"Document {context.document_id} rejected: {exc}",
                extension=exc.extension,
            )
            raise
        except Exception as exc:
            Log.error(f"Document {context.document_id} failed in {step.name}: {exc}")
            raise AnalysisFailedError(context.document_id, step.name, exc) from exc


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all stages wired from settings."""
    text_extractor = ExtractorFactory.create(settings)
    entity_extractor = EntityExtractor()
    steps: list[PipelineStep] = [
        ExtractTextStep(text_extractor, timeout_seconds=settings.extraction_timeout_seconds),
        ClassifyStep(DocumentClassifier()),
        ExtractEntitiesStep(entity_extractor),
        RankKeywordsStep(KeywordRanker()),
        ScoreSentimentStep(SentimentScorer()),
        SummarizeStep(Summarizer(entity_extractor)),
    ]
    return Processor(steps=steps, tag_generator=TagGenerator())
