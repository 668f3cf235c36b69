import threading
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeoutError

from docanalysis.extraction.exceptions import ExtractionTimeoutError
from docanalysis.extraction.extractor import TextExtractor
from docanalysis.extraction.models import RawInput
from docanalysis.logging.logger import Log
from docanalysis.nlp.classifier import DocumentClassifier
from docanalysis.nlp.entities import EntityExtractor
from docanalysis.nlp.keywords import KeywordRanker
from docanalysis.nlp.sentiment import SentimentScorer
from docanalysis.nlp.summarizer import Summarizer
from docanalysis.processor.pipeline import PipelineContext, PipelineStep


class ExtractTextStep(PipelineStep):
    """Runs the text extractor, bounded by an optional timeout.

    With a positive timeout the extraction runs in a daemon thread; on expiry
    the step raises and abandons the thread, which cannot delay interpreter
    exit.
    """

    def __init__(self, text_extractor: TextExtractor, timeout_seconds: float = 0) -> None:
        self._text_extractor = text_extractor
        self._timeout_seconds = timeout_seconds

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted_text = self._extract(context.raw_input)
        Log.info(
            f"Extracted {len(context.extracted_text)} chars from {context.raw_input.filename}",
            document_id=context.document_id,
        )
        return context

    def _extract(self, raw: RawInput) -> str:
        if self._timeout_seconds <= 0:
            return self._text_extractor.extract(raw)
        future: Future[str] = Future()

        def _target() -> None:
            future.set_running_or_notify_cancel()
            try:
                future.set_result(self._text_extractor.extract(raw))
            except Exception as exc:
                future.set_exception(exc)

        threading.Thread(target=_target, name=f"extract-{raw.filename}", daemon=True).start()
        try:
            return future.result(timeout=self._timeout_seconds)
        except FutureTimeoutError as exc:
            raise ExtractionTimeoutError(
                f"Extraction of {raw.filename} exceeded {self._timeout_seconds}s"
            ) from exc


class ClassifyStep(PipelineStep):
    def __init__(self, classifier: DocumentClassifier) -> None:
        self._classifier = classifier

    def run(self, context: PipelineContext) -> PipelineContext:
        context.document_type = self._classifier.classify(
            context.extracted_text, context.raw_input.filename
        )
        Log.info(
            f"Classified document {context.document_id} as {context.document_type.value}"
        )
        return context


class ExtractEntitiesStep(PipelineStep):
    def __init__(self, entity_extractor: EntityExtractor) -> None:
        self._entity_extractor = entity_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.entities = self._entity_extractor.extract(context.extracted_text)
        Log.debug(
            f"Entities for document {context.document_id}",
            **{name: len(values) for name, values in context.entities.as_dict().items()},
        )
        return context


class RankKeywordsStep(PipelineStep):
    def __init__(self, keyword_ranker: KeywordRanker) -> None:
        self._keyword_ranker = keyword_ranker

    def run(self, context: PipelineContext) -> PipelineContext:
        context.keywords = self._keyword_ranker.rank(context.extracted_text)
        Log.debug(f"Keywords for document {context.document_id}: {context.keywords}")
        return context


class ScoreSentimentStep(PipelineStep):
    def __init__(self, sentiment_scorer: SentimentScorer) -> None:
        self._sentiment_scorer = sentiment_scorer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.sentiment = self._sentiment_scorer.score(context.extracted_text)
        Log.debug(
            f"Sentiment for document {context.document_id}: {context.sentiment.label}",
            score=round(context.sentiment.score, 3),
        )
        return context


class SummarizeStep(PipelineStep):
    """Summarizes using the type and entities already on the context."""

    def __init__(self, summarizer: Summarizer) -> None:
        self._summarizer = summarizer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.summary = self._summarizer.summarize(
            context.extracted_text,
            context.document_type,
            entities=context.entities,
        )
        return context
