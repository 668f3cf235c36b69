from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from docanalysis.extraction.models import RawInput
from docanalysis.nlp.models import DocumentType, EntityBag, SentimentResult


@dataclass(slots=True)
class PipelineContext:
    document_id: object
    raw_input: RawInput
    extracted_text: str = ""
    document_type: DocumentType = DocumentType.GENERAL
    entities: EntityBag = field(default_factory=EntityBag)
    keywords: list[str] = field(default_factory=list)
    summary: str = ""
    sentiment: SentimentResult = field(default_factory=SentimentResult)


class PipelineStep(ABC):
    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
