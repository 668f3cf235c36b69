from dataclasses import dataclass, field

from docanalysis.nlp.models import DocumentType, EntityBag, SentimentResult


@dataclass(frozen=True)
class AnalysisResult:
    """Everything the pipeline learned about one document."""

    extracted_text: str
    document_type: DocumentType
    entities: EntityBag = field(default_factory=EntityBag)
    keywords: list[str] = field(default_factory=list)
    summary: str = ""
    sentiment: SentimentResult = field(default_factory=SentimentResult)

    def to_payload(self) -> dict[str, object]:
        """Render the result in the shape stored on the document record."""
        return {
            "extractedText": self.extracted_text,
            "documentType": self.document_type.value,
            "entities": self.entities.as_dict(),
            "keywords": list(self.keywords),
            "summary": self.summary,
            "sentiment": {
                "score": self.sentiment.score,
                "label": self.sentiment.label,
                "confidence": self.sentiment.confidence,
            },
        }
