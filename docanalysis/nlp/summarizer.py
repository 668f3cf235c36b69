import re
from typing import ClassVar

from docanalysis.nlp.entities import EntityExtractor
from docanalysis.nlp.models import DocumentType, EntityBag


class Summarizer:
    """Composes a short synopsis from the document type, entities and key sentences."""

    MAX_POINTS: ClassVar[int] = 3
    MIN_RELEVANT: ClassVar[int] = 2
    MAX_ENTITY_MENTIONS: ClassVar[int] = 2
    EXAMPLES_PER_MENTION: ClassVar[int] = 2

    LEAD_NAMES: ClassVar[dict[DocumentType, str]] = {
        DocumentType.GENERAL: "general document",
    }

    RELEVANCE_KEYWORDS: ClassVar[dict[DocumentType, tuple[str, ...]]] = {
        DocumentType.INVOICE: ("total", "amount", "due", "payment"),
        DocumentType.CONTRACT: ("agree", "terms", "parties", "shall"),
        DocumentType.REPORT: ("conclusion", "findings", "analysis", "summary"),
        DocumentType.RESUME: ("experience", "skills", "education", "objective"),
        DocumentType.PROPOSAL: ("propose", "solution", "offer", "recommend"),
        DocumentType.GENERAL: ("important", "key", "main", "summary"),
    }

    # (EntityBag attribute, phrase used in the summary), in mention order
    ENTITY_MENTIONS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("people", "references to people"),
        ("organizations", "organizations"),
        ("dates", "dates"),
        ("monetary", "monetary values"),
    )

    _SENTENCE_END_RE: ClassVar[re.Pattern[str]] = re.compile(r"[.!?]+")

    def __init__(self, entity_extractor: EntityExtractor | None = None) -> None:
        self._entity_extractor = entity_extractor or EntityExtractor()

    def summarize(
        self,
        text: str,
        document_type: DocumentType,
        entities: EntityBag | None = None,
    ) -> str:
        """Build the summary for *text*.

        Pass the entities already extracted for this document to avoid a
        second regex pass; they are computed here only when omitted.
        """
        type_name = self.LEAD_NAMES.get(document_type, document_type.value.lower())
        sentences = [
            s.strip() for s in self._SENTENCE_END_RE.split(text) if s.strip()
        ]
        if not sentences:
            return f"This {type_name} has no extractable text."

        points = self._select_points(sentences, document_type)
        if entities is None:
            entities = self._entity_extractor.extract(text)
        mentions = self._entity_mentions(entities)

        if mentions:
            lead = f"This {type_name} contains {', '.join(mentions)}, and includes"
        else:
            lead = f"This {type_name} includes"
        summary = f"{lead} the following key points: {'. '.join(points)}"
        return summary.rstrip(".") + "."

    def _select_points(
        self, sentences: list[str], document_type: DocumentType
    ) -> list[str]:
        keywords = self.RELEVANCE_KEYWORDS[document_type]
        relevant = [s for s in sentences if any(k in s.lower() for k in keywords)]
        if len(relevant) < self.MIN_RELEVANT:
            relevant.extend(sentences[: self.MAX_POINTS])
        return relevant[: self.MAX_POINTS]

    def _entity_mentions(self, entities: EntityBag) -> list[str]:
        mentions: list[str] = []
        for attribute, phrase in self.ENTITY_MENTIONS:
            values = getattr(entities, attribute)
            if values:
                examples = ", ".join(values[: self.EXAMPLES_PER_MENTION])
                mentions.append(f"{phrase} ({examples})")
            if len(mentions) == self.MAX_ENTITY_MENTIONS:
                break
        return mentions
