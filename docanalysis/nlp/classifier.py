from dataclasses import dataclass
from typing import ClassVar

from docanalysis.nlp.models import DocumentType


@dataclass(frozen=True)
class _Rule:
    """One step of the classification cascade."""

    label: DocumentType
    keywords: tuple[str, ...]

    def matches(self, text: str, filename: str) -> bool:
        return any(k in text or k in filename for k in self.keywords)


class DocumentClassifier:
    """Assigns a document-type label from lexical signals in text and filename.

    Rules are evaluated in order and the first match wins, so a text that
    mentions both an invoice and an agreement is an Invoice. Every keyword
    is looked up in the text and in the filename alike.
    """

    RULES: ClassVar[tuple[_Rule, ...]] = (
        _Rule(
            DocumentType.INVOICE,
            ("invoice", "bill to", "payment due", "total amount", "bill"),
        ),
        _Rule(
            DocumentType.CONTRACT,
            ("agreement", "contract", "terms and conditions", "parties", "hereby agree"),
        ),
        _Rule(
            DocumentType.REPORT,
            ("report", "analysis", "findings", "conclusion"),
        ),
        _Rule(
            DocumentType.RESUME,
            ("resume", "cv", "curriculum vitae", "experience", "education", "skills"),
        ),
        _Rule(
            DocumentType.PROPOSAL,
            ("proposal", "proposed", "solution"),
        ),
    )

    def classify(self, text: str, filename: str = "") -> DocumentType:
        text_lower = text.lower()
        filename_lower = filename.lower()
        for rule in self.RULES:
            if rule.matches(text_lower, filename_lower):
                return rule.label
        return DocumentType.GENERAL
