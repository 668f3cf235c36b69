from typing import ClassVar

from docanalysis.nlp.models import DocumentType


class TagGenerator:
    """Derives the tag set stored alongside a document record."""

    TYPE_TAGS: ClassVar[dict[DocumentType, tuple[str, ...]]] = {
        DocumentType.INVOICE: ("invoice", "payment"),
        DocumentType.CONTRACT: ("legal", "agreement"),
        DocumentType.REPORT: ("report",),
        DocumentType.RESUME: ("resume", "cv"),
        DocumentType.PROPOSAL: ("proposal",),
        DocumentType.GENERAL: (),
    }

    # document type -> (tag, substrings that trigger it)
    CONDITIONAL_TAGS: ClassVar[dict[DocumentType, tuple[tuple[str, tuple[str, ...]], ...]]] = {
        DocumentType.INVOICE: (("tax", ("tax",)),),
        DocumentType.CONTRACT: (("confidential", ("confidential",)),),
        DocumentType.REPORT: (
            ("financial", ("financial",)),
            ("quarterly", ("quarterly", "q1", "q2", "q3", "q4")),
        ),
        DocumentType.RESUME: (("professional", ("experience",)),),
        DocumentType.PROPOSAL: (("business", ("business",)),),
        DocumentType.GENERAL: (),
    }

    COMMON_TAGS: ClassVar[tuple[str, ...]] = ("urgent", "confidential", "draft")

    def generate_tags(self, text: str, document_type: DocumentType) -> list[str]:
        """Return deduplicated tags, seed label first."""
        text_lower = text.lower()
        tags = [document_type.value.lower(), *self.TYPE_TAGS[document_type]]
        for tag, triggers in self.CONDITIONAL_TAGS[document_type]:
            if any(trigger in text_lower for trigger in triggers):
                tags.append(tag)
        tags.extend(tag for tag in self.COMMON_TAGS if tag in text_lower)
        return list(dict.fromkeys(tags))
