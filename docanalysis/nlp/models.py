from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


class DocumentType(str, Enum):
    """Closed set of document-type labels assigned by the classifier."""

    INVOICE = "Invoice"
    CONTRACT = "Contract"
    REPORT = "Report"
    RESUME = "Resume"
    PROPOSAL = "Proposal"
    GENERAL = "General"


@dataclass(frozen=True)
class EntityBag:
    """Entities found in a text, grouped by category in first-match order."""

    people: list[str] = field(default_factory=list)
    organizations: list[str] = field(default_factory=list)
    locations: list[str] = field(default_factory=list)
    dates: list[str] = field(default_factory=list)
    monetary: list[str] = field(default_factory=list)
    misc: list[str] = field(default_factory=list)

    CATEGORIES: ClassVar[tuple[str, ...]] = (
        "people", "organizations", "locations", "dates", "monetary", "misc",
    )

    def as_dict(self) -> dict[str, list[str]]:
        return {name: list(getattr(self, name)) for name in self.CATEGORIES}


@dataclass(frozen=True)
class SentimentResult:
    """Lexicon-based polarity of a text."""

    score: float = 0.0
    label: str = "neutral"  # "positive" | "negative" | "neutral"
    confidence: float = 0.0
