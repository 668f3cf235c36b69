import re
from typing import ClassVar

from docanalysis.nlp.lexicons import CORPORATE_SUFFIXES, MONTH_PREFIXES
from docanalysis.nlp.models import EntityBag

_CAPITALIZED = r"[A-Z][a-z]+"


def _alternation(tokens: tuple[str, ...]) -> str:
    # Longest first so "Corporation" is not cut short at "Corp".
    ordered = sorted(tokens, key=len, reverse=True)
    return "|".join(re.escape(token) for token in ordered)


class EntityExtractor:
    """Pattern-based extraction of people, organizations, places, dates and amounts.

    Matching is capitalization-sensitive and English-oriented. Each category
    keeps at most ``MAX_PER_CATEGORY`` unique matches in first-seen order; a
    span may land in several categories.
    """

    MAX_PER_CATEGORY: ClassVar[int] = 5

    PATTERNS: ClassVar[dict[str, re.Pattern[str]]] = {
        "people": re.compile(rf"{_CAPITALIZED} {_CAPITALIZED}"),
        "organizations": re.compile(
            rf"{_CAPITALIZED} (?:{_alternation(CORPORATE_SUFFIXES)})"
        ),
        "locations": re.compile(
            rf"{_CAPITALIZED}, [A-Z]{{2}}|{_CAPITALIZED}, {_CAPITALIZED}"
        ),
        "dates": re.compile(
            rf"(?:{'|'.join(MONTH_PREFIXES)})[a-z]* \d{{1,2}},? \d{{4}}"
            r"|\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4}"
        ),
        "monetary": re.compile(
            r"\$\d{1,3}(?:,\d{3})*(?:\.\d{2})?"
            r"|\d{1,3}(?:,\d{3})*(?:\.\d{2})? (?:dollars|USD)"
        ),
        "misc": re.compile(
            rf"Project {_CAPITALIZED}|Version \d+\.\d+"
            rf"|{_CAPITALIZED} {_CAPITALIZED} {_CAPITALIZED}"
        ),
    }

    def extract(self, text: str) -> EntityBag:
        found = {
            category: self._unique_matches(pattern, text)
            for category, pattern in self.PATTERNS.items()
        }
        return EntityBag(**found)

    def _unique_matches(self, pattern: re.Pattern[str], text: str) -> list[str]:
        seen: dict[str, None] = {}
        for match in pattern.finditer(text):
            seen.setdefault(match.group(0), None)
            if len(seen) == self.MAX_PER_CATEGORY:
                break
        return list(seen)
