import re
from typing import ClassVar

from docanalysis.nlp.lexicons import NEGATIVE_WORDS, POSITIVE_WORDS
from docanalysis.nlp.models import SentimentResult


class SentimentScorer:
    """Lexicon-based polarity scoring.

    score      = (positive - negative) / (positive + negative), or 0 without hits
    label      = positive above +0.1, negative below -0.1, neutral otherwise
    confidence = the stronger of |score| * 1.5 and hits / 20, each capped at 0.9
    """

    LABEL_THRESHOLD: ClassVar[float] = 0.1
    CONFIDENCE_CAP: ClassVar[float] = 0.9
    SCORE_WEIGHT: ClassVar[float] = 1.5
    SATURATING_HITS: ClassVar[int] = 20

    _WORD_SPLIT_RE: ClassVar[re.Pattern[str]] = re.compile(r"\W+")

    def score(self, text: str) -> SentimentResult:
        positive = negative = 0
        for word in self._WORD_SPLIT_RE.split(text.lower()):
            if word in POSITIVE_WORDS:
                positive += 1
            elif word in NEGATIVE_WORDS:
                negative += 1

        total = positive + negative
        score = (positive - negative) / total if total else 0.0
        return SentimentResult(
            score=score,
            label=self._label(score),
            confidence=self._confidence(score, total),
        )

    def _label(self, score: float) -> str:
        if score > self.LABEL_THRESHOLD:
            return "positive"
        if score < -self.LABEL_THRESHOLD:
            return "negative"
        return "neutral"

    def _confidence(self, score: float, total: int) -> float:
        from_score = min(abs(score) * self.SCORE_WEIGHT, self.CONFIDENCE_CAP)
        from_count = min(total / self.SATURATING_HITS, self.CONFIDENCE_CAP)
        return max(from_score, from_count)
