import re
from collections import Counter
from typing import ClassVar

from docanalysis.nlp.lexicons import STOP_WORDS


class KeywordRanker:
    """Ranks recurring non-trivial words by frequency."""

    MAX_KEYWORDS: ClassVar[int] = 10
    MIN_TOKEN_LENGTH: ClassVar[int] = 4

    _PUNCTUATION_RE: ClassVar[re.Pattern[str]] = re.compile(r"[^\w\s]")

    def rank(self, text: str) -> list[str]:
        """Return up to ten lowercase keywords, most frequent first.

        Ties keep the order in which the words first appear; ``Counter``
        preserves insertion order and ``most_common`` sorts stably.
        """
        tokens = self._PUNCTUATION_RE.sub(" ", text.lower()).split()
        counts = Counter(
            token
            for token in tokens
            if len(token) >= self.MIN_TOKEN_LENGTH and token not in STOP_WORDS
        )
        return [word for word, _count in counts.most_common(self.MAX_KEYWORDS)]
