"""Process-wide word lists used by the heuristic analysis stages."""

STOP_WORDS: frozenset[str] = frozenset({
    "a", "an", "the", "and", "or", "but", "if", "because", "as", "what",
    "which", "this", "that", "these", "those", "then", "just", "so", "than",
    "such", "both", "through", "about", "for", "is", "of", "while", "during",
    "to", "from", "in", "out", "on", "off", "over", "under", "again", "further",
    "once", "here", "there", "when", "where", "why", "how", "all", "any",
    "each", "few", "more", "most", "other", "some", "no", "nor",
    "not", "only", "own", "same", "too", "very", "can", "will",
    "should", "now",
})

POSITIVE_WORDS: frozenset[str] = frozenset({
    "good", "great", "excellent", "outstanding", "amazing", "wonderful", "fantastic",
    "positive", "success", "successful", "benefit", "beneficial", "advantage",
    "profit", "profitable", "gain", "improve", "improvement", "increase",
    "happy", "pleased", "satisfied", "satisfaction", "enjoy", "enjoyable",
    "recommend", "recommended", "approve", "approved", "agree", "agreed",
})

NEGATIVE_WORDS: frozenset[str] = frozenset({
    "bad", "poor", "terrible", "awful", "horrible", "disappointing", "disappointed",
    "negative", "failure", "fail", "failed", "problem", "issue", "concern",
    "loss", "lose", "decrease", "decline", "reduce", "reduction",
    "unhappy", "dissatisfied", "dissatisfaction", "dislike", "hate",
    "reject", "rejected", "deny", "denied", "disagree", "disagreed",
})

CORPORATE_SUFFIXES: tuple[str, ...] = (
    "Inc", "LLC", "Corp", "Corporation", "Company", "Co.", "Ltd",
)

MONTH_PREFIXES: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
