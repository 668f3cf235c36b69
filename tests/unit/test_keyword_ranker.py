from docanalysis.nlp.keywords import KeywordRanker


class TestKeywordRanker:
    def test_orders_by_frequency(self) -> None:
        result = KeywordRanker().rank("Plan review budget. Budget REVIEW budget!")
        assert result == ["budget", "review", "plan"]

    def test_ties_keep_first_appearance_order(self) -> None:
        assert KeywordRanker().rank("zeta alpha mango") == ["zeta", "alpha", "mango"]

    def test_drops_short_tokens_and_stop_words(self) -> None:
        assert KeywordRanker().rank("These cats and those dogs ran") == ["cats", "dogs"]

    def test_punctuation_splits_tokens(self) -> None:
        assert KeywordRanker().rank("report's e-mail") == ["report", "mail"]

    def test_returns_at_most_ten_unique_keywords(self) -> None:
        words = [f"word{letter}" for letter in "abcdefghijkl"]
        result = KeywordRanker().rank(" ".join(words * 2))
        assert result == words[:10]
        assert len(set(result)) == len(result)

    def test_keywords_are_lowercase(self) -> None:
        assert KeywordRanker().rank("Invoice INVOICE") == ["invoice"]

    def test_empty_text(self) -> None:
        assert KeywordRanker().rank("") == []
