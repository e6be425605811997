"""
Tests for tokenization, stop words and keyword density.
"""

import pytest

from seo_toolkit.content import STOP_WORDS, analyze_keywords, is_stop_word, tokenize


class TestTokenizer:
    """Test the tokenizer and stop-word filter."""

    def test_lowercases_and_strips_punctuation(self):
        assert tokenize("The Cat, sat! On: the MAT.") == ["the", "cat", "sat", "on", "the", "mat"]

    def test_keeps_internal_hyphens_and_apostrophes(self):
        assert tokenize("state-of-the-art don't") == ["state-of-the-art", "don't"]

    def test_drops_single_character_tokens(self):
        assert tokenize("a b c dog 7 42") == ["dog", "42"]

    def test_empty_text(self):
        assert tokenize("") == []
        assert tokenize("!!! ...") == []

    def test_stop_word_membership(self):
        assert is_stop_word("the")
        assert is_stop_word("also")
        assert not is_stop_word("cat")

    def test_stop_word_list_size(self):
        assert 80 <= len(STOP_WORDS) <= 100


class TestKeywordDensity:
    """Test keyword and n-gram density analysis."""

    def test_end_to_end_example(self):
        """Punctuation-only tokens are not counted as words."""
        result = analyze_keywords("the cat sat on the mat. the cat ran.", "cat")
        assert result["totalWords"] == 9
        assert result["uniqueWords"] == 6
        assert result["targetKeyword"] == {"keyword": "cat", "count": 2, "density": "22.22%"}

    def test_empty_input_returns_error(self):
        assert analyze_keywords("") == {"error": "No words found in the provided text."}
        assert analyze_keywords("a . ! I") == {"error": "No words found in the provided text."}

    def test_single_words_exclude_stop_words(self):
        result = analyze_keywords("the the the and of cat cat dog")
        words = [w["word"] for w in result["topSingleWords"]]
        assert words == ["cat", "dog"]
        assert not any(is_stop_word(w) for w in words)

    def test_ties_keep_first_seen_order(self):
        result = analyze_keywords("zebra apple mango apple zebra mango")
        assert [w["word"] for w in result["topSingleWords"]] == ["zebra", "apple", "mango"]

    def test_bigram_ties_keep_first_seen_order(self):
        result = analyze_keywords("red car blue sky red car blue sky")
        assert [(b["phrase"], b["count"]) for b in result["topBigrams"]] == [
            ("red car", 2), ("car blue", 2), ("blue sky", 2), ("sky red", 1),
        ]

    def test_top_single_words_capped_at_fifteen(self):
        text = " ".join(f"word{i}" for i in range(30))
        assert len(analyze_keywords(text)["topSingleWords"]) == 15

    def test_ngrams_skip_windows_with_stop_words(self):
        result = analyze_keywords("seo tools for seo tools and seo tools rock")
        bigrams = {b["phrase"]: b["count"] for b in result["topBigrams"]}
        assert bigrams == {"seo tools": 3, "tools rock": 1}
        for entry in result["topBigrams"] + result["topTrigrams"]:
            assert not any(is_stop_word(t) for t in entry["phrase"].split())

    def test_trigrams(self):
        result = analyze_keywords("fast seo tools fast seo tools")
        trigrams = {t["phrase"]: t["count"] for t in result["topTrigrams"]}
        assert trigrams["fast seo tools"] == 2

    def test_window_larger_than_stream(self):
        result = analyze_keywords("keyword")
        assert result["topBigrams"] == []
        assert result["topTrigrams"] == []

    def test_density_format(self):
        result = analyze_keywords("alpha beta alpha")
        assert result["topSingleWords"][0] == {"word": "alpha", "count": 2, "density": "66.67%"}

    def test_stop_word_target_counts_zero(self):
        result = analyze_keywords("the cat and the dog", "the")
        assert result["targetKeyword"]["count"] == 0
        assert result["targetKeyword"]["density"] == "0.00%"

    def test_target_is_case_and_space_insensitive(self):
        result = analyze_keywords("Seo tools are great. SEO tools help.", "  SEO   Tools ")
        assert result["targetKeyword"]["count"] == 2
        assert result["targetKeyword"]["keyword"] == "  SEO   Tools "

    def test_multi_word_target_counts_repeated_phrase(self):
        result = analyze_keywords("the cat the cat the cat", "cat the")
        assert result["targetKeyword"]["count"] == 2
        assert result["targetKeyword"]["density"] == "33.33%"

    def test_multi_word_target_counts_overlapping_matches(self):
        """Self-overlapping phrases are counted at every starting position."""
        result = analyze_keywords("go go go", "go go")
        assert result["targetKeyword"]["count"] == 2

    def test_multi_word_target_matches_inside_tokens(self):
        """Matching is substring-based over the joined token stream."""
        result = analyze_keywords("bobcat sat down", "cat sat")
        assert result["targetKeyword"]["count"] == 1

    def test_no_target(self):
        assert analyze_keywords("cats and dogs")["targetKeyword"] is None

    @pytest.mark.parametrize("text", [
        "one two three four five",
        "repeat repeat repeat repeat",
        "Mixed CASE words, with punctuation; and numbers 2024 2024.",
    ])
    def test_densities_within_bounds(self, text):
        result = analyze_keywords(text)
        for entry in result["topSingleWords"] + result["topBigrams"] + result["topTrigrams"]:
            value = float(entry["density"].rstrip("%"))
            assert 0.0 <= value <= 100.0

    def test_repeat_runs_identical(self):
        text = "the quick brown fox jumps over the lazy dog"
        assert analyze_keywords(text, "brown fox") == analyze_keywords(text, "brown fox")
