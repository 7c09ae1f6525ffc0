"""Tests for word tokenization."""

import pytest

from samazama.tokenizer import punctuation_removed, spaces_removed, tokenized, words


class TestWords:
    """Tests for word splitting."""

    def test_words(self):
        """Test inner apostrophes and hyphens stay inside a word."""
        assert words("How's the t-shirt?") == ["How's", "the", "t-shirt"]

    def test_non_latin(self):
        """Test letters from other scripts are words too."""
        assert words("さまざま, yes") == ["さまざま", "yes"]

    def test_symbols_only(self):
        """Test input without letters has no words."""
        assert words("!! ??") == []


class TestCleanup:
    """Tests for whitespace and punctuation removal."""

    def test_spaces_removed(self):
        assert spaces_removed(" a b\tc\n") == "abc"

    def test_punctuation_removed(self):
        assert punctuation_removed("hi, there!") == "hi there"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("carry pizza, over!", "carrypizzaover"),
            ("dining hall", "dininghall"),
            ("!! ??", "!!??"),
            ("", ""),
        ],
    )
    def test_tokenized(self, text, expected):
        """Test words are joined and symbol-only input falls back."""
        assert tokenized(text) == expected
