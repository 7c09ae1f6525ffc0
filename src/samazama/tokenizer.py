"""Word tokenization for free-text answers.

Splits text into word tokens so that punctuation and spacing can be
stripped before a phrase is handed to the matcher. The matcher itself
expects a single word or short phrase and never calls this module.
"""

from __future__ import annotations

import regex

# Letters/marks/digits, allowing inner apostrophes and hyphens ("how's", "t-shirt")
_WORD = regex.compile(r"[\p{L}\p{M}\p{N}]+(?:['’\-][\p{L}\p{M}\p{N}]+)*")
_WHITESPACE = regex.compile(r"\s+")
_PUNCTUATION = regex.compile(r"\p{P}+")


def words(text: str) -> list[str]:
    """Return the word tokens of text, in order."""
    return _WORD.findall(text)


def spaces_removed(text: str) -> str:
    """Remove all whitespace."""
    return _WHITESPACE.sub("", text)


def punctuation_removed(text: str) -> str:
    """Remove punctuation, keeping spacing intact."""
    return _PUNCTUATION.sub("", text)


def tokenized(text: str) -> str:
    """Concatenate the word tokens of text.

    Some inputs yield no word tokens at all (symbols only); the text is
    then returned with its whitespace removed instead of as an empty string.
    """
    joined = "".join(words(text))
    if joined:
        return joined
    return spaces_removed(text)
