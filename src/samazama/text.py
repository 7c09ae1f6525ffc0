"""Character-level helpers shared by the phonetic and permutation engines.

All positions and counts are in user-perceived characters (extended
grapheme clusters), so "é" written as "e" plus a combining accent counts as
one character, as does a flag emoji.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

import regex

_GRAPHEME = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters."""
    return _GRAPHEME.findall(text)


def repeat_character_counts(text: str | list[str]) -> dict[str, int]:
    """Count the characters that occur more than once.

    Args:
        text: String, or an already segmented list of clusters

    Returns:
        Mapping of repeated character to its count, in order of first
        appearance
    """
    chars = graphemes(text) if isinstance(text, str) else text
    counts = Counter(chars)
    return {char: count for char, count in counts.items() if count > 1}


def repeated_characters(text: str) -> set[str]:
    """Return every character occurring more than once in text."""
    return set(repeat_character_counts(text))


def remove_grapheme(chars: list[str], position: int) -> list[str]:
    """Drop the cluster at position from a segmented string.

    Raises:
        IndexError: If position is not a valid index into chars
    """
    if not 0 <= position < len(chars):
        raise IndexError(
            f"position {position} out of range for {len(chars)} characters"
        )
    return chars[:position] + chars[position + 1:]


def remove_at(text: str, position: int) -> str:
    """Delete exactly the character at position, keeping the rest in order.

    Args:
        text: Input string
        position: Zero-based character index

    Returns:
        text without that one character

    Raises:
        IndexError: If position is out of range
    """
    return "".join(remove_grapheme(graphemes(text), position))


def remove_repeats(text: str, remove_at_most: int | None = None) -> str:
    """Strip repeated characters to cap the cost of variant generation.

    Each repeated character is handled completely before the next one, in
    order of first appearance. The first occurrence always stays; following
    occurrences are removed left to right, at most ``remove_at_most`` of
    them per character when given.

    Example:
        "0001111000" becomes "01", or with remove_at_most=2, "011000".

    Every removed character shrinks the variant tree by roughly an order of
    magnitude, which is what lets long inputs fit under the recursion
    ceiling.

    Args:
        text: String containing input to be processed
        remove_at_most: Maximum number of occurrences to remove per character

    Returns:
        String with repeated characters removed

    Raises:
        ValueError: If remove_at_most is negative
    """
    if remove_at_most is not None and remove_at_most < 0:
        raise ValueError(f"remove_at_most must be >= 0, got {remove_at_most}")

    chars = graphemes(text)
    for repeated in repeat_character_counts(chars):
        kept = []
        seen = 0
        removed = 0
        for char in chars:
            if char == repeated:
                seen += 1
                if seen > 1 and (remove_at_most is None or removed < remove_at_most):
                    removed += 1
                    continue
            kept.append(char)
        chars = kept

    return "".join(chars)


def unique_strings(strings: Iterable[str]) -> set[str]:
    """Collapse a bag of permutations into its distinct members."""
    return set(strings)
