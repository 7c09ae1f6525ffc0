"""Normalize-then-generate pipeline for user input.

These are free functions over explicit tables and settings so they can run
on any thread without reference to the object that asked for them.
"""

from __future__ import annotations

from samazama.permutation import DEFAULT_RECURSION_CEILING, make_repeat_character_variants
from samazama.phonetic.soundex import normalize_input
from samazama.phonetic.tables import (
    DEFAULT_DIGRAPH_TABLE,
    DEFAULT_SOUND_GROUP_TABLE,
    DigraphTable,
    SoundGroupTable,
)


def _ordered_unique(bag: list[str]) -> list[str]:
    return list(dict.fromkeys(bag))


def generate_variants(
    text: str,
    only_unique: bool = False,
    groups: SoundGroupTable = DEFAULT_SOUND_GROUP_TABLE,
    digraphs: DigraphTable = DEFAULT_DIGRAPH_TABLE,
    ceiling: int = DEFAULT_RECURSION_CEILING,
    lowercase: bool = True,
) -> list[str]:
    """Generate repeat-character variants of normalized input.

    The input is case-folded, stripped of silent digraphs, spaces and
    no-code letters, then expanded. "carry pizza over" is expanded from
    "crrpzzvr".

    Args:
        text: A word or short phrase
        only_unique: Drop duplicates, keeping first-generated order
        groups: Sound group table used for normalization
        digraphs: Digraph table used for normalization
        ceiling: Recursion ceiling for this call
        lowercase: Fold case before and after generation

    Returns:
        The variant bag, or its distinct members if only_unique

    Raises:
        RecursionExceeded: If the input needs more than ceiling removals
    """
    normalized = normalize_input(text, groups, digraphs, lowercase=lowercase)
    bag = make_repeat_character_variants(normalized, ceiling=ceiling, lowercase=lowercase)
    if only_unique:
        return _ordered_unique(bag)
    return bag
