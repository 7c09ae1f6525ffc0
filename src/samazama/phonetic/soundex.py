"""Soundex variant for English with digraph exceptions.

Letters are grouped by sound and the code keeps the first letter followed by
up to three group digits, so "autumn" and "autm" both code as "a350".
Unlike classic Soundex, silent digraphs such as the "gh" in "night" are
skipped before they can contribute a digit.
"""

from __future__ import annotations

from dataclasses import dataclass

from samazama.phonetic.digraph import remove_digraphs, scan_digraph
from samazama.phonetic.tables import (
    CODE_LENGTH,
    DEFAULT_DIGRAPH_TABLE,
    DEFAULT_SOUND_GROUP_TABLE,
    DigraphTable,
    SoundGroupTable,
)
from samazama.text import graphemes


@dataclass(frozen=True)
class CodedForm:
    """Input reduced to the characters that carry sound.

    Attributes:
        first_letter: First character, kept literally as in the code
        kept_remainder: Remaining coded characters, or None if none are left
    """

    first_letter: str | None = None
    kept_remainder: str | None = None

    @property
    def nonzero_coded(self) -> str | None:
        if self.first_letter is None:
            return None
        return self.first_letter + (self.kept_remainder or "")


def encode(
    text: str,
    groups: SoundGroupTable = DEFAULT_SOUND_GROUP_TABLE,
    digraphs: DigraphTable = DEFAULT_DIGRAPH_TABLE,
    length: int = CODE_LENGTH,
) -> str:
    """Soundex encode a string. Uncodable characters are discarded.

    A digit is only added when it differs from the last digit added, so
    doubled consonants ("ck" in "blackjack") code once. Vowels do not reset
    that comparison.

    Args:
        text: String for encoding
        groups: Sound group table
        digraphs: Digraph table
        length: Total code length, first letter included

    Returns:
        The first letter followed by group digits, padded with the no-code
        digit; all no-code digits for empty input
    """
    chars = graphemes(text)
    if not chars:
        return groups.noncode * length

    code = [chars[0]]
    previous = groups.group_of(chars[0])
    position = 1

    while position < len(chars) and len(code) < length:
        step = scan_digraph(chars, position, digraphs, groups)
        if step.consumed:
            subcode = step.group
            position = step.position
        else:
            subcode = groups.group_of(chars[position])
            position += 1

        if subcode is None or subcode == groups.noncode or subcode == previous:
            continue
        code.append(subcode)
        previous = subcode

    return "".join(code).ljust(length, groups.noncode)[:length]


def soundex_equal(
    first: str,
    second: str,
    groups: SoundGroupTable = DEFAULT_SOUND_GROUP_TABLE,
    digraphs: DigraphTable = DEFAULT_DIGRAPH_TABLE,
    length: int = CODE_LENGTH,
) -> bool:
    """Compare two strings by their Soundex codes."""
    return encode(first, groups, digraphs, length) == encode(second, groups, digraphs, length)


def keep_coded(
    text: str,
    groups: SoundGroupTable = DEFAULT_SOUND_GROUP_TABLE,
    digraphs: DigraphTable = DEFAULT_DIGRAPH_TABLE,
) -> CodedForm:
    """Reduce text to its sounding characters.

    Silent digraphs are removed first, then whitespace and every character
    after the first that belongs to the no-code group. Characters without a
    group (digits, other scripts) are kept.

    Args:
        text: A string, usually user input

    Returns:
        The coded form; both fields None for blank input
    """
    chars = [char for char in graphemes(remove_digraphs(text, digraphs, groups)) if not char.isspace()]
    if not chars:
        return CodedForm()

    remainder = "".join(char for char in chars[1:] if not groups.is_noncode(char))
    return CodedForm(first_letter=chars[0], kept_remainder=remainder or None)


def normalize_input(
    text: str,
    groups: SoundGroupTable = DEFAULT_SOUND_GROUP_TABLE,
    digraphs: DigraphTable = DEFAULT_DIGRAPH_TABLE,
    lowercase: bool = True,
) -> str:
    """Prepare input for variant generation.

    * Changes case.
    * Removes silent digraphs.
    * Removes spaces and no-code characters.

    Returns:
        The coded string, or the (case-folded) input if nothing is coded
    """
    if lowercase:
        text = text.lower()

    coded = keep_coded(text, groups, digraphs).nonzero_coded
    if coded:
        return coded
    return text
