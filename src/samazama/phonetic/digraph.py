"""Two-character lookahead for digraph handling.

The scanner decides, at one position of a segmented string, whether the
next two characters are handled as a pair. "gh" is silent inside a word
("night"), but kept at the start of one ("ghost"). A "g" and "h" split by a
space ("dining hall") never form a pair because the window is contiguous.
"""

from __future__ import annotations

from dataclasses import dataclass

from samazama.phonetic.tables import (
    DEFAULT_DIGRAPH_TABLE,
    DEFAULT_SOUND_GROUP_TABLE,
    DigraphResponse,
    DigraphTable,
    SoundGroupTable,
)
from samazama.text import graphemes

DIGRAPH_LENGTH = 2


@dataclass(frozen=True)
class DigraphStep:
    """Outcome of scanning one position.

    Attributes:
        response: Effective response after exceptions are applied
        position: Position to continue scanning from
        group: Sound group the pair collapses to (keep_first/keep_second only)
    """

    response: DigraphResponse
    position: int
    group: str | None = None

    @property
    def consumed(self) -> bool:
        """True when both characters of the window were handled as a pair."""
        return self.response is not DigraphResponse.NONE


def scan_digraph(
    chars: list[str],
    position: int,
    digraphs: DigraphTable = DEFAULT_DIGRAPH_TABLE,
    groups: SoundGroupTable = DEFAULT_SOUND_GROUP_TABLE,
) -> DigraphStep:
    """Examine the two-character window starting at position.

    Args:
        chars: Segmented input
        position: Window start
        digraphs: Digraph responses and exceptions
        groups: Sound groups, used to code collapsed pairs

    Returns:
        The step to take; advances by 2 when the pair is consumed, else by 1
    """
    if position + DIGRAPH_LENGTH > len(chars):
        return DigraphStep(DigraphResponse.NONE, position + 1)

    first, second = chars[position], chars[position + 1]
    response = digraphs.response_for(first + second)

    if response is DigraphResponse.REMOVE:
        if digraphs.is_protected(chars, position):
            return DigraphStep(DigraphResponse.NONE, position + 1)
        return DigraphStep(response, position + DIGRAPH_LENGTH)

    if response is DigraphResponse.KEEP_FIRST:
        return DigraphStep(response, position + DIGRAPH_LENGTH, groups.group_of(first))

    if response is DigraphResponse.KEEP_SECOND:
        return DigraphStep(response, position + DIGRAPH_LENGTH, groups.group_of(second))

    return DigraphStep(DigraphResponse.NONE, position + 1)


def remove_digraphs(
    text: str,
    digraphs: DigraphTable = DEFAULT_DIGRAPH_TABLE,
    groups: SoundGroupTable = DEFAULT_SOUND_GROUP_TABLE,
) -> str:
    """Drop silent digraphs and collapse keep_first/keep_second pairs.

    Vowels and spacing are left alone.

    Args:
        text: A string, usually user input

    Returns:
        text with digraph rules applied
    """
    chars = graphemes(text)
    result = []
    position = 0

    while position < len(chars):
        step = scan_digraph(chars, position, digraphs, groups)
        if step.response is DigraphResponse.KEEP_FIRST:
            result.append(chars[position])
        elif step.response is DigraphResponse.KEEP_SECOND:
            result.append(chars[position + 1])
        elif step.response is DigraphResponse.NONE:
            result.append(chars[position])
        position = step.position

    return "".join(result)
