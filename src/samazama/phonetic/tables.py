"""Static lookup tables for the Soundex variant.

Both tables are immutable once built and safe to share between threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

NONCODE = "0"
CODE_LENGTH = 4

# Group digit -> letters that sound alike. Group 0 is never coded.
DEFAULT_SOUND_GROUPS: Mapping[str, str] = MappingProxyType(
    {
        "0": "aehiouwy",
        "1": "bfpv",
        "2": "cgjkqsxz",
        "3": "dt",
        "4": "l",
        "5": "mn",
        "6": "r",
    }
)


class DigraphResponse(str, Enum):
    """How a two-letter sequence is coded."""

    NONE = "none"  # Code both letters normally
    REMOVE = "remove"  # Silent pair, skip both
    KEEP_FIRST = "keep_first"  # Code the pair as its first letter
    KEEP_SECOND = "keep_second"  # Code the pair as its second letter


DEFAULT_DIGRAPHS: Mapping[str, DigraphResponse] = MappingProxyType(
    {"gh": DigraphResponse.REMOVE}
)
# Removable digraphs that stay when they start a word ("ghost").
DEFAULT_KEEP_INITIAL: frozenset[str] = frozenset({"gh"})


@dataclass(frozen=True)
class SoundGroupTable:
    """Letter to sound-group lookup.

    Attributes:
        letters: Lowercase letter -> group digit
        noncode: Digit of the group that is never coded
    """

    letters: Mapping[str, str]
    noncode: str = NONCODE

    @classmethod
    def from_groups(
        cls, groups: Mapping[str, str], noncode: str = NONCODE
    ) -> "SoundGroupTable":
        """Invert a group -> letters mapping."""
        letters = {}
        for group, members in groups.items():
            for letter in members:
                letters[letter.lower()] = group
        return cls(letters=MappingProxyType(letters), noncode=noncode)

    def group_of(self, char: str) -> str | None:
        """Sound group of a character, or None for uncoded characters."""
        return self.letters.get(char.lower())

    def is_noncode(self, char: str) -> bool:
        return self.group_of(char) == self.noncode


@dataclass(frozen=True)
class DigraphTable:
    """Digraph responses plus the keep-initial exception set."""

    responses: Mapping[str, DigraphResponse] = field(
        default_factory=lambda: DEFAULT_DIGRAPHS
    )
    keep_initial: frozenset[str] = DEFAULT_KEEP_INITIAL

    def response_for(self, pair: str) -> DigraphResponse:
        return self.responses.get(pair.lower(), DigraphResponse.NONE)

    def is_protected(self, chars: list[str], position: int) -> bool:
        """Whether a removable digraph at position must be kept.

        Protected positions are the start of the input and the start of any
        word inside it.
        """
        pair = "".join(chars[position:position + 2]).lower()
        if pair not in self.keep_initial:
            return False
        return position == 0 or chars[position - 1].isspace()


DEFAULT_SOUND_GROUP_TABLE = SoundGroupTable.from_groups(DEFAULT_SOUND_GROUPS)
DEFAULT_DIGRAPH_TABLE = DigraphTable()
