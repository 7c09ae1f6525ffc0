"""Matching shorthand input against reference answers.

VariantMatcher composes the phonetic encoder and the permutation engine
over one configuration. A shorthand matches an answer when their Soundex
codes are equal or when any variant of one equals any variant of the other.
"""

from __future__ import annotations

from concurrent.futures import Future
from typing import Callable, Iterable

from samazama import text as text_utils
from samazama.config import SamazamaConfig
from samazama.dispatch import VariantResult, dispatch_variants
from samazama.logging import get_logger
from samazama.phonetic.soundex import encode
from samazama.variants import generate_variants

logger = get_logger(__name__)


class VariantMatcher:
    """Facade over the phonetic and permutation engines.

    Tables are built once from the config and never change, so a matcher
    can be shared between threads.
    """

    def __init__(self, config: SamazamaConfig | None = None):
        """Initialize the matcher.

        Args:
            config: Settings; defaults are used when omitted
        """
        self.config = config or SamazamaConfig()
        self._groups = self.config.sound_group_table()
        self._digraphs = self.config.digraph_table()

    def _fold(self, text: str) -> str:
        return text.lower() if self.config.lowercase else text

    # Permutations

    def generate_variants(self, text: str, only_unique: bool = False) -> list[str]:
        """Generate variants of normalized input.

        Raises:
            RecursionExceeded: If the input needs more work than the ceiling
        """
        return generate_variants(
            text,
            only_unique=only_unique,
            groups=self._groups,
            digraphs=self._digraphs,
            ceiling=self.config.recursion_ceiling,
            lowercase=self.config.lowercase,
        )

    def generate_variants_async(
        self,
        text: str,
        callback: Callable[[VariantResult], None] | None = None,
        only_unique: bool = False,
    ) -> "Future[VariantResult]":
        """Generate variants on a worker thread.

        The worker receives the input and a frozen config only; dropping
        this matcher does not affect the pending result.
        """
        return dispatch_variants(text, self.config, callback=callback, only_unique=only_unique)

    def unique_strings(self, strings: Iterable[str]) -> set[str]:
        return text_utils.unique_strings(strings)

    def remove_repeats(self, text: str, remove_at_most: int | None = None) -> str:
        return text_utils.remove_repeats(text, remove_at_most)

    def repeated_characters(self, text: str) -> set[str]:
        return text_utils.repeated_characters(text)

    def repeat_character_counts(self, text: str) -> dict[str, int]:
        return text_utils.repeat_character_counts(text)

    # Phonetics

    def encode(self, text: str) -> str:
        """Soundex code of case-folded input."""
        return encode(self._fold(text), self._groups, self._digraphs, self.config.code_length)

    def soundex_equal(self, first: str, second: str) -> bool:
        return self.encode(first) == self.encode(second)

    # Matching

    def variants_intersect(self, first: str, second: str) -> bool:
        """True when any variant of first equals any variant of second.

        Raises:
            RecursionExceeded: If either input exceeds the ceiling
        """
        first_variants = set(self.generate_variants(first, only_unique=True))
        second_variants = self.generate_variants(second, only_unique=True)
        return not first_variants.isdisjoint(second_variants)

    def matches(self, shorthand: str, answer: str) -> bool:
        """Whether shorthand is an acceptable way of typing answer.

        Phonetic equality is checked first; variants are only generated when
        the codes differ.
        """
        if self.soundex_equal(shorthand, answer):
            logger.debug("Phonetic match", extra={"shorthand": shorthand, "answer": answer})
            return True

        matched = self.variants_intersect(shorthand, answer)
        if matched:
            logger.debug("Variant match", extra={"shorthand": shorthand, "answer": answer})
        return matched
