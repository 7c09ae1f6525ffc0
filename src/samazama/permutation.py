"""Order-preserving variant generation.

Repeated characters are removed one occurrence at a time, at every position
they appear, and each shorter string is processed again until nothing
repeats. The result is every reduced form a user could plausibly type,
e.g. "carry pizza over" (coded as "crrpzzvr") yields ten distinct variants:

    crpzv, cpzvr, crrpzv, crpzvr, crpzzv, cpzzvr, crrpzvr, crrpzzv,
    crpzzvr, crrpzzvr

The tree grows factorially with the number of repeated occurrences, so all
work in one call is charged against a single RecursionBudget.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from samazama.errors import RecursionExceeded
from samazama.text import graphemes, remove_grapheme, repeat_character_counts

# Roughly the work of a tree nine removals deep.
DEFAULT_RECURSION_CEILING = math.factorial(9)


@dataclass
class RecursionBudget:
    """Work counter shared by every branch of one generation call.

    Attributes:
        ceiling: Maximum number of removals allowed
        count: Removals performed so far
    """

    ceiling: int = DEFAULT_RECURSION_CEILING
    count: int = 0

    def spend(self) -> None:
        """Charge one removal.

        Raises:
            RecursionExceeded: Once count goes past the ceiling
        """
        self.count += 1
        if self.count > self.ceiling:
            raise RecursionExceeded(ceiling=self.ceiling, count=self.count)


def _removal_positions(chars: list[str]) -> Iterator[int]:
    for repeated in repeat_character_counts(chars):
        for position, char in enumerate(chars):
            if char == repeated:
                yield position


def _generate(chars: list[str], budget: RecursionBudget, bag: list[str]) -> None:
    # Depth-first with an explicit stack; one removal path can be as long as the input
    bag.append("".join(chars))
    stack = [(chars, _removal_positions(chars))]

    while stack:
        current, positions = stack[-1]
        position = next(positions, None)
        if position is None:
            stack.pop()
            continue

        budget.spend()
        reduced = remove_grapheme(current, position)
        variant = "".join(reduced)
        # Once as the removal result, once as the head of its own subtree
        bag.append(variant)
        bag.append(variant)
        stack.append((reduced, _removal_positions(reduced)))


def generate(text: str, budget: RecursionBudget) -> list[str]:
    """Generate every order-preserving reduction of text.

    The bag keeps duplicates: different removal paths often reach the same
    string. The input itself is always the first entry.

    Args:
        text: String to reduce
        budget: Budget charged once per removal across the whole tree

    Returns:
        All variants, in generation order

    Raises:
        RecursionExceeded: If the budget runs out; no partial bag is returned
    """
    bag: list[str] = []
    _generate(graphemes(text), budget, bag)
    return bag


def make_repeat_character_variants(
    text: str,
    ceiling: int = DEFAULT_RECURSION_CEILING,
    lowercase: bool = True,
) -> list[str]:
    """Run generate() with a fresh budget and finalize case.

    Args:
        text: String to reduce, used as given (no normalization)
        ceiling: Recursion ceiling for this call
        lowercase: Lowercase every variant

    Returns:
        Bag of variants

    Raises:
        RecursionExceeded: If the input needs more than ceiling removals
    """
    bag = generate(text, RecursionBudget(ceiling=ceiling))
    if lowercase:
        return [variant.lower() for variant in bag]
    return bag
