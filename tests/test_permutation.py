"""Tests for repeat-character variant generation."""

import pytest

from samazama.errors import ErrorCategory, RecursionExceeded
from samazama.permutation import (
    DEFAULT_RECURSION_CEILING,
    RecursionBudget,
    generate,
    make_repeat_character_variants,
)
from samazama.text import graphemes, remove_repeats, unique_strings
from samazama.variants import generate_variants


# (source, total variants, unique variants)
VARIANT_SOURCES = [
    ("Fault", 1, 1),
    ("astonishment", 157, 26),
    ("carry pizza over", 119, 10),
    ("dining hall", 25, 4),
    ("dnghl", 1, 1),
    ("paragraph", 25, 9),
    ("unintentionally", 6409, 42),
]


def is_subsequence(candidate: str, source: str) -> bool:
    remaining = iter(graphemes(source))
    return all(char in remaining for char in graphemes(candidate))


class TestRecursionBudget:
    """Tests for the shared recursion budget."""

    def test_spend_within_ceiling(self):
        """Test spending up to the ceiling succeeds."""
        budget = RecursionBudget(ceiling=2)
        budget.spend()
        budget.spend()
        assert budget.count == 2

    def test_spend_past_ceiling(self):
        """Test crossing the ceiling raises."""
        budget = RecursionBudget(ceiling=1)
        budget.spend()
        with pytest.raises(RecursionExceeded) as exc_info:
            budget.spend()

        assert exc_info.value.ceiling == 1
        assert exc_info.value.count == 2
        assert exc_info.value.category == ErrorCategory.RESOURCE_LIMIT
        assert exc_info.value.recoverable is True

    def test_default_ceiling(self):
        """Test the default ceiling is nine factorial."""
        assert RecursionBudget().ceiling == 362880 == DEFAULT_RECURSION_CEILING


class TestGenerate:
    """Tests for the recursive engine on raw strings."""

    def test_no_repeats(self):
        """Test input without repeats is its only variant."""
        assert generate("flt", RecursionBudget()) == ["flt"]

    def test_empty(self):
        """Test empty input yields a single empty variant."""
        assert generate("", RecursionBudget()) == [""]

    def test_single_pair(self):
        """Test the exact bag for one repeated character."""
        assert generate("aa", RecursionBudget()) == ["aa", "a", "a", "a", "a"]

    def test_input_first(self):
        """Test the input itself opens the bag."""
        bag = generate("dnngll", RecursionBudget())
        assert bag[0] == "dnngll"
        assert len(bag) == 25

    def test_budget_shared_across_branches(self):
        """Test one budget is charged for the whole tree."""
        budget = RecursionBudget()
        bag = generate("dnngll", budget)
        # Each removal appends the reduced string and recurses into it
        assert budget.count == 12
        assert len(bag) == 1 + 2 * budget.count

    def test_exact_ceiling_succeeds(self):
        """Test a ceiling equal to the work needed is enough."""
        assert len(generate("dnngll", RecursionBudget(ceiling=12))) == 25

    def test_ceiling_one_short_fails(self):
        """Test a ceiling one below the work needed fails."""
        with pytest.raises(RecursionExceeded):
            generate("dnngll", RecursionBudget(ceiling=11))

    def test_grapheme_aware(self):
        """Test repeated clusters are removed whole."""
        bag = generate("éé", RecursionBudget())
        assert unique_strings(bag) == {"éé", "é"}

    def test_pre_reduced_counts(self):
        """Test counts after capping repeats of an oversized input."""
        reduced = remove_repeats("0001111000", remove_at_most=2)
        bag = make_repeat_character_variants(reduced)

        assert reduced == "011000"
        assert len(bag) == 645
        assert len(unique_strings(bag)) == 14

    def test_oversized_input_fails(self):
        """Test an input too big for the default ceiling fails outright."""
        with pytest.raises(RecursionExceeded):
            make_repeat_character_variants("0001111000")

    def test_long_removal_path(self):
        """Test a removal path longer than the interpreter stack hits the budget."""
        budget = RecursionBudget(ceiling=5000)
        with pytest.raises(RecursionExceeded):
            generate("a" * 1500, budget)
        assert budget.count == 5001

    def test_lowercase(self):
        """Test variants are lowercased when requested."""
        assert make_repeat_character_variants("Bb", lowercase=True) == ["bb"]
        assert make_repeat_character_variants("Bb", lowercase=False) == ["Bb"]
        assert make_repeat_character_variants("AA") == ["aa", "a", "a", "a", "a"]


class TestGenerateVariants:
    """Tests for normalized variant generation."""

    @pytest.mark.parametrize("source,total,unique", VARIANT_SOURCES)
    def test_variant_sources(self, source, total, unique):
        """Test total and unique counts for known inputs."""
        bag = generate_variants(source)

        assert len(bag) == total
        assert len(unique_strings(bag)) == unique

    def test_carry_pizza_over_members(self):
        """Test the shortest and longest variants are present."""
        unique = unique_strings(generate_variants("carry pizza over"))

        assert "crpzv" in unique
        assert "crrpzzvr" in unique
        assert unique == {
            "crpzv",
            "cpzvr",
            "crrpzv",
            "crpzvr",
            "crpzzv",
            "cpzzvr",
            "crrpzvr",
            "crrpzzv",
            "crpzzvr",
            "crrpzzvr",
        }

    def test_only_unique(self):
        """Test only_unique returns each variant once."""
        unique = generate_variants("dining hall", only_unique=True)

        assert len(unique) == 4
        assert len(set(unique)) == 4
        assert unique[0] == "dnngll"

    @pytest.mark.parametrize("source", [s for s, _, _ in VARIANT_SOURCES])
    def test_variants_are_subsequences(self, source):
        """Test every variant keeps the order of the normalized input."""
        bag = generate_variants(source)
        longest = bag[0]

        for variant in bag:
            assert is_subsequence(variant, longest)
            assert 1 <= len(variant) <= len(longest)

    @pytest.mark.parametrize("source", [s for s, _, _ in VARIANT_SOURCES])
    def test_set_within_bag(self, source):
        """Test the unique set never outgrows the bag and covers it."""
        bag = generate_variants(source)
        unique = unique_strings(bag)

        assert len(unique) <= len(bag)
        assert all(variant in unique for variant in bag)

    def test_oversized_input_fails(self):
        """Test normalization keeps digits, so the input stays oversized."""
        with pytest.raises(RecursionExceeded):
            generate_variants("0001111000")

    def test_custom_ceiling(self):
        """Test a small ceiling rejects otherwise valid input."""
        with pytest.raises(RecursionExceeded):
            generate_variants("astonishment", ceiling=77)
        assert len(generate_variants("astonishment", ceiling=78)) == 157

    def test_empty(self):
        """Test empty input yields a single empty variant."""
        assert generate_variants("") == [""]
