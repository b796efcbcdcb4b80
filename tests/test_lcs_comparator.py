"""Tests for the longest common substring comparator.

This module covers:
- Quick cutoffs (identity, empty strings)
- Worked scoring scenarios at the default and raised minimum length
- Order dependence of a single directional pass
- First-match tie-breaking of the substring search
- Input and configuration validation
"""

import sys
import threading
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lcs_linkage.similarity import Comparator
from lcs_linkage.similarity.lcs import (
    DEFAULT_MIN_LENGTH,
    LCSConfig,
    LongestCommonSubstring,
    directional_score,
    longest_common_substring,
)


@pytest.fixture
def comparator() -> LongestCommonSubstring:
    return LongestCommonSubstring()


class TestQuickCutoffs:
    """Cutoffs applied before the main algorithm."""

    def test_identical_strings(self, comparator):
        assert comparator.compare("abc", "abc") == 1.0

    def test_both_empty_is_identity(self, comparator):
        assert comparator.compare("", "") == 1.0

    def test_empty_against_non_empty(self, comparator):
        assert comparator.compare("", "abc") == 0.0
        assert comparator.compare("abc", "") == 0.0

    def test_identity_ignores_min_length(self):
        """Identical strings shorter than min_length still score 1.0."""
        strict = LongestCommonSubstring(min_length=10)
        assert strict.compare("ab", "ab") == 1.0


class TestScoringScenarios:
    """Worked examples at the default minimum length."""

    def test_no_common_substring(self, comparator):
        assert comparator.compare("ab", "cd") == 0.0

    def test_single_shared_character_below_threshold(self, comparator):
        assert comparator.compare("ax", "ya") == 0.0

    def test_contained_substring(self, comparator):
        assert comparator.compare("abcdef", "xyabcdefz") == 1.0

    def test_single_short_match(self, comparator):
        score = comparator.compare("ab12cd", "xy12zw")
        assert score == pytest.approx(2 / 6)

    def test_raised_min_length_drops_short_match(self):
        strict = LongestCommonSubstring(min_length=3)
        assert strict.compare("ab12cd", "xy12zw") == 0.0

    def test_repeated_extraction(self, comparator):
        """Both halves are found even though they appear in swapped order."""
        assert comparator.compare("john smith", "smith john") == pytest.approx(
            (9 / 10 + 9 / 10) / 2,
        )

    def test_case_sensitive(self, comparator):
        assert comparator.compare("ABC", "abc") == 0.0


class TestDirectionalScore:
    """Order-dependent single pass."""

    def test_directional_passes_differ(self):
        # removing "bc" from the second string first joins "a" and "y" into "ay"
        assert directional_score("xabcy", "bcabay") == pytest.approx(0.4)
        assert directional_score("bcabay", "xabcy") == pytest.approx(0.8)

    def test_compare_averages_both_passes(self, comparator):
        assert comparator.compare("xabcy", "bcabay") == pytest.approx(0.6)
        assert comparator.compare("bcabay", "xabcy") == comparator.compare(
            "xabcy", "bcabay",
        )

    def test_divides_by_original_shorter_length(self):
        assert directional_score("abcd", "zzabcdzz") == 1.0
        assert directional_score("abXcd", "abcd") == pytest.approx(4 / 4)

    def test_extraction_callback(self):
        extracted = []
        directional_score(
            "john smith",
            "smith john",
            on_extract=lambda substring, removed: extracted.append((substring, removed)),
        )
        assert extracted == [("smith", 5), ("john", 9)]

    def test_zero_min_length_terminates(self):
        assert directional_score("abc", "xyz", min_length=0) == 0.0
        assert directional_score("ab", "ba", min_length=0) == pytest.approx(1.0)


class TestLongestCommonSubstring:
    """Single search step of the dynamic program."""

    def test_location_of_match(self):
        length, end_a, end_b = longest_common_substring("xxabcx", "abcyy")
        assert length == 3
        assert "xxabcx"[end_a - length : end_a] == "abc"
        assert "abcyy"[end_b - length : end_b] == "abc"

    def test_first_match_wins_ties(self):
        # "ab" and "cd" both have length 2; "ab" comes first when scanning the first string
        length, end_a, end_b = longest_common_substring("abcd", "cdab")
        assert (length, end_a, end_b) == (2, 2, 4)

    def test_no_match(self):
        assert longest_common_substring("abc", "xyz") == (0, 0, 0)

    def test_empty_input(self):
        assert longest_common_substring("", "abc") == (0, 0, 0)


class TestValidation:
    """Fail-fast behaviour on bad input and bad configuration."""

    @pytest.mark.parametrize("bad", [None, 42, b"abc", ["a"]])
    def test_non_string_input_raises(self, comparator, bad):
        with pytest.raises(TypeError):
            comparator.compare(bad, "abc")
        with pytest.raises(TypeError):
            comparator.compare("abc", bad)

    def test_none_never_scores(self, comparator):
        with pytest.raises(TypeError):
            comparator.compare(None, None)

    def test_negative_min_length_rejected_at_construction(self):
        with pytest.raises(ValueError):
            LongestCommonSubstring(min_length=-1)

    def test_negative_min_length_rejected_by_setter(self, comparator):
        with pytest.raises(ValueError):
            comparator.set_minimum_length(-1)
        assert comparator.get_minimum_length() == DEFAULT_MIN_LENGTH

    @pytest.mark.parametrize("bad", [True, 2.5, "3", None])
    def test_non_int_min_length_rejected(self, bad):
        with pytest.raises(TypeError):
            LCSConfig(min_length=bad)


class TestConfiguration:
    """Accessors and construction paths for the minimum length."""

    def test_default_min_length(self, comparator):
        assert comparator.get_minimum_length() == 2
        assert comparator.minimum_length == 2
        assert comparator.config == LCSConfig()

    def test_setter_and_getter(self, comparator):
        comparator.set_minimum_length(4)
        assert comparator.get_minimum_length() == 4
        assert comparator.compare("ab12cd", "xy12zw") == 0.0

    def test_with_minimum_length_leaves_original(self, comparator):
        strict = comparator.with_minimum_length(3)
        assert strict.get_minimum_length() == 3
        assert comparator.get_minimum_length() == 2
        assert strict is not comparator

    def test_from_config(self):
        lcs = LongestCommonSubstring.from_config(LCSConfig(min_length=5))
        assert lcs.get_minimum_length() == 5

    def test_config_is_frozen(self):
        config = LCSConfig(min_length=3)
        with pytest.raises(AttributeError):
            config.min_length = 4

    def test_is_tokenized(self, comparator):
        assert comparator.is_tokenized() is True

    def test_satisfies_comparator_protocol(self, comparator):
        assert isinstance(comparator, Comparator)

    def test_repr(self):
        assert repr(LongestCommonSubstring(min_length=3)) == "LongestCommonSubstring(min_length=3)"


def test_shared_instance_across_threads(comparator):
    """A configured comparator gives the same scores from several threads."""
    pairs = [("ab12cd", "xy12zw"), ("john smith", "smith john"), ("abc", "abd")]
    expected = [comparator.compare(a, b) for a, b in pairs]
    results = {}

    def worker(n: int) -> None:
        results[n] = [comparator.compare(a, b) for a, b in pairs]

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(r == expected for r in results.values())
