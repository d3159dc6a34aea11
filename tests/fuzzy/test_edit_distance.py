"""Tests for edit distance metric."""

import pytest

from datesuggest.fuzzy.edit_distance import edit_distance, within_distance


class TestEditDistance:
    """Tests for edit_distance function."""

    def test_identical_strings_zero(self):
        """Identical strings are 0 edits apart."""
        assert edit_distance("tomorrow", "tomorrow") == 0

    @pytest.mark.parametrize(("a", "b"), [("", "days"), ("days", "")])
    def test_empty_string_is_length_of_other(self, a: str, b: str):
        """Distance to an empty string is the other string's length."""
        assert edit_distance(a, b) == 4

    def test_classic_example(self):
        """kitten -> sitting takes 3 edits."""
        assert edit_distance("kitten", "sitting") == 3

    def test_single_insertion(self):
        """Doubled letter typo is one edit away."""
        assert edit_distance("tommorrow", "tomorrow") == 1

    def test_case_sensitive(self):
        """Case differences count as substitutions."""
        assert edit_distance("Day", "day") == 1

    def test_counts_code_points(self):
        """Non-ASCII characters count as one edit each."""
        assert edit_distance("café", "cafe") == 1


class TestWithinDistance:
    """Tests for within_distance function."""

    def test_one_edit_within_default(self):
        """One edit is within the default threshold."""
        assert within_distance("fridy", "friday") is True

    def test_two_edits_outside_default(self):
        """Two edits exceed the default threshold."""
        assert within_distance("moths", "month") is False

    def test_custom_threshold(self):
        """Threshold can be widened."""
        assert within_distance("moths", "month", max_distance=2) is True
