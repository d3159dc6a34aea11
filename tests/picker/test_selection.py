"""Tests for suggestion selectability helpers."""

from datetime import date, datetime

import pytest

from datesuggest.picker.selection import (
    first_enabled_index,
    is_date_disabled,
    next_enabled_index,
)

MIN = date(2024, 1, 10)
MAX = date(2024, 1, 20)

# in range, before, in range, after, in range
DATES = [
    datetime(2024, 1, 12),
    datetime(2024, 1, 5),
    datetime(2024, 1, 15),
    datetime(2024, 2, 1),
    datetime(2024, 1, 20, 18, 30),
]


class TestIsDateDisabled:
    """Tests for is_date_disabled function."""

    def test_no_bounds_never_disabled(self):
        """Without bounds every date is selectable."""
        assert is_date_disabled(datetime(1900, 1, 1)) is False

    def test_bounds_are_inclusive(self):
        """The bound days themselves are selectable."""
        assert is_date_disabled(MIN, MIN, MAX) is False
        assert is_date_disabled(MAX, MIN, MAX) is False

    def test_time_of_day_ignored(self):
        """Evening of the last day is still in range."""
        assert is_date_disabled(datetime(2024, 1, 20, 23, 59), MIN, MAX) is False

    def test_before_min(self):
        """Days before min_date are disabled."""
        assert is_date_disabled(date(2024, 1, 9), MIN, MAX) is True

    def test_after_max(self):
        """Days after max_date are disabled."""
        assert is_date_disabled(date(2024, 1, 21), MIN, MAX) is True

    def test_datetime_bounds(self):
        """Bounds may be datetimes; only their day counts."""
        assert is_date_disabled(date(2024, 1, 10), datetime(2024, 1, 10, 12), None) is False


class TestFirstEnabledIndex:
    """Tests for first_enabled_index function."""

    def test_first_in_range(self):
        """Returns the first selectable position."""
        assert first_enabled_index(DATES[1:], MIN, MAX) == 1

    def test_all_disabled(self):
        """Returns None when nothing is selectable."""
        assert first_enabled_index([date(2023, 1, 1)], MIN, MAX) is None

    def test_empty(self):
        """Returns None for an empty list."""
        assert first_enabled_index([], MIN, MAX) is None


class TestNextEnabledIndex:
    """Tests for next_enabled_index function."""

    def test_down_skips_disabled(self):
        """Moving down jumps over out-of-range entries."""
        assert next_enabled_index(DATES, 0, 1, MIN, MAX) == 2
        assert next_enabled_index(DATES, 2, 1, MIN, MAX) == 4

    def test_up_skips_disabled(self):
        """Moving up jumps over out-of-range entries."""
        assert next_enabled_index(DATES, 2, -1, MIN, MAX) == 0

    def test_stays_at_edges(self):
        """Stays put when there is nothing selectable further on."""
        assert next_enabled_index(DATES, 4, 1, MIN, MAX) == 4
        assert next_enabled_index(DATES, 0, -1, MIN, MAX) == 0

    def test_invalid_direction(self):
        """Direction must be a single step."""
        with pytest.raises(ValueError):
            next_enabled_index(DATES, 0, 2)
