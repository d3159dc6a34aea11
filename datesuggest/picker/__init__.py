"""Caller-side helpers for presenting ranked date suggestions."""

from datesuggest.picker.selection import (
    first_enabled_index,
    is_date_disabled,
    next_enabled_index,
)

__all__ = ["first_enabled_index", "is_date_disabled", "next_enabled_index"]
