"""Selectability helpers for the suggestion list.

Suggestions outside [min_date, max_date] stay visible but are disabled;
keyboard traversal skips over them.
"""

from collections.abc import Sequence
from datetime import date, datetime


def _as_day(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def is_date_disabled(
    value: date | datetime,
    min_date: date | datetime | None = None,
    max_date: date | datetime | None = None,
) -> bool:
    """Check whether value falls outside the selectable range.

    Compared by calendar day; both bounds are inclusive and optional.
    """
    day = _as_day(value)
    if min_date is not None and day < _as_day(min_date):
        return True
    if max_date is not None and day > _as_day(max_date):
        return True
    return False


def first_enabled_index(
    dates: Sequence[date | datetime],
    min_date: date | datetime | None = None,
    max_date: date | datetime | None = None,
) -> int | None:
    """Index of the first selectable date, or None if all are disabled."""
    for index, value in enumerate(dates):
        if not is_date_disabled(value, min_date, max_date):
            return index
    return None


def next_enabled_index(
    dates: Sequence[date | datetime],
    current: int,
    direction: int,
    min_date: date | datetime | None = None,
    max_date: date | datetime | None = None,
) -> int:
    """Move from current in direction (+1 / -1) to the next selectable date.

    Args:
        dates: Suggestion dates in display order
        current: Currently highlighted index
        direction: 1 for down, -1 for up
        min_date: Lower selectable bound
        max_date: Upper selectable bound

    Returns:
        Index of the next enabled date, or current if there is none
    """
    if direction not in (1, -1):
        raise ValueError(f"direction must be 1 or -1, got {direction}")

    index = current + direction
    while 0 <= index < len(dates):
        if not is_date_disabled(dates[index], min_date, max_date):
            return index
        index += direction
    return current
