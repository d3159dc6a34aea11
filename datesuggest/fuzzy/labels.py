"""Display labels for ranked date suggestions.

Both helpers are pure: they depend only on the date, the reference date
and the matched text, never on the wall clock.
"""

from datetime import datetime


def _days_between(target: datetime, reference: datetime) -> int:
    return (target.date() - reference.date()).days


def result_label(parsed_date: datetime, reference_date: datetime, matched_text: str) -> str:
    """Label for a suggestion.

    Examples:
        "Today" / "Tomorrow" / "Yesterday" for adjacent days,
        "Monday" when the engine matched a "next ..." phrase,
        otherwise "Thu 15 Jan".
    """
    offset = _days_between(parsed_date, reference_date)
    if offset == 0:
        return "Today"
    if offset == 1:
        return "Tomorrow"
    if offset == -1:
        return "Yesterday"

    if "next" in matched_text.lower():
        return f"{parsed_date:%A}"

    return f"{parsed_date:%a} {parsed_date.day} {parsed_date:%b}"


def relative_text(parsed_date: datetime, reference_date: datetime) -> str:
    """Offset from the reference date, e.g. "in 3 days" or "5 days ago"."""
    offset = _days_between(parsed_date, reference_date)
    if offset == 0:
        return "today"
    if offset == 1:
        return "tomorrow"
    if offset == -1:
        return "yesterday"
    if offset > 0:
        return f"in {offset} days"
    return f"{abs(offset)} days ago"
