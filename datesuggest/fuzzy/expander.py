"""Input expansion for partially typed date phrases.

Turns raw user text like "3 mont", "nxt fri" or "tom" into candidate
strings a date engine is more likely to understand. Every rule below is
an independent handler; all of them run on every input and their
candidates are merged.
"""

import re
from collections.abc import Callable

from datesuggest.fuzzy.edit_distance import within_distance

TIME_UNITS = ["day", "days", "week", "weeks", "month", "months", "year", "years"]
WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
KEYWORDS = ["today", "tomorrow", "yesterday"]
PERIODS = ["week", "month", "year"]

# Units suggested when the user has typed only a number
COMMON_UNITS = ["days", "weeks", "months"]

# Shortest fragment eligible for typo correction
MIN_FUZZY_LENGTH = 3

_NUMBER_UNIT = re.compile(r"^(\d+)\s+(\w+)$", re.ASCII)
_IN_NUMBER = re.compile(r"^in\s+(\d+)\s*(\w*)$", re.ASCII)
_NEXT_LAST = re.compile(r"^(next|last)\s+(\w*)$", re.ASCII)
_BARE_NUMBER = re.compile(r"^\d+$", re.ASCII)

Handler = Callable[[str], list[str]]


def complete_unit(prefix: str, partial: str) -> list[str]:
    """Complete a partial time unit after a number prefix.

    Prefix matches win outright; typo matches (one edit away) are only
    tried when no unit starts with the fragment.

    Args:
        prefix: Text placed before the unit (e.g. "3" or "in 3")
        partial: Fragment typed so far (e.g. "mont" or "moths")

    Returns:
        Candidates of the form "<prefix> <unit>"
    """
    completions = [f"{prefix} {unit}" for unit in TIME_UNITS if unit.startswith(partial)]
    if completions or len(partial) < MIN_FUZZY_LENGTH:
        return completions

    return [f"{prefix} {unit}" for unit in TIME_UNITS if within_distance(partial, unit)]


def _expand_number_unit(text: str) -> list[str]:
    """'3 mont' -> '3 month', '3 months'."""
    match = _NUMBER_UNIT.match(text)
    if not match:
        return []
    number, partial = match.groups()
    return complete_unit(number, partial)


def _expand_in_number(text: str) -> list[str]:
    """'in 2' -> 'in 2 days', ...; 'in 2 we' -> 'in 2 week', 'in 2 weeks'."""
    match = _IN_NUMBER.match(text)
    if not match:
        return []
    number, partial = match.groups()
    if not partial:
        return [f"in {number} {unit}" for unit in COMMON_UNITS]
    return complete_unit(f"in {number}", partial)


def _expand_next_last(text: str) -> list[str]:
    """'next fri' -> 'next friday'; 'last mo' -> 'last monday', 'last month'."""
    match = _NEXT_LAST.match(text)
    if not match:
        return []
    direction, partial = match.groups()
    if not partial:
        return [f"{direction} {term}" for term in [*WEEKDAYS, "week", "month"]]

    return [
        f"{direction} {term}"
        for term in [*WEEKDAYS, *PERIODS]
        if term.startswith(partial) or within_distance(partial, term)
    ]


def _complete_word(text: str, vocabulary: list[str]) -> list[str]:
    matches = []
    for word in vocabulary:
        if word.startswith(text) and word != text:
            matches.append(word)
        elif len(text) >= MIN_FUZZY_LENGTH and within_distance(text, word):
            matches.append(word)
    return matches


def _expand_keyword(text: str) -> list[str]:
    """'tom' -> 'tomorrow'; 'tommorrow' -> 'tomorrow'."""
    return _complete_word(text, KEYWORDS)


def _expand_weekday(text: str) -> list[str]:
    """'fri' -> 'friday'; 'fridy' -> 'friday'."""
    return _complete_word(text, WEEKDAYS)


def _expand_bare_number(text: str) -> list[str]:
    """'3' -> '3 days', '3 weeks', '3 months'."""
    if not _BARE_NUMBER.match(text):
        return []
    return [f"{text} {unit}" for unit in COMMON_UNITS]


HANDLERS: list[Handler] = [
    _expand_number_unit,
    _expand_in_number,
    _expand_next_last,
    _expand_keyword,
    _expand_weekday,
    _expand_bare_number,
]


def expand_partial_input(text: str) -> list[str]:
    """Expand raw user text into de-duplicated candidate strings.

    The raw text is always the first candidate. Matching is done on the
    lowercased, trimmed text; the produced candidates are built from
    lowercase fragments.

    Args:
        text: Raw query as typed

    Returns:
        Candidates with the raw text first, duplicates removed

    Examples:
        >>> expand_partial_input("next fri")
        ['next fri', 'next friday']
        >>> expand_partial_input("5")
        ['5', '5 days', '5 weeks', '5 months']
    """
    lower = text.lower().strip()
    if not lower:
        return [text]

    candidates = [text]
    for handler in HANDLERS:
        candidates.extend(handler(lower))

    return list(dict.fromkeys(candidates))
