"""Ranking heuristics for fuzzy date candidates.

Scores are unbounded and only meaningful relative to each other:
- Base score of 50
- +100 when the engine understood the raw text without expansion
- Otherwise up to +40 for how much of the completed word was typed,
  minus 15 per edit for typo corrections
- Bonus for natural number/unit pairs ("3 days", "2 weeks")
- Bonus for dates in the coming week
"""

import re
from datetime import datetime

from datesuggest.fuzzy.edit_distance import edit_distance

BASE_SCORE = 50.0
EXACT_MATCH_BONUS = 100.0
PREFIX_WEIGHT = 40.0
FUZZY_PENALTY_PER_EDIT = 15.0

_NUMBER_UNIT = re.compile(
    r"(\d+)\s+(days?|weeks?|months?|years?)", re.ASCII | re.IGNORECASE
)

# unit stem -> (largest natural magnitude, bonus)
_NATURAL_MAGNITUDES: dict[str, tuple[int, float]] = {
    "day": (7, 15.0),
    "week": (4, 12.0),
    "month": (12, 10.0),
    "year": (5, 8.0),
}


def _last_tokens(original: str, candidate: str) -> tuple[str, str] | None:
    original_parts = original.split()
    candidate_parts = candidate.split()
    if not original_parts or not candidate_parts:
        return None
    return original_parts[-1], candidate_parts[-1]


def prefix_ratio(original: str, candidate: str) -> float:
    """Share of the candidate's last word that the user actually typed.

    "3 mont" against "3 months" compares "mont" to "months" -> 4/6.
    Returns 0.0 when the typed word is not a prefix of the completion.
    """
    tokens = _last_tokens(original, candidate)
    if tokens is None:
        return 0.0
    typed, completed = tokens
    if completed.startswith(typed):
        return len(typed) / len(completed)
    return 0.0


def fuzzy_penalty(original: str, candidate: str) -> int:
    """Edits needed to turn the typed last word into the candidate's.

    Zero when the typed word is a prefix of the completion.
    """
    tokens = _last_tokens(original, candidate)
    if tokens is None:
        return 0
    typed, completed = tokens
    if completed.startswith(typed):
        return 0
    return edit_distance(typed, completed)


def number_unit_bonus(candidate: str) -> float:
    """Bonus for commonly used number/unit combinations.

    Only the first "<number> <unit>" pair in the candidate is considered.
    """
    match = _NUMBER_UNIT.search(candidate)
    if not match:
        return 0.0

    # Natural magnitudes never exceed two digits
    digits = match.group(1).lstrip("0") or "0"
    if len(digits) > 2:
        return 0.0

    number = int(digits)
    unit = match.group(2).lower().rstrip("s")
    upper, bonus = _NATURAL_MAGNITUDES[unit]
    if 1 <= number <= upper:
        return bonus
    return 0.0


def proximity_bonus(parsed_date: datetime, reference_date: datetime) -> float:
    """Bonus for dates in the coming week, compared by calendar day."""
    days_until = (parsed_date.date() - reference_date.date()).days

    if days_until == 1:
        return 20.0
    if days_until == 0:
        return 15.0
    if 1 < days_until <= 7:
        return 10.0
    # Past dates and far future
    return 0.0


def score_result(
    original_input: str,
    expanded_candidate: str,
    parsed_date: datetime,
    reference_date: datetime,
) -> float:
    """Score a parsed candidate for ranking. Higher scores rank first.

    Args:
        original_input: Raw text as typed by the user
        expanded_candidate: Candidate string that produced parsed_date
        parsed_date: Date the engine resolved the candidate to
        reference_date: Anchor the candidate was resolved against

    Returns:
        Unclamped score; may be negative for heavy typo corrections
    """
    typed = original_input.lower().strip()
    candidate = expanded_candidate.lower().strip()

    score = BASE_SCORE
    if typed == candidate:
        score += EXACT_MATCH_BONUS
    else:
        score += prefix_ratio(typed, candidate) * PREFIX_WEIGHT
        score -= fuzzy_penalty(typed, candidate) * FUZZY_PENALTY_PER_EDIT

    score += number_unit_bonus(candidate)
    score += proximity_bonus(parsed_date, reference_date)
    return score
