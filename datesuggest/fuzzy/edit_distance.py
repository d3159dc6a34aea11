"""Edit distance for typo-tolerant token matching.

Thin wrapper over RapidFuzz's Levenshtein implementation. Distances are
computed over code points and are case-sensitive; callers lowercase first.
"""

from rapidfuzz.distance import Levenshtein


def edit_distance(a: str, b: str) -> int:
    """Minimum number of single-character insertions, deletions or substitutions.

    Args:
        a: First string
        b: Second string

    Returns:
        Levenshtein distance between a and b (0 when identical, len of the
        other string when one is empty)

    Examples:
        >>> edit_distance("tommorrow", "tomorrow")
        1
        >>> edit_distance("", "day")
        3
    """
    return Levenshtein.distance(a, b)


def within_distance(a: str, b: str, max_distance: int = 1) -> bool:
    """Check whether a and b are at most max_distance edits apart.

    With score_cutoff set, RapidFuzz stops early and reports
    max_distance + 1 for anything further apart.
    """
    return Levenshtein.distance(a, b, score_cutoff=max_distance) <= max_distance
