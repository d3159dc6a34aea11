"""Fuzzy natural-language date parsing.

This module provides:
- expand_partial_input: Prefix and typo completion of partial date phrases
- score_result: Multi-factor ranking heuristic for parsed candidates
- FuzzyDateResolver: Engine fan-out, per-day de-duplication and ranking
- Label helpers and schemas for ranked suggestions
"""

from datesuggest.fuzzy.aggregator import FuzzyDateResolver, resolve_dates
from datesuggest.fuzzy.edit_distance import edit_distance
from datesuggest.fuzzy.expander import expand_partial_input
from datesuggest.fuzzy.labels import relative_text, result_label
from datesuggest.fuzzy.schemas import ParseHit, ScoredResult
from datesuggest.fuzzy.scorer import score_result

__all__ = [
    "FuzzyDateResolver",
    "ParseHit",
    "ScoredResult",
    "edit_distance",
    "expand_partial_input",
    "relative_text",
    "resolve_dates",
    "result_label",
    "score_result",
]
