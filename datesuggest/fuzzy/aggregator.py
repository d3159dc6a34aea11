"""Fuzzy date resolution pipeline.

raw text -> candidates -> engine hits -> scores -> best hit per day ->
ranked, capped suggestions.
"""

from datetime import date, datetime
from typing import TYPE_CHECKING

import structlog

from datesuggest.config import settings
from datesuggest.fuzzy.expander import expand_partial_input
from datesuggest.fuzzy.labels import relative_text, result_label
from datesuggest.fuzzy.schemas import ParseHit, ScoredResult
from datesuggest.fuzzy.scorer import score_result

if TYPE_CHECKING:
    from datesuggest.engine.base import DateEngine

logger = structlog.get_logger()


class FuzzyDateResolver:
    """Resolves partially typed text into ranked date suggestions.

    Stateless between calls: every resolve() recomputes from scratch, so
    the same arguments always produce the same ordered output.
    """

    def __init__(
        self,
        engine: "DateEngine | None" = None,
        max_results: int | None = None,
    ):
        """Initialize resolver.

        Args:
            engine: Date engine used to parse candidates (defaults to
                DateparserEngine)
            max_results: Result cap (defaults to settings.max_results)
        """
        if engine is None:
            from datesuggest.engine.dateparser_engine import DateparserEngine

            engine = DateparserEngine()
        self._engine = engine
        self._max_results = max_results or settings.max_results

    def resolve(
        self,
        query: str,
        reference_date: datetime | None = None,
        min_date: date | None = None,
        max_date: date | None = None,
    ) -> list[ScoredResult]:
        """Resolve query into at most max_results suggestions, best first.

        min_date and max_date never filter results. Callers mark
        out-of-range suggestions as disabled themselves (see
        datesuggest.picker.selection).

        Args:
            query: Raw text as typed
            reference_date: Anchor for relative expressions (defaults to now)
            min_date: Lower selectable bound, informational only
            max_date: Upper selectable bound, informational only

        Returns:
            At most one suggestion per calendar day, sorted by score
            descending. Empty for blank queries.
        """
        if not query.strip():
            return []

        reference = reference_date or datetime.now()
        candidates = expand_partial_input(query)

        best: dict[date, tuple[ParseHit, str, float]] = {}
        for candidate in candidates:
            for hit in self._parse_candidate(candidate, reference):
                score = score_result(query, candidate, hit.date, reference)
                existing = best.get(hit.day)
                if existing is None or score > existing[2]:
                    best[hit.day] = (hit, candidate, score)

        results = [
            ScoredResult(
                date=hit.date,
                label=result_label(hit.date, reference, hit.text),
                relative_text=relative_text(hit.date, reference),
                score=score,
                candidate=candidate,
                matched_text=hit.text,
            )
            for hit, candidate, score in best.values()
        ]
        results.sort(key=lambda result: result.score, reverse=True)

        logger.debug(
            "resolved fuzzy date query",
            query=query,
            candidates=len(candidates),
            days=len(results),
            min_date=min_date,
            max_date=max_date,
        )
        return results[: self._max_results]

    def _parse_candidate(self, candidate: str, reference: datetime) -> list[ParseHit]:
        """Run the engine on one candidate; failures contribute no hits."""
        try:
            return self._engine.parse(candidate, reference, forward_date=True) or []
        except Exception as e:
            logger.warning("engine parse failed", candidate=candidate, error=str(e))
            return []


def resolve_dates(
    query: str,
    reference_date: datetime | None = None,
    min_date: date | None = None,
    max_date: date | None = None,
) -> list[ScoredResult]:
    """Resolve query with the default dateparser-backed resolver."""
    return FuzzyDateResolver().resolve(query, reference_date, min_date, max_date)
