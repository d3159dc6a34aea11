"""Date suggestion API endpoints.

Exposes the fuzzy resolver to date picker front-ends: the client sends
whatever the user has typed so far and renders the ranked suggestions,
greying out the ones outside its selectable range.
"""

import datetime as dt

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel, Field

from datesuggest.fuzzy.aggregator import FuzzyDateResolver
from datesuggest.fuzzy.schemas import ScoredResult
from datesuggest.picker.selection import first_enabled_index, is_date_disabled

router = APIRouter(prefix="/dates", tags=["dates"])


class Suggestion(BaseModel):
    """Single date suggestion for API response."""

    label: str = Field(description="Display label, e.g. 'Tomorrow'")
    date: dt.datetime = Field(description="Resolved date")
    relative_text: str = Field(description="Offset from reference, e.g. 'in 3 days'")
    score: float = Field(description="Ranking score, higher first")
    disabled: bool = Field(description="True if outside [min_date, max_date]")

    @classmethod
    def from_scored_result(
        cls,
        result: ScoredResult,
        min_date: dt.date | None = None,
        max_date: dt.date | None = None,
    ) -> "Suggestion":
        """Convert internal ScoredResult to API response model."""
        return cls(
            label=result.label,
            date=result.date,
            relative_text=result.relative_text,
            score=result.score,
            disabled=is_date_disabled(result.date, min_date, max_date),
        )


class SuggestResponse(BaseModel):
    """Ranked suggestions for a query."""

    query: str = Field(description="Query as received")
    results: list[Suggestion] = Field(description="Suggestions, best first")
    first_enabled_index: int | None = Field(
        default=None,
        description="Index to highlight initially; null if nothing is selectable",
    )


def get_resolver(request: Request) -> FuzzyDateResolver:
    """Dependency to get FuzzyDateResolver from app state."""
    return request.app.state.resolver


@router.get("/suggest", response_model=SuggestResponse)
def suggest_dates(
    q: str = Query(default="", description="Text typed so far"),
    reference: dt.datetime | None = Query(
        default=None, description="Anchor for relative dates (defaults to now)"
    ),
    min_date: dt.date | None = Query(default=None, description="First selectable day"),
    max_date: dt.date | None = Query(default=None, description="Last selectable day"),
    resolver: FuzzyDateResolver = Depends(get_resolver),
) -> SuggestResponse:
    """Suggest dates for partially typed text.

    Blank queries return an empty list. Out-of-range suggestions are
    returned with disabled=true rather than dropped.
    """
    results = resolver.resolve(q, reference, min_date, max_date)
    suggestions = [
        Suggestion.from_scored_result(result, min_date, max_date) for result in results
    ]
    return SuggestResponse(
        query=q,
        results=suggestions,
        first_enabled_index=first_enabled_index(
            [s.date for s in suggestions], min_date, max_date
        ),
    )
