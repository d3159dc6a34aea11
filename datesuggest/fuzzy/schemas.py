"""Fuzzy date parsing schemas.

Defines the engine hit and the ranked suggestion returned to callers.
"""

import datetime as dt

from pydantic import BaseModel, Field


class ParseHit(BaseModel):
    """One date interpretation returned by a date engine for a candidate."""

    date: dt.datetime = Field(description="Resolved point in time")
    text: str = Field(description="Substring of the candidate the engine recognized")

    @property
    def day(self) -> dt.date:
        """Calendar day of the hit (time-of-day discarded)."""
        return self.date.date()


class ScoredResult(BaseModel):
    """Ranked date suggestion.

    Only the calendar day identifies a result; two hits on the same day
    are the same suggestion and the higher score wins.
    """

    date: dt.datetime = Field(description="Resolved point in time")
    label: str = Field(description="Display label, e.g. 'Tomorrow' or 'Thu 15 Jan'")
    relative_text: str = Field(description="Offset from reference, e.g. 'in 3 days'")
    score: float = Field(description="Desirability score, higher ranks first")
    candidate: str = Field(description="Expanded candidate that produced the hit")
    matched_text: str = Field(description="Substring the engine matched")

    @property
    def day(self) -> dt.date:
        """Day-key used for de-duplication."""
        return self.date.date()
