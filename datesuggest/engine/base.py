"""Date engine interface.

The fuzzy resolver treats natural-language date parsing as a black box:
given text and a reference instant, an engine returns zero or more hits.
"""

from datetime import datetime
from typing import Protocol

from datesuggest.fuzzy.schemas import ParseHit


class DateEngine(Protocol):
    """Natural-language date engine consumed by FuzzyDateResolver."""

    def parse(
        self,
        text: str,
        reference_date: datetime,
        forward_date: bool = True,
    ) -> list[ParseHit]:
        """Parse text into date hits.

        Args:
            text: Candidate text to parse
            reference_date: Anchor for relative expressions
            forward_date: Resolve ambiguous expressions (e.g. a bare
                weekday) to their next future occurrence

        Returns:
            Zero or more hits, each with the resolved date and the
            substring that was matched
        """
        ...
