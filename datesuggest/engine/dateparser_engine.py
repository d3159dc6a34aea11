"""Date engine backed by dateparser.

Parses the whole candidate first and, when that fails, searches the
candidate for embedded date expressions so that "next fri" can still
yield a hit for "fri".
"""

from datetime import datetime

import dateparser
import structlog
from dateparser.search import search_dates

from datesuggest.config import settings
from datesuggest.fuzzy.schemas import ParseHit

logger = structlog.get_logger()


class DateparserEngine:
    """Natural-language date engine using dateparser."""

    def __init__(
        self,
        languages: list[str] | None = None,
        search_fallback: bool | None = None,
    ):
        """Initialize engine.

        Args:
            languages: Languages handed to dateparser (defaults to settings)
            search_fallback: Search for dates inside the text when the
                whole string does not parse (defaults to settings)
        """
        self._languages = languages or list(settings.engine_languages)
        self._search_fallback = (
            settings.engine_search_fallback if search_fallback is None else search_fallback
        )

    def parse(
        self,
        text: str,
        reference_date: datetime,
        forward_date: bool = True,
    ) -> list[ParseHit]:
        """Parse text relative to reference_date.

        Args:
            text: Candidate text (e.g. "3 months", "friday")
            reference_date: Anchor for relative expressions
            forward_date: Prefer future dates for ambiguous expressions

        Returns:
            Hits found in text, or an empty list if nothing parsed

        Examples:
            >>> engine = DateparserEngine()
            >>> engine.parse("tomorrow", datetime(2026, 1, 18))[0].date.date()
            datetime.date(2026, 1, 19)
        """
        if not text.strip():
            return []

        date_settings: dict = {
            "RELATIVE_BASE": reference_date.replace(tzinfo=None),
            "PREFER_DATES_FROM": "future" if forward_date else "current_period",
            "RETURN_AS_TIMEZONE_AWARE": False,
        }

        try:
            parsed = dateparser.parse(
                text, languages=self._languages, settings=date_settings
            )
            if parsed is not None:
                return [ParseHit(date=parsed, text=text)]

            if not self._search_fallback:
                return []

            found = search_dates(
                text, languages=self._languages, settings=date_settings
            )
        except Exception as e:
            # dateparser can raise various exceptions on malformed input
            logger.debug("dateparser failed", text=text, error=str(e))
            return []

        return [ParseHit(date=value, text=matched) for matched, value in found or []]
