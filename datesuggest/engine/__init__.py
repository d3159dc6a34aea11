"""Natural-language date engines consumed by the fuzzy resolver."""

from datesuggest.engine.base import DateEngine
from datesuggest.engine.dateparser_engine import DateparserEngine

__all__ = ["DateEngine", "DateparserEngine"]
