"""Pytest configuration and fixtures."""

from collections.abc import AsyncIterator, Callable
from datetime import datetime, timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from datesuggest.fuzzy.aggregator import FuzzyDateResolver
from datesuggest.fuzzy.schemas import ParseHit
from datesuggest.main import app

# Wednesday, January 10, 2024, mid-morning
REFERENCE_DATE = datetime(2024, 1, 10, 9, 0, 0)


class ScriptedEngine:
    """Date engine double returning scripted hits per candidate.

    The script maps exact candidate text to (day offset, matched text)
    pairs; offsets are applied to the reference date passed to parse().
    """

    def __init__(self, script: dict[str, list[tuple[int, str]]] | None = None):
        self.script = script or {}
        self.calls: list[str] = []
        self.forward_flags: list[bool] = []

    def parse(
        self,
        text: str,
        reference_date: datetime,
        forward_date: bool = True,
    ) -> list[ParseHit]:
        self.calls.append(text)
        self.forward_flags.append(forward_date)
        return [
            ParseHit(date=reference_date + timedelta(days=offset), text=matched)
            for offset, matched in self.script.get(text, [])
        ]


@pytest.fixture
def reference_date() -> datetime:
    """Fixed reference date for deterministic scoring."""
    return REFERENCE_DATE


@pytest.fixture
def make_engine() -> Callable[..., ScriptedEngine]:
    """Factory for scripted date engines."""
    return ScriptedEngine


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Create async test client for FastAPI app with a scripted resolver."""
    engine = ScriptedEngine({"tomorrow": [(1, "tomorrow")]})
    app.state.resolver = FuzzyDateResolver(engine=engine)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Clean up app state
    del app.state.resolver
