"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from datesuggest.api.router import api_router
from datesuggest.config import settings
from datesuggest.engine.dateparser_engine import DateparserEngine
from datesuggest.fuzzy.aggregator import FuzzyDateResolver

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan management.

    Startup:
    - Build the dateparser engine and fuzzy resolver
    """
    logger.info(f"Starting {settings.app_name}...")

    engine = DateparserEngine(
        languages=settings.engine_languages,
        search_fallback=settings.engine_search_fallback,
    )
    app.state.resolver = FuzzyDateResolver(
        engine=engine, max_results=settings.max_results
    )
    logger.info(
        f"Fuzzy date resolver initialized (languages={settings.engine_languages})"
    )

    yield

    logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(
    title=settings.app_name,
    description="Fuzzy natural-language date suggestions for date pickers",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "datesuggest.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
