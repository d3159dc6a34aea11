"""API router aggregation."""

from fastapi import APIRouter

from datesuggest.api.health import router as health_router
from datesuggest.api.suggest import router as suggest_router

api_router = APIRouter()
api_router.include_router(health_router)
# Fuzzy date suggestion endpoints
api_router.include_router(suggest_router)
