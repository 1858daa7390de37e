"""
API Routes module - Endpoint definitions.

Each file in this module defines routes for a specific domain:
- health.py : Health check endpoint
- ai.py     : Insights, schedule parsing and analytics
- events.py : Event CRUD

All of them are mounted under /api by api_router.
"""
from fastapi import APIRouter

from dayrhythm.api.routes.ai import router as ai_router
from dayrhythm.api.routes.events import router as events_router
from dayrhythm.api.routes.health import router as health_router

API_PREFIX = "/api"

api_router = APIRouter(prefix=API_PREFIX)
api_router.include_router(health_router)
api_router.include_router(ai_router)
api_router.include_router(events_router)

__all__ = [
    "API_PREFIX",
    "api_router",
    "ai_router",
    "events_router",
    "health_router",
]
