"""
Health Check Routes - Liveness endpoint.

Used by the hosting platform and uptime monitors. It does not check
Supabase or LLM connectivity.
"""
from fastapi import APIRouter

from dayrhythm.core.logging_config import get_logger
from dayrhythm.models.common import HealthResponse

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)

SERVICE_MESSAGE = "DayRhythm AI Backend is running"
SERVICE_NAME = "AI & Analytics Service"


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check endpoint",
)
async def health_check() -> HealthResponse:
    """Report that the API is running. No authentication required."""
    logger.debug("Health check requested")

    return HealthResponse(message=SERVICE_MESSAGE, service=SERVICE_NAME)
