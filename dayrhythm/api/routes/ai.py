"""
AI Routes - Insights, schedule parsing and analytics.

All endpoints require a bearer token except /ai/test-parse, which is a
public alias of /ai/parse-schedule for trying the parser.
"""
from fastapi import APIRouter, Depends

from dayrhythm.api.dependencies import get_current_user, get_services
from dayrhythm.core.logging_config import get_logger
from dayrhythm.database.auth import AuthenticatedUser
from dayrhythm.models.ai import (
    AnalyticsRequest,
    DayInsightsResponse,
    InsightsRequest,
    ParsedSchedule,
    ParsedScheduleResponse,
    ParseImageRequest,
    ParseImagesRequest,
    ParseScheduleRequest,
    RangeAnalyticsResponse,
    TaskInsight,
    TaskInsightRequest,
    TaskInsightResponse,
)
from dayrhythm.models.common import ErrorResponse
from dayrhythm.services.container import ServiceContainer

logger = get_logger(__name__)

router = APIRouter(
    prefix="/ai",
    tags=["AI"],
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        500: {"model": ErrorResponse, "description": "Upstream failure"},
    },
)


@router.post(
    "/insights",
    response_model=DayInsightsResponse,
    summary="Generate insights for a day",
)
async def generate_day_insights(
    request: InsightsRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    services: ServiceContainer = Depends(get_services),
) -> DayInsightsResponse:
    """
    Five text insights plus energy heatmap, focus blocks and work/life
    balance for the caller's events on `date`.
    """
    data = await services.insights.generate_day_insights(user.id, request.date)
    return DayInsightsResponse(data=data)


@router.post(
    "/test-parse",
    response_model=ParsedScheduleResponse,
    summary="Parse natural language into events (no auth)",
)
async def test_parse_schedule(
    request: ParseScheduleRequest,
    services: ServiceContainer = Depends(get_services),
) -> ParsedScheduleResponse:
    events = await services.schedules.parse_text(request.prompt)
    return ParsedScheduleResponse(data=ParsedSchedule(events=events))


@router.post(
    "/parse-schedule",
    response_model=ParsedScheduleResponse,
    summary="Parse natural language into events (Groq)",
)
async def parse_schedule(
    request: ParseScheduleRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    services: ServiceContainer = Depends(get_services),
) -> ParsedScheduleResponse:
    events = await services.schedules.parse_text(request.prompt)
    return ParsedScheduleResponse(data=ParsedSchedule(events=events))


@router.post(
    "/parse-schedule-pro",
    response_model=ParsedScheduleResponse,
    summary="Parse natural language into events (Gemini)",
    responses={503: {"model": ErrorResponse, "description": "Gemini not configured"}},
)
async def parse_schedule_pro(
    request: ParseScheduleRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    services: ServiceContainer = Depends(get_services),
) -> ParsedScheduleResponse:
    events = await services.schedules.parse_text_pro(request.prompt)
    return ParsedScheduleResponse(data=ParsedSchedule(events=events))


@router.post(
    "/parse-schedule-image",
    response_model=ParsedScheduleResponse,
    summary="Extract events from a timetable image",
    responses={503: {"model": ErrorResponse, "description": "Gemini not configured"}},
)
async def parse_schedule_image(
    request: ParseImageRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    services: ServiceContainer = Depends(get_services),
) -> ParsedScheduleResponse:
    events = await services.schedules.parse_image(request.image, request.prompt)
    return ParsedScheduleResponse(data=ParsedSchedule(events=events))


@router.post(
    "/parse-schedule-images",
    response_model=ParsedScheduleResponse,
    summary="Extract events from up to three timetable images",
    responses={503: {"model": ErrorResponse, "description": "Gemini not configured"}},
)
async def parse_schedule_images(
    request: ParseImagesRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    services: ServiceContainer = Depends(get_services),
) -> ParsedScheduleResponse:
    events = await services.schedules.parse_images(request.images, request.prompt)
    return ParsedScheduleResponse(data=ParsedSchedule(events=events))


@router.post(
    "/analytics",
    response_model=RangeAnalyticsResponse,
    summary="Productivity statistics for a date range",
)
async def generate_analytics(
    request: AnalyticsRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    services: ServiceContainer = Depends(get_services),
) -> RangeAnalyticsResponse:
    data = await services.analytics.range_analytics(user.id, request.start_date, request.end_date)
    return RangeAnalyticsResponse(data=data)


@router.post(
    "/task-insight",
    response_model=TaskInsightResponse,
    summary="Two quick tips for a single task",
)
async def generate_task_insight(
    request: TaskInsightRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    services: ServiceContainer = Depends(get_services),
) -> TaskInsightResponse:
    """Never fails on inference errors; falls back to a time-of-day template."""
    insight = await services.analytics.task_insight(request)
    return TaskInsightResponse(data=TaskInsight(insight=insight))
