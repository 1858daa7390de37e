"""
Event Routes - CRUD for the authenticated user's events.

Everything is scoped to the caller: ids belonging to other users behave
exactly like ids that do not exist.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from dayrhythm.api.dependencies import get_current_user, get_services
from dayrhythm.core.logging_config import get_logger
from dayrhythm.database.auth import AuthenticatedUser
from dayrhythm.models.common import ErrorResponse
from dayrhythm.models.events import (
    DATE_PATTERN,
    BatchSyncRequest,
    BatchSyncResponse,
    EventCreate,
    EventListResponse,
    EventResponse,
    EventUpdate,
    MessageResponse,
)
from dayrhythm.services.container import ServiceContainer

logger = get_logger(__name__)

router = APIRouter(
    prefix="/events",
    tags=["Events"],
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        401: {"model": ErrorResponse, "description": "Missing or invalid token"},
        500: {"model": ErrorResponse, "description": "Store failure"},
    },
)


@router.get("", response_model=EventListResponse, summary="List events")
async def get_events(
    date: Optional[str] = Query(default=None, pattern=DATE_PATTERN),
    start_date: Optional[str] = Query(default=None, alias="startDate", pattern=DATE_PATTERN),
    end_date: Optional[str] = Query(default=None, alias="endDate", pattern=DATE_PATTERN),
    user: AuthenticatedUser = Depends(get_current_user),
    services: ServiceContainer = Depends(get_services),
) -> EventListResponse:
    """Filter by `date`, or by an inclusive `startDate`/`endDate` range."""
    events = await services.events.list_events(
        user.id, date=date, start_date=start_date, end_date=end_date
    )
    return EventListResponse(events=events, count=len(events))


@router.post("", response_model=EventResponse, status_code=201, summary="Create an event")
async def create_event(
    event: EventCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    services: ServiceContainer = Depends(get_services),
) -> EventResponse:
    created = await services.events.create_event(user.id, event)
    return EventResponse(event=created)


@router.post("/batch", response_model=BatchSyncResponse, summary="Bulk insert events")
async def batch_sync_events(
    request: BatchSyncRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    services: ServiceContainer = Depends(get_services),
) -> BatchSyncResponse:
    """With `clearExisting`, all of the caller's events are deleted first."""
    synced = await services.events.batch_sync(user.id, request)
    message = (
        "Events replaced successfully" if request.clear_existing else "Events synced successfully"
    )
    return BatchSyncResponse(events=synced, count=len(synced), message=message)


@router.put(
    "/{event_id}",
    response_model=EventResponse,
    summary="Update an event",
    responses={404: {"model": ErrorResponse, "description": "Event not found"}},
)
async def update_event(
    event_id: str,
    update: EventUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    services: ServiceContainer = Depends(get_services),
) -> EventResponse:
    updated = await services.events.update_event(user.id, event_id, update)
    return EventResponse(event=updated)


# Registered before /{event_id} so "all" is not taken as an id
@router.delete("/all", response_model=MessageResponse, summary="Delete all events")
async def delete_all_events(
    user: AuthenticatedUser = Depends(get_current_user),
    services: ServiceContainer = Depends(get_services),
) -> MessageResponse:
    await services.events.delete_all_events(user.id)
    return MessageResponse(message="All events deleted successfully")


@router.delete("/{event_id}", response_model=MessageResponse, summary="Delete an event")
async def delete_event(
    event_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    services: ServiceContainer = Depends(get_services),
) -> MessageResponse:
    await services.events.delete_event(user.id, event_id)
    return MessageResponse(message="Event deleted successfully")
