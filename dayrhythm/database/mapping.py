"""
Event mapping between the API (camelCase) and Supabase (snake_case).

The iOS client speaks EventRecord; the `events` table stores EventRow.
Defaults are applied on the way in so stored rows are always complete,
and again on the way out for older rows that predate a column.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from dayrhythm.models.events import (
    EventCreate,
    EventRecord,
    EventRow,
    EventUpdate,
    NotificationSettings,
)


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def default_notification_settings() -> Dict[str, Any]:
    return NotificationSettings().model_dump(by_alias=True)


def to_row(event: EventCreate, user_id: str, now: Optional[str] = None) -> EventRow:
    """Build the row to insert for a new event owned by `user_id`."""
    now = now or utc_timestamp()
    settings = event.notification_settings or NotificationSettings()
    return EventRow(
        user_id=user_id,
        title=event.title,
        description=event.description or None,
        start_time=event.start_time,
        end_time=event.end_time,
        date=event.date,
        emoji=event.emoji or None,
        color_hex=event.color_hex or None,
        category=event.category or None,
        participants=event.participants or [],
        is_completed=event.is_completed or False,
        notification_settings=settings.model_dump(by_alias=True),
        created_at=now,
        updated_at=now,
    )


def update_to_columns(update: EventUpdate, now: Optional[str] = None) -> Dict[str, Any]:
    """
    Column values for a partial update.

    Only fields present in the request body are included; updated_at is
    always refreshed. Attribute names already match column names.
    """
    columns: Dict[str, Any] = {"updated_at": now or utc_timestamp()}
    for name, value in update.model_dump(exclude_unset=True, exclude_none=True).items():
        if name == "notification_settings":
            # stored with the client's camelCase keys
            value = update.notification_settings.model_dump(by_alias=True)
        columns[name] = value
    return columns


def from_row(row: Mapping[str, Any]) -> EventRecord:
    """Convert a stored row (dict from Supabase) into an EventRecord."""
    data = dict(row)
    if data.get("id") is not None:
        data["id"] = str(data["id"])
    parsed = EventRow.model_validate(data)

    return EventRecord(
        id=parsed.id,
        user_id=parsed.user_id,
        title=parsed.title,
        description=parsed.description,
        start_time=parsed.start_time,
        end_time=parsed.end_time,
        date=parsed.date,
        emoji=parsed.emoji,
        color_hex=parsed.color_hex,
        category=parsed.category,
        participants=parsed.participants or [],
        is_completed=parsed.is_completed or False,
        notification_settings=NotificationSettings.model_validate(
            parsed.notification_settings or default_notification_settings()
        ),
        created_at=parsed.created_at,
        updated_at=parsed.updated_at,
    )
