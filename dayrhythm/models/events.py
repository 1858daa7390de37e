"""
Event models for the /events API and the Supabase `events` table.

Two record types describe the same event:
- EventRecord: camelCase shape returned to the iOS client
- EventRow:    snake_case shape stored in Supabase

dayrhythm.database.mapping converts between them. Request payloads
(EventCreate / EventUpdate / BatchSyncRequest) are validated here.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class NotificationSettings(BaseModel):
    """Per-event local notification configuration."""
    model_config = ConfigDict(populate_by_name=True)

    enabled: bool = False
    minutes_before: List[float] = Field(default_factory=list, alias="minutesBefore")
    notification_ids: List[str] = Field(default_factory=list, alias="notificationIds")


class EventCreate(BaseModel):
    """
    Request model for creating an event.

    Times are decimal hours (15.5 = 3:30pm). endTime is not required
    to be later than startTime.
    """
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1, description="Event title")
    description: Optional[str] = None
    start_time: float = Field(..., ge=0, le=24, alias="startTime")
    end_time: float = Field(..., ge=0, le=24, alias="endTime")
    date: str = Field(
        ...,
        pattern=DATE_PATTERN,
        description="Date must be in YYYY-MM-DD format",
        examples=["2025-10-25"],
    )
    emoji: Optional[str] = None
    color_hex: Optional[str] = Field(default=None, alias="colorHex")
    category: Optional[str] = None
    participants: Optional[List[str]] = None
    is_completed: Optional[bool] = Field(default=None, alias="isCompleted")
    notification_settings: Optional[NotificationSettings] = Field(
        default=None, alias="notificationSettings"
    )


class EventUpdate(BaseModel):
    """Partial update; only fields present in the body are written."""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    start_time: Optional[float] = Field(default=None, ge=0, le=24, alias="startTime")
    end_time: Optional[float] = Field(default=None, ge=0, le=24, alias="endTime")
    date: Optional[str] = Field(default=None, pattern=DATE_PATTERN)
    emoji: Optional[str] = None
    color_hex: Optional[str] = Field(default=None, alias="colorHex")
    category: Optional[str] = None
    participants: Optional[List[str]] = None
    is_completed: Optional[bool] = Field(default=None, alias="isCompleted")
    notification_settings: Optional[NotificationSettings] = Field(
        default=None, alias="notificationSettings"
    )


class BatchSyncRequest(BaseModel):
    """Bulk insert, optionally replacing everything the caller has."""
    model_config = ConfigDict(populate_by_name=True)

    events: List[EventCreate]
    clear_existing: bool = Field(default=False, alias="clearExisting")


class EventRecord(BaseModel):
    """An event as seen by API clients (camelCase)."""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias="userId")
    title: str
    description: Optional[str] = None
    start_time: float = Field(..., alias="startTime")
    end_time: float = Field(..., alias="endTime")
    date: str
    emoji: Optional[str] = None
    color_hex: Optional[str] = Field(default=None, alias="colorHex")
    category: Optional[str] = None
    participants: List[str] = Field(default_factory=list)
    is_completed: bool = Field(default=False, alias="isCompleted")
    notification_settings: NotificationSettings = Field(
        default_factory=NotificationSettings, alias="notificationSettings"
    )
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")

    @property
    def duration(self) -> float:
        """Length in hours; negative when endTime precedes startTime."""
        return self.end_time - self.start_time


class EventRow(BaseModel):
    """A row of the Supabase `events` table (snake_case)."""

    id: Optional[str] = None
    user_id: str
    title: str
    description: Optional[str] = None
    start_time: float
    end_time: float
    date: str
    emoji: Optional[str] = None
    color_hex: Optional[str] = None
    category: Optional[str] = None
    participants: Optional[List[str]] = None
    is_completed: Optional[bool] = None
    notification_settings: Optional[dict] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class EventResponse(BaseModel):
    """Response for create/update."""
    success: bool = True
    event: EventRecord


class EventListResponse(BaseModel):
    """Response for listing events."""
    success: bool = True
    events: List[EventRecord]
    count: int


class BatchSyncResponse(EventListResponse):
    message: str


class MessageResponse(BaseModel):
    """Response for deletes."""
    success: bool = True
    message: str
