"""
Models module - Pydantic schemas for data validation.

This module defines:
- Request models: Input validation for API endpoints
- Response models: Output formatting for API responses
- Record models: Event shapes on each side of the store boundary
"""
from dayrhythm.models.common import HealthResponse, ErrorResponse
from dayrhythm.models.events import (
    EventCreate,
    EventUpdate,
    EventRecord,
    EventRow,
    BatchSyncRequest,
    NotificationSettings,
)
from dayrhythm.models.ai import (
    EnergyLevel,
    TaskType,
    Alignment,
    FocusQuality,
    BroadCategory,
    EnergyHeatmapEntry,
    FocusBlock,
    WorkLifeBalance,
    VisualInsights,
)

__all__ = [
    "HealthResponse",
    "ErrorResponse",
    "EventCreate",
    "EventUpdate",
    "EventRecord",
    "EventRow",
    "BatchSyncRequest",
    "NotificationSettings",
    "EnergyLevel",
    "TaskType",
    "Alignment",
    "FocusQuality",
    "BroadCategory",
    "EnergyHeatmapEntry",
    "FocusBlock",
    "WorkLifeBalance",
    "VisualInsights",
]
