"""
Request and Response models for the /ai API.

These Pydantic models define the contract between the iOS client and
the server. Insight labels are str Enums so they serialize as their
plain values.
"""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dayrhythm.models.events import DATE_PATTERN

MAX_SCHEDULE_IMAGES = 3


# ============================================================
# Labels
# ============================================================

class EnergyLevel(str, Enum):
    """Typical energy for the hour an event starts in."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TaskType(str, Enum):
    """Fine task bucket used for energy alignment."""
    DEEP_WORK = "deep-work"
    MEETINGS = "meetings"
    ADMIN = "admin"
    CREATIVE = "creative"
    OTHER = "other"


class Alignment(str, Enum):
    """How well a task type fits the energy of its slot."""
    OPTIMAL = "optimal"
    GOOD = "good"
    POOR = "poor"


class FocusQuality(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FRAGMENTED = "fragmented"


class BroadCategory(str, Enum):
    """Coarse bucket used for work/life balance only."""
    WORK = "work"
    PERSONAL = "personal"
    HEALTH = "health"
    OTHER = "other"


# ============================================================
# Visual insights
# ============================================================

class EnergyHeatmapEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    start_time: float = Field(..., alias="startTime")
    end_time: float = Field(..., alias="endTime")
    optimal_energy: EnergyLevel = Field(..., alias="optimalEnergy")
    actual_task_type: TaskType = Field(..., alias="actualTaskType")
    alignment: Alignment
    category: Optional[str] = None


class FocusBlock(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    start_time: float = Field(..., alias="startTime")
    duration: float
    quality: FocusQuality
    has_break_after: bool = Field(..., alias="hasBreakAfter")
    category: Optional[str] = None


class WorkLifeBalance(BaseModel):
    """
    Hours and integer percentages per BroadCategory plus a 0-100 score.

    The default instance is the zero-valued balance used for empty days.
    """
    model_config = ConfigDict(populate_by_name=True)

    work: float = 0
    personal: float = 0
    health: float = 0
    other: float = 0
    work_percentage: int = Field(default=0, alias="workPercentage")
    personal_percentage: int = Field(default=0, alias="personalPercentage")
    health_percentage: int = Field(default=0, alias="healthPercentage")
    other_percentage: int = Field(default=0, alias="otherPercentage")
    balance_score: int = Field(default=0, alias="balanceScore")


class VisualInsights(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    energy_heatmap: List[EnergyHeatmapEntry] = Field(default_factory=list, alias="energyHeatmap")
    focus_blocks: List[FocusBlock] = Field(default_factory=list, alias="focusBlocks")
    work_life_balance: WorkLifeBalance = Field(
        default_factory=WorkLifeBalance, alias="workLifeBalance"
    )


# ============================================================
# Requests
# ============================================================

class InsightsRequest(BaseModel):
    date: str = Field(..., pattern=DATE_PATTERN, examples=["2025-10-25"])


class ParseScheduleRequest(BaseModel):
    prompt: str = Field(
        ...,
        min_length=1,
        description="Natural language description of the schedule",
        examples=["Meeting at 3pm and dinner at 7pm"],
    )


class ParseImageRequest(BaseModel):
    image: str = Field(..., min_length=1, description="Base64 encoded image")
    prompt: Optional[str] = None


class ParseImagesRequest(BaseModel):
    images: List[str] = Field(..., description="Up to 3 base64 encoded images")
    prompt: Optional[str] = None

    @field_validator("images")
    @classmethod
    def _check_image_count(cls, images: List[str]) -> List[str]:
        if not images:
            raise ValueError("At least one image (base64 encoded) is required")
        if len(images) > MAX_SCHEDULE_IMAGES:
            raise ValueError(f"Maximum {MAX_SCHEDULE_IMAGES} images allowed")
        return images


class AnalyticsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_date: str = Field(..., pattern=DATE_PATTERN, alias="startDate")
    end_date: str = Field(..., pattern=DATE_PATTERN, alias="endDate")


class TaskInsightRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    start_time: float = Field(..., alias="startTime")
    end_time: float = Field(..., alias="endTime")
    category: Optional[str] = None


# ============================================================
# Responses
# ============================================================

class DayInsights(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    insights: List[str]
    visual_insights: VisualInsights = Field(..., alias="visualInsights")


class DayInsightsResponse(BaseModel):
    success: bool = True
    data: DayInsights


class ParsedSchedule(BaseModel):
    events: List[Dict[str, Any]]


class ParsedScheduleResponse(BaseModel):
    success: bool = True
    data: ParsedSchedule


class DateRange(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_date: str = Field(..., alias="startDate")
    end_date: str = Field(..., alias="endDate")


class RangeAnalytics(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    summary: str
    total_events: int = Field(..., alias="totalEvents")
    total_hours: float = Field(..., alias="totalHours")
    average_events_per_day: float = Field(..., alias="averageEventsPerDay")
    date_range: DateRange = Field(..., alias="dateRange")


class RangeAnalyticsResponse(BaseModel):
    success: bool = True
    data: RangeAnalytics


class TaskInsight(BaseModel):
    insight: str


class TaskInsightResponse(BaseModel):
    success: bool = True
    data: TaskInsight
