"""
Analytics Service - Date-range statistics and single-task tips.

- range_analytics: event count, hours and events/day over a date range
- task_insight:    two bullet tips for one task from Groq, with a
                   deterministic time-of-day template if Groq fails
"""
import math

from dayrhythm.analytics.rounding import round_half_up, round_half_up_int
from dayrhythm.core.exceptions import LLMError
from dayrhythm.core.logging_config import get_logger
from dayrhythm.database.store import EventStore
from dayrhythm.llm.client import LLMClient
from dayrhythm.llm.prompts import TASK_INSIGHT_SYSTEM_PROMPT, get_task_insight_user_prompt
from dayrhythm.models.ai import DateRange, RangeAnalytics, TaskInsightRequest

logger = get_logger(__name__)

EMPTY_RANGE_SUMMARY = "No events found in this date range."


def format_clock_time(start_time: float) -> str:
    """
    12-hour clock label for a decimal hour.

    Example:
        >>> format_clock_time(15.5)
        '3:30 PM'
    """
    hour = math.floor(start_time)
    minute = round_half_up_int((start_time - hour) * 60)
    if hour > 12:
        hour12 = hour - 12
    elif hour == 0:
        hour12 = 12
    else:
        hour12 = hour
    period = "PM" if hour >= 12 else "AM"
    return f"{hour12}:{minute:02d} {period}"


def format_duration(duration: float) -> str:
    if duration >= 1:
        return f"{duration:.1f} hours"
    return f"{round_half_up_int(duration * 60)} minutes"


def fallback_task_insight(hour: int, duration: float) -> str:
    """Template tips keyed on the start hour."""
    if hour < 10:
        return (
            "• Morning energy peak - tackle hardest parts first\n"
            f"• {duration:.1f}h duration works well for deep focus"
        )
    if hour < 14:
        return (
            "• Mid-day slot - break into 25min focused chunks\n"
            "• Good timing to build on morning momentum"
        )
    if hour < 18:
        return (
            "• Afternoon energy dip - pair with quick snack break\n"
            f"• {duration:.1f}h duration fits well before evening wind-down"
        )
    return (
        "• Evening hours - minimize distractions for best results\n"
        "• Create comfortable environment to maintain engagement"
    )


class AnalyticsService:
    """Range statistics and per-task insights."""

    def __init__(self, store: EventStore, llm: LLMClient):
        self.store = store
        self.llm = llm

    async def range_analytics(self, user_id: str, start_date: str, end_date: str) -> RangeAnalytics:
        """
        Summarize events between two dates (inclusive).

        averageEventsPerDay divides by the number of distinct dates that
        have events, not by the length of the range.
        """
        events = await self.store.list_events(user_id, start_date=start_date, end_date=end_date)
        date_range = DateRange(start_date=start_date, end_date=end_date)

        if not events:
            return RangeAnalytics(
                summary=EMPTY_RANGE_SUMMARY,
                total_events=0,
                total_hours=0,
                average_events_per_day=0,
                date_range=date_range,
            )

        total_events = len(events)
        total_hours = sum(event.duration for event in events)
        unique_dates = len({event.date for event in events})

        return RangeAnalytics(
            summary=f"Analyzed {total_events} events across {unique_dates} days",
            total_events=total_events,
            total_hours=round_half_up(total_hours, 1),
            average_events_per_day=round_half_up(total_events / unique_dates, 1),
            date_range=date_range,
        )

    async def task_insight(self, request: TaskInsightRequest) -> str:
        duration = request.end_time - request.start_time
        start_hour = math.floor(request.start_time)

        try:
            content = await self.llm.complete(
                system_prompt=TASK_INSIGHT_SYSTEM_PROMPT,
                user_message=get_task_insight_user_prompt(
                    title=request.title,
                    duration=format_duration(duration),
                    time=format_clock_time(request.start_time),
                    category=request.category or "General",
                ),
                temperature=0.7,
                max_tokens=80,
            )
        except LLMError as e:
            logger.warning(f"Task insight falling back to template: {e}")
            return fallback_task_insight(start_hour, duration)

        insight = content.strip()
        return insight or fallback_task_insight(start_hour, duration)
