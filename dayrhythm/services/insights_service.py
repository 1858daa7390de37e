"""
Insights Service - Daily productivity insights.

Orchestrates the /ai/insights flow:
1. Fetch the caller's events for one date
2. Short-circuit with canned content for an empty day (no LLM call)
3. Compute visual insights (energy heatmap, focus blocks, balance)
4. Ask Groq for five free-text insights
5. Fall back to generic insights if the reply is not a JSON string array
"""
from typing import List

from dayrhythm.analytics import calculate_visual_insights
from dayrhythm.core.logging_config import get_logger
from dayrhythm.database.store import EventStore
from dayrhythm.llm.client import LLMClient
from dayrhythm.llm.parsing import parse_string_list
from dayrhythm.llm.prompts import DAY_INSIGHTS_SYSTEM_PROMPT, get_day_insights_user_prompt
from dayrhythm.models.ai import DayInsights, VisualInsights
from dayrhythm.models.events import EventRecord

logger = get_logger(__name__)

INSIGHT_COUNT = 5

EMPTY_DAY_INSIGHTS = [
    "No events scheduled for this day. Consider planning your day for better productivity!",
    "A blank slate - perfect opportunity to set meaningful goals.",
    "Time blocking can help structure your unscheduled day.",
    "Consider adding at least 2-3 focused work blocks.",
    "Don't forget to schedule breaks and personal time.",
]

FALLBACK_INSIGHTS = [
    "Your schedule shows a good balance of activities.",
    "Consider adding buffer time between tasks.",
    "Mix focused work with breaks for optimal productivity.",
    "Track your energy levels to optimize task timing.",
    "Review your schedule weekly to identify patterns.",
]

# Fields the model sees; ids and timestamps add nothing to the analysis
PROMPT_EVENT_FIELDS = {"title", "description", "start_time", "end_time", "date", "category"}


class InsightsService:
    """
    Service for generating a day's insights.

    Example:
        >>> service = InsightsService(store, llm)
        >>> result = await service.generate_day_insights(user_id, "2025-10-25")
        >>> len(result.insights)
        5
    """

    def __init__(self, store: EventStore, llm: LLMClient):
        self.store = store
        self.llm = llm

    async def generate_day_insights(self, user_id: str, date: str) -> DayInsights:
        """
        Build insights for `date`.

        Raises:
            StoreError: If events cannot be fetched
            LLMError: If the Groq call itself fails
        """
        events = await self.store.list_events(user_id, date=date)

        if not events:
            logger.info(f"No events on {date}; returning canned insights")
            return DayInsights(
                insights=list(EMPTY_DAY_INSIGHTS),
                visual_insights=VisualInsights(),
            )

        visual_insights = calculate_visual_insights(events)
        insights = await self._generate_text_insights(events)

        logger.info(
            f"Insights generated: date={date}, events={len(events)}, "
            f"balance_score={visual_insights.work_life_balance.balance_score}"
        )

        return DayInsights(insights=insights, visual_insights=visual_insights)

    async def _generate_text_insights(self, events: List[EventRecord]) -> List[str]:
        schedule = [
            event.model_dump(by_alias=True, include=PROMPT_EVENT_FIELDS)
            for event in events
        ]
        content = await self.llm.complete(
            system_prompt=DAY_INSIGHTS_SYSTEM_PROMPT,
            user_message=get_day_insights_user_prompt(schedule),
            temperature=0.7,
            max_tokens=500,
        )

        insights = parse_string_list(content)
        if not insights:
            logger.warning("Model reply was not a JSON string array; using fallback insights")
            return list(FALLBACK_INSIGHTS)

        return insights[:INSIGHT_COUNT]
