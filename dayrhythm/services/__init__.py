"""
Services module - Business logic and orchestration.

Services contain the core application logic:
- No HTTP concerns (those belong in api/)
- No Supabase queries (those belong in database/)
- Orchestrate between the event store, the analytics heuristics and the LLMs
"""
from dayrhythm.services.analytics_service import AnalyticsService
from dayrhythm.services.container import ServiceContainer, build_services
from dayrhythm.services.event_service import EventService
from dayrhythm.services.insights_service import InsightsService
from dayrhythm.services.schedule_service import ScheduleService

__all__ = [
    "AnalyticsService",
    "EventService",
    "InsightsService",
    "ScheduleService",
    "ServiceContainer",
    "build_services",
]
