"""
Service container - process-wide handles injected into request handlers.

Built once in the FastAPI lifespan and stored on app.state. Tests build
one from fakes and pass it to create_app().
"""
from dataclasses import dataclass, field

from dayrhythm.core.config import Settings
from dayrhythm.database.auth import SupabaseAuthenticator
from dayrhythm.database.connection import create_supabase_client
from dayrhythm.database.store import EventStore
from dayrhythm.llm.client import LLMClient
from dayrhythm.services.analytics_service import AnalyticsService
from dayrhythm.services.event_service import EventService
from dayrhythm.services.insights_service import InsightsService
from dayrhythm.services.schedule_service import ScheduleService


@dataclass
class ServiceContainer:
    """External clients plus the services built on them."""
    settings: Settings
    store: EventStore
    authenticator: SupabaseAuthenticator
    llm: LLMClient

    insights: InsightsService = field(init=False)
    schedules: ScheduleService = field(init=False)
    analytics: AnalyticsService = field(init=False)
    events: EventService = field(init=False)

    def __post_init__(self):
        self.insights = InsightsService(self.store, self.llm)
        self.schedules = ScheduleService(self.llm, self.settings)
        self.analytics = AnalyticsService(self.store, self.llm)
        self.events = EventService(self.store)


async def build_services(settings: Settings) -> ServiceContainer:
    """Connect to Supabase, Groq and Gemini."""
    client = await create_supabase_client(settings)
    return ServiceContainer(
        settings=settings,
        store=EventStore(client),
        authenticator=SupabaseAuthenticator(client),
        llm=LLMClient(settings),
    )
