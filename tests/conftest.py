import os
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# dayrhythm.api.main builds a module-level app from the environment.
os.environ.setdefault("SUPABASE_URL", "https://example.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("GROQ_API_KEY", "test-groq-key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from dayrhythm.api.main import create_app  # noqa: E402
from dayrhythm.core.config import Settings  # noqa: E402
from dayrhythm.core.exceptions import AuthenticationError, LLMError, StoreError  # noqa: E402
from dayrhythm.database.auth import AuthenticatedUser  # noqa: E402
from dayrhythm.database.mapping import from_row, to_row, update_to_columns  # noqa: E402
from dayrhythm.models.events import EventRecord  # noqa: E402
from dayrhythm.services.container import ServiceContainer  # noqa: E402


USER_ID = "user-1"
OTHER_USER_ID = "user-2"
TOKENS = {
    "valid-token": AuthenticatedUser(id=USER_ID, email="ada@example.com"),
    "other-token": AuthenticatedUser(id=OTHER_USER_ID, email="bob@example.com"),
}


class FakeEventStore:
    """In-memory stand-in for EventStore using the real row mapping."""

    def __init__(self):
        self.rows = []
        self.fail = False
        self.list_calls = []
        self._next_id = 1

    def _check(self):
        if self.fail:
            raise StoreError("Failed to fetch events")

    def add_row(self, user_id, **fields):
        row = {
            "id": str(self._next_id),
            "user_id": user_id,
            "description": None,
            "emoji": None,
            "color_hex": None,
            "category": None,
            "participants": [],
            "is_completed": False,
            "notification_settings": None,
            "created_at": "2025-10-25T08:00:00+00:00",
            "updated_at": "2025-10-25T08:00:00+00:00",
        }
        row.update(fields)
        self._next_id += 1
        self.rows.append(row)
        return row

    async def list_events(self, user_id, date=None, start_date=None, end_date=None):
        self._check()
        self.list_calls.append((user_id, date, start_date, end_date))
        rows = [row for row in self.rows if row["user_id"] == user_id]
        if date:
            rows = [row for row in rows if row["date"] == date]
        else:
            if start_date:
                rows = [row for row in rows if row["date"] >= start_date]
            if end_date:
                rows = [row for row in rows if row["date"] <= end_date]
        rows.sort(key=lambda row: (row["date"], row["start_time"]))
        return [from_row(row) for row in rows]

    async def create_event(self, user_id, event):
        self._check()
        row = to_row(event, user_id).model_dump()
        row["id"] = str(self._next_id)
        self._next_id += 1
        self.rows.append(row)
        return from_row(row)

    async def create_events(self, user_id, events):
        return [await self.create_event(user_id, event) for event in events]

    async def update_event(self, user_id, event_id, update):
        self._check()
        for row in self.rows:
            if row["id"] == event_id and row["user_id"] == user_id:
                row.update(update_to_columns(update))
                return from_row(row)
        return None

    async def delete_event(self, user_id, event_id):
        self._check()
        self.rows = [
            row for row in self.rows
            if not (row["id"] == event_id and row["user_id"] == user_id)
        ]

    async def delete_all_events(self, user_id):
        self._check()
        self.rows = [row for row in self.rows if row["user_id"] != user_id]


class FakeAuthenticator:
    def __init__(self):
        self.tokens_seen = []

    async def verify(self, token):
        self.tokens_seen.append(token)
        if token not in TOKENS:
            raise AuthenticationError("Invalid or expired token")
        return TOKENS[token]


class FakeLLM:
    """Records calls; returns queued replies or raises LLMError."""

    def __init__(self, gemini_configured=True):
        self.gemini_configured = gemini_configured
        self.reply = "[]"
        self.gemini_reply = "[]"
        self.error = None
        self.calls = []
        self.gemini_calls = []

    async def complete(self, system_prompt, user_message, temperature=0.7, max_tokens=500, model=None):
        self.calls.append(
            SimpleNamespace(
                system_prompt=system_prompt,
                user_message=user_message,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        )
        if self.error:
            raise self.error
        return self.reply

    async def generate_gemini(self, prompt, model, images=None):
        self.gemini_calls.append(SimpleNamespace(prompt=prompt, model=model, images=images))
        if self.error:
            raise self.error
        return self.gemini_reply


@pytest.fixture
def settings():
    return Settings(
        app_name="DayRhythm AI Backend",
        app_env="test",
        log_level="WARNING",
        port=3000,
        cors_origin="*",
        supabase_url="https://example.supabase.co",
        supabase_anon_key="test-anon-key",
        supabase_service_key="test-service-key",
        groq_api_key="test-groq-key",
        gemini_api_key="test-gemini-key",
        groq_model="llama-3.3-70b-versatile",
        gemini_text_model="gemini-2.5-flash",
        gemini_vision_model="gemini-2.0-flash-exp",
    )


@pytest.fixture
def store():
    return FakeEventStore()


@pytest.fixture
def llm():
    return FakeLLM()


@pytest.fixture
def services(settings, store, llm):
    return ServiceContainer(
        settings=settings,
        store=store,
        authenticator=FakeAuthenticator(),
        llm=llm,
    )


@pytest.fixture
def client(settings, services):
    return TestClient(create_app(settings=settings, services=services))


@pytest.fixture
def auth_headers():
    return {"Authorization": "Bearer valid-token"}


@pytest.fixture
def make_event():
    def _make(title="Event", start=9.0, end=10.0, category=None, date="2025-10-25"):
        return EventRecord(
            title=title,
            start_time=start,
            end_time=end,
            category=category,
            date=date,
        )

    return _make


@pytest.fixture
def llm_error():
    return LLMError("Groq request failed: boom")
