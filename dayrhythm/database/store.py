"""
Event Store - Supabase access for the `events` table.

Every query is scoped to the caller's user id, so one user can never
read or modify another user's rows through this class. Rows are
converted to EventRecord on the way out (see mapping.py).

Errors from the Supabase SDK are logged and re-raised as StoreError;
there is no retry.
"""
from typing import Any, Dict, List, Optional, Sequence

from supabase import AsyncClient

from dayrhythm.core.exceptions import StoreError
from dayrhythm.core.logging_config import LoggerMixin
from dayrhythm.database.mapping import from_row, to_row, update_to_columns
from dayrhythm.models.events import EventCreate, EventRecord, EventUpdate

EVENTS_TABLE = "events"


class EventStore(LoggerMixin):
    """
    CRUD operations on a user's events.

    Example:
        >>> store = EventStore(client)
        >>> events = await store.list_events(user_id, date="2025-10-25")
        >>> [event.title for event in events]
        ['Standup', 'Deep work']
    """

    def __init__(self, client: AsyncClient):
        self.client = client

    def _table(self):
        return self.client.table(EVENTS_TABLE)

    async def list_events(
        self,
        user_id: str,
        date: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> List[EventRecord]:
        """
        Fetch a user's events ordered by date then start time.

        `date` takes precedence over the start/end range.
        """
        query = self._table().select("*").eq("user_id", user_id)

        if date:
            query = query.eq("date", date)
        else:
            if start_date:
                query = query.gte("date", start_date)
            if end_date:
                query = query.lte("date", end_date)

        query = query.order("date").order("start_time")

        rows = await self._execute(query, "Failed to fetch events")
        return [from_row(row) for row in rows]

    async def create_event(self, user_id: str, event: EventCreate) -> EventRecord:
        row = to_row(event, user_id).model_dump(exclude_none=True)
        rows = await self._execute(self._table().insert(row), "Failed to create event")
        if not rows:
            raise StoreError("Failed to create event")
        return from_row(rows[0])

    async def create_events(self, user_id: str, events: Sequence[EventCreate]) -> List[EventRecord]:
        if not events:
            return []
        payload = [to_row(event, user_id).model_dump(exclude_none=True) for event in events]
        rows = await self._execute(self._table().insert(payload), "Failed to sync events")
        return [from_row(row) for row in rows]

    async def update_event(
        self, user_id: str, event_id: str, update: EventUpdate
    ) -> Optional[EventRecord]:
        """Apply a partial update; None when no owned row matched."""
        query = (
            self._table()
            .update(update_to_columns(update))
            .eq("id", event_id)
            .eq("user_id", user_id)
        )
        rows = await self._execute(query, "Failed to update event")
        return from_row(rows[0]) if rows else None

    async def delete_event(self, user_id: str, event_id: str) -> None:
        query = self._table().delete().eq("id", event_id).eq("user_id", user_id)
        await self._execute(query, "Failed to delete event")

    async def delete_all_events(self, user_id: str) -> None:
        query = self._table().delete().eq("user_id", user_id)
        await self._execute(query, "Failed to delete events")

    async def _execute(self, query, failure_message: str) -> List[Dict[str, Any]]:
        """Run a query builder and return its rows."""
        try:
            response = await query.execute()
        except Exception as e:
            self.logger.error(f"{failure_message}: {e}")
            raise StoreError(failure_message) from e
        return response.data or []
