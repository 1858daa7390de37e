"""
Event Service - CRUD on the caller's events.

Thin layer over EventStore that owns the not-found rule and the batch
sync semantics.
"""
from typing import List, Optional

from dayrhythm.core.exceptions import NotFoundError
from dayrhythm.core.logging_config import get_logger
from dayrhythm.database.store import EventStore
from dayrhythm.models.events import BatchSyncRequest, EventCreate, EventRecord, EventUpdate

logger = get_logger(__name__)


class EventService:
    def __init__(self, store: EventStore):
        self.store = store

    async def list_events(
        self,
        user_id: str,
        date: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> List[EventRecord]:
        return await self.store.list_events(
            user_id, date=date, start_date=start_date, end_date=end_date
        )

    async def create_event(self, user_id: str, event: EventCreate) -> EventRecord:
        created = await self.store.create_event(user_id, event)
        logger.info(f"Event created: id={created.id}")
        return created

    async def update_event(self, user_id: str, event_id: str, update: EventUpdate) -> EventRecord:
        """
        Raises:
            NotFoundError: no event with this id belongs to the caller
        """
        updated = await self.store.update_event(user_id, event_id, update)
        if updated is None:
            raise NotFoundError("Event not found")
        return updated

    async def delete_event(self, user_id: str, event_id: str) -> None:
        # Deleting a missing id is a no-op
        await self.store.delete_event(user_id, event_id)

    async def delete_all_events(self, user_id: str) -> None:
        await self.store.delete_all_events(user_id)
        logger.info("All events deleted for user")

    async def batch_sync(self, user_id: str, request: BatchSyncRequest) -> List[EventRecord]:
        """Insert events, first deleting the caller's existing ones if asked."""
        if request.clear_existing:
            await self.store.delete_all_events(user_id)
        synced = await self.store.create_events(user_id, request.events)
        logger.info(
            f"Batch sync: inserted={len(synced)}, cleared={request.clear_existing}"
        )
        return synced
