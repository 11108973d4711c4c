"""In-memory event repository for testing."""

from typing import Optional

from hub.adapter.error import ApplicationError
from hub.adapter.inmemory.common import new_id, now, paginate
from hub.domain.model.event import Event
from hub.domain.model.form import EventForm, EventUpdate
from hub.domain.model.pagination import Page
from hub.domain.repository.event import EventRepository
from hub.domain.value import EventId


class InMemoryEventRepository(EventRepository):
    """In-memory implementation of EventRepository for testing."""

    def __init__(self) -> None:
        self._events: dict[EventId, Event] = {}

    async def find_page(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        active: Optional[bool] = None,
    ) -> Page[Event]:
        events = list(self._events.values())
        if active is not None:
            events = [e for e in events if e.is_active == active]
        events.sort(key=lambda e: e.date)
        return paginate(events, page, limit)

    async def find_by_id(self, event_id: EventId) -> Event:
        event = self._events.get(event_id)
        if event is None:
            raise ApplicationError("Event not found", 404)
        return event

    async def create(self, form: EventForm) -> Event:
        timestamp = now()
        event = Event(
            id=EventId(new_id()),
            **form.model_dump(),
            current_participants=0,
            created_at=timestamp,
            updated_at=timestamp,
        )
        return await self.save(event)

    async def update(self, event_id: EventId, changes: EventUpdate) -> Event:
        event = await self.find_by_id(event_id)
        updated = event.model_copy(
            update={**changes.model_dump(exclude_none=True), "updated_at": now()}
        )
        return await self.save(updated)

    async def delete(self, event_id: EventId) -> None:
        if self._events.pop(event_id, None) is None:
            raise ApplicationError("Event not found", 404)

    async def save(self, event: Event) -> Event:
        self._events[event.id] = event
        return event
