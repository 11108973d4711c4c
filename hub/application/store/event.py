"""Event aggregate store."""

from collections.abc import Mapping
from typing import Any, Optional

from hub.application.store.base import Store
from hub.domain.model.event import Event
from hub.domain.model.form import EventForm, EventUpdate, parse_form
from hub.domain.model.pagination import Page, Pagination
from hub.domain.repository.event import EventRepository
from hub.domain.value import EventId


class EventStore(Store):
    """Event listing plus the event currently opened in a detail view."""

    name = "event_store"

    def __init__(self, event_repository: EventRepository) -> None:
        super().__init__()
        self.event_repository = event_repository
        self.events: list[Event] = []
        self.current_event: Optional[Event] = None
        self.pagination: Optional[Pagination] = None

    def _reset_state(self) -> None:
        self.events = []
        self.current_event = None
        self.pagination = None

    async def fetch_events(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        active: Optional[bool] = None,
    ) -> None:
        await self._fetch(
            "fetch_events",
            lambda: self.event_repository.find_page(page=page, limit=limit, active=active),
            self._apply_listing,
        )

    async def fetch_event(self, event_id: EventId) -> None:
        await self._fetch(
            "fetch_event",
            lambda: self.event_repository.find_by_id(event_id),
            self.set_current_event,
        )

    def set_current_event(self, event: Optional[Event]) -> None:
        self.current_event = event
        self._notify()

    async def create_event(self, form: EventForm | Mapping[str, Any]) -> Event:
        event_form = parse_form(EventForm, form)
        return await self._mutate(
            "create_event",
            lambda: self.event_repository.create(event_form),
            lambda event: setattr(self, "events", [event, *self.events]),
        )

    async def update_event(
        self, event_id: EventId, changes: EventUpdate | Mapping[str, Any]
    ) -> Event:
        update = parse_form(EventUpdate, changes)
        return await self._mutate(
            "update_event",
            lambda: self.event_repository.update(event_id, update),
            lambda event: self._replace(event_id, event),
        )

    async def delete_event(self, event_id: EventId) -> None:
        await self._mutate(
            "delete_event",
            lambda: self.event_repository.delete(event_id),
            lambda _: self._remove(event_id),
        )

    def _apply_listing(self, page: Page[Event]) -> None:
        self.events = page.items
        self.pagination = page.pagination

    def _replace(self, event_id: EventId, updated: Event) -> None:
        self.events = [updated if e.id == event_id else e for e in self.events]
        if self.current_event and self.current_event.id == event_id:
            self.current_event = updated

    def _remove(self, event_id: EventId) -> None:
        self.events = [e for e in self.events if e.id != event_id]
        if self.current_event and self.current_event.id == event_id:
            self.current_event = None
