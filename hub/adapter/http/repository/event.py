"""HTTP event repository."""

from typing import Optional

import logfire

from hub.adapter.http.client import ApiClient
from hub.adapter.http.envelope import (
    ensure_success,
    parse_entities,
    parse_entity,
    parse_pagination,
    unwrap,
)
from hub.domain.model.event import Event
from hub.domain.model.form import EventForm, EventUpdate
from hub.domain.model.pagination import Page
from hub.domain.repository.event import EventRepository
from hub.domain.value import EventId


class HttpEventRepository(EventRepository):
    """Event repository backed by the /events endpoints."""

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def find_page(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        active: Optional[bool] = None,
    ) -> Page[Event]:
        params: dict[str, str] = {}
        if page:
            params["page"] = str(page)
        if limit:
            params["limit"] = str(limit)
        if active is not None:
            params["active"] = "true" if active else "false"

        data = unwrap(await self.client.get("/events", params=params))
        return Page[Event](
            items=parse_entities(Event, data, "events"),
            pagination=parse_pagination(data),
        )

    async def find_by_id(self, event_id: EventId) -> Event:
        data = unwrap(await self.client.get(f"/events/{event_id}"))
        return parse_entity(Event, data, "event")

    async def create(self, form: EventForm) -> Event:
        with logfire.span("event_repository.create", title=form.title):
            data = unwrap(await self.client.post("/events", form.to_payload()))
            return parse_entity(Event, data, "event")

    async def update(self, event_id: EventId, changes: EventUpdate) -> Event:
        with logfire.span("event_repository.update", event_id=event_id):
            data = unwrap(
                await self.client.put(f"/events/{event_id}", changes.to_payload())
            )
            return parse_entity(Event, data, "event")

    async def delete(self, event_id: EventId) -> None:
        with logfire.span("event_repository.delete", event_id=event_id):
            ensure_success(await self.client.delete(f"/events/{event_id}"))
