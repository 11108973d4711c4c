"""Unit tests for EventStore."""

from datetime import datetime, timezone

from dishka import AsyncContainer
import pytest

from hub.adapter.error import ApplicationError
from hub.application.store import EventStore
from hub.domain.error import ValidationError
from hub.domain.repository import EventRepository
from hub.domain.value import EventId
from tests.factories import make_event
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

NEW_EVENT = {
    "title": "Eid picnic",
    "description": "Bring a dish to share",
    "date": datetime(2026, 4, 1, 12, tzinfo=timezone.utc),
    "location": "Kralingse Bos",
    "maxParticipants": 80,
}


class TestEventStore:
    """Tests for EventStore."""

    @pytest.mark.asyncio
    async def test_fetch_events_filters_active(self, unit_env: AsyncContainer):
        repository = await unit_env.get(EventRepository)
        store = await unit_env.get(EventStore)
        await repository.save(make_event("open", is_active=True))
        await repository.save(make_event("closed", is_active=False))

        await store.fetch_events(active=True)

        assert [e.id for e in store.events] == ["open"]
        assert store.pagination.total == 1

    @pytest.mark.asyncio
    async def test_fetch_event_sets_current_event(self, unit_env: AsyncContainer):
        repository = await unit_env.get(EventRepository)
        store = await unit_env.get(EventStore)
        await repository.save(make_event("iftar"))

        await store.fetch_event(EventId("iftar"))

        assert store.current_event is not None
        assert store.current_event.id == "iftar"

    @pytest.mark.asyncio
    async def test_fetch_unknown_event_records_error(self, unit_env: AsyncContainer):
        store = await unit_env.get(EventStore)

        await store.fetch_event(EventId("missing"))

        assert store.error == "Event not found"
        assert store.current_event is None

    @pytest.mark.asyncio
    async def test_create_event_prepends(self, unit_env: AsyncContainer):
        # Arrange
        repository = await unit_env.get(EventRepository)
        store = await unit_env.get(EventStore)
        await repository.save(make_event("existing"))
        await store.fetch_events()

        # Act
        created = await store.create_event(NEW_EVENT)

        # Assert
        assert store.events[0].id == created.id
        assert created.max_participants == 80
        assert created.spots_left == 80
        assert len(store.events) == 2

    @pytest.mark.asyncio
    async def test_create_event_validates_form(self, unit_env: AsyncContainer):
        store = await unit_env.get(EventStore)

        with pytest.raises(ValidationError) as exc_info:
            await store.create_event({**NEW_EVENT, "maxParticipants": 0})

        assert "maxParticipants" in exc_info.value.field_errors

    @pytest.mark.asyncio
    async def test_update_event_replaces_list_entry_and_current(
        self, unit_env: AsyncContainer
    ):
        repository = await unit_env.get(EventRepository)
        store = await unit_env.get(EventStore)
        await repository.save(make_event("iftar", title="Iftar"))
        await store.fetch_events()
        await store.fetch_event(EventId("iftar"))

        await store.update_event(EventId("iftar"), {"title": "Community iftar"})

        assert store.events[0].title == "Community iftar"
        assert store.current_event.title == "Community iftar"

    @pytest.mark.asyncio
    async def test_delete_event_clears_matching_current(self, unit_env: AsyncContainer):
        repository = await unit_env.get(EventRepository)
        store = await unit_env.get(EventStore)
        await repository.save(make_event("iftar"))
        await store.fetch_events()
        await store.fetch_event(EventId("iftar"))

        await store.delete_event(EventId("iftar"))

        assert store.events == []
        assert store.current_event is None

    @pytest.mark.asyncio
    async def test_delete_unknown_event_raises(self, unit_env: AsyncContainer):
        store = await unit_env.get(EventStore)

        with pytest.raises(ApplicationError):
            await store.delete_event(EventId("missing"))

        assert not store.is_saving

    @pytest.mark.asyncio
    async def test_set_current_event(self, unit_env: AsyncContainer):
        store = await unit_env.get(EventStore)
        event = make_event("iftar")

        store.set_current_event(event)
        held = store.current_event
        store.set_current_event(None)

        assert held == event
        assert store.current_event is None
