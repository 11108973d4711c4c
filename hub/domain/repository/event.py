"""Event repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hub.domain.model.event import Event
from hub.domain.model.form import EventForm, EventUpdate
from hub.domain.model.pagination import Page
from hub.domain.value import EventId


class EventRepository(ABC):
    """Repository for Event entity."""

    @abstractmethod
    async def find_page(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        active: Optional[bool] = None,
    ) -> Page[Event]:
        """List events, optionally only active ones."""
        pass

    @abstractmethod
    async def find_by_id(self, event_id: EventId) -> Event:
        """Fetch one event.

        Raises:
            ApplicationError: If the event does not exist
        """
        pass

    @abstractmethod
    async def create(self, form: EventForm) -> Event:
        pass

    @abstractmethod
    async def update(self, event_id: EventId, changes: EventUpdate) -> Event:
        pass

    @abstractmethod
    async def delete(self, event_id: EventId) -> None:
        pass
