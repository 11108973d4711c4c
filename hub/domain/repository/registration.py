"""Registration repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hub.domain.model.form import RegistrationForm
from hub.domain.model.pagination import Page
from hub.domain.model.registration import EventRegistration
from hub.domain.value import EventId, RegistrationId, RegistrationStatus


class RegistrationRepository(ABC):
    """Repository for event registrations."""

    @abstractmethod
    async def find_page(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        event_id: Optional[EventId] = None,
        status: Optional[RegistrationStatus] = None,
    ) -> Page[EventRegistration]:
        """List registrations (admin)."""
        pass

    @abstractmethod
    async def find_by_id(self, registration_id: RegistrationId) -> EventRegistration:
        pass

    @abstractmethod
    async def create(self, form: RegistrationForm) -> EventRegistration:
        """Register for an event (public)."""
        pass
