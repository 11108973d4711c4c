"""In-memory registration repository for testing."""

from typing import Optional

from hub.adapter.error import ApplicationError
from hub.adapter.inmemory.common import new_id, now, paginate
from hub.domain.model.form import RegistrationForm
from hub.domain.model.pagination import Page
from hub.domain.model.registration import EventRegistration
from hub.domain.value import EventId, RegistrationId, RegistrationStatus
from hub.domain.repository.registration import RegistrationRepository


class InMemoryRegistrationRepository(RegistrationRepository):
    """In-memory implementation of RegistrationRepository for testing."""

    def __init__(self) -> None:
        self._registrations: dict[RegistrationId, EventRegistration] = {}

    async def find_page(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        event_id: Optional[EventId] = None,
        status: Optional[RegistrationStatus] = None,
    ) -> Page[EventRegistration]:
        registrations = list(self._registrations.values())
        if event_id:
            registrations = [r for r in registrations if r.event_ref == event_id]
        if status:
            registrations = [r for r in registrations if r.status == status]
        return paginate(registrations, page, limit)

    async def find_by_id(self, registration_id: RegistrationId) -> EventRegistration:
        registration = self._registrations.get(registration_id)
        if registration is None:
            raise ApplicationError("Registration not found", 404)
        return registration

    async def create(self, form: RegistrationForm) -> EventRegistration:
        duplicate = any(
            r.event_ref == form.event_id and r.user_email == form.user_email
            for r in self._registrations.values()
        )
        if duplicate:
            raise ApplicationError("You are already registered for this event", 400)

        timestamp = now()
        registration = EventRegistration(
            id=RegistrationId(new_id()),
            event_id=form.event_id,
            user_email=form.user_email,
            user_name=form.user_name,
            phone_number=form.phone_number,
            registration_date=timestamp,
            status=RegistrationStatus.PENDING,
            created_at=timestamp,
            updated_at=timestamp,
        )
        self._registrations[registration.id] = registration
        return registration
