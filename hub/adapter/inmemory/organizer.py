"""In-memory organizer repository for testing."""

from typing import Optional

from hub.adapter.error import ApplicationError
from hub.adapter.inmemory.common import new_id, now
from hub.domain.model.form import OrganizerForm, OrganizerUpdate
from hub.domain.model.organizer import Organizer
from hub.domain.repository.organizer import OrganizerRepository
from hub.domain.value import OrganizerId


class InMemoryOrganizerRepository(OrganizerRepository):
    """In-memory implementation of OrganizerRepository for testing."""

    def __init__(self) -> None:
        self._organizers: dict[OrganizerId, Organizer] = {}

    async def find_all(self, active: Optional[bool] = None) -> list[Organizer]:
        organizers = list(self._organizers.values())
        if active is not None:
            organizers = [o for o in organizers if o.is_active == active]
        return organizers

    async def create(self, form: OrganizerForm) -> Organizer:
        timestamp = now()
        organizer = Organizer(
            id=OrganizerId(new_id()),
            **form.model_dump(),
            created_at=timestamp,
            updated_at=timestamp,
        )
        self._organizers[organizer.id] = organizer
        return organizer

    async def update(self, organizer_id: OrganizerId, changes: OrganizerUpdate) -> Organizer:
        organizer = self._organizers.get(organizer_id)
        if organizer is None:
            raise ApplicationError("Organizer not found", 404)
        updated = organizer.model_copy(
            update={**changes.model_dump(exclude_none=True), "updated_at": now()}
        )
        self._organizers[organizer_id] = updated
        return updated

    async def delete(self, organizer_id: OrganizerId) -> None:
        if self._organizers.pop(organizer_id, None) is None:
            raise ApplicationError("Organizer not found", 404)
