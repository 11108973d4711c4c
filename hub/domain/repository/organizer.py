"""Organizer repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hub.domain.model.form import OrganizerForm, OrganizerUpdate
from hub.domain.model.organizer import Organizer
from hub.domain.value import OrganizerId


class OrganizerRepository(ABC):
    """Repository for organizers. The organizer list is not paginated."""

    @abstractmethod
    async def find_all(self, active: Optional[bool] = None) -> list[Organizer]:
        pass

    @abstractmethod
    async def create(self, form: OrganizerForm) -> Organizer:
        pass

    @abstractmethod
    async def update(self, organizer_id: OrganizerId, changes: OrganizerUpdate) -> Organizer:
        pass

    @abstractmethod
    async def delete(self, organizer_id: OrganizerId) -> None:
        pass
