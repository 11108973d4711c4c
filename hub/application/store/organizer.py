"""Organizer aggregate store."""

from collections.abc import Mapping
from typing import Any, Optional

from hub.application.store.base import Store
from hub.domain.model.form import OrganizerForm, OrganizerUpdate, parse_form
from hub.domain.model.organizer import Organizer
from hub.domain.repository.organizer import OrganizerRepository
from hub.domain.value import OrganizerId


class OrganizerStore(Store):
    name = "organizer_store"

    def __init__(self, organizer_repository: OrganizerRepository) -> None:
        super().__init__()
        self.organizer_repository = organizer_repository
        self.organizers: list[Organizer] = []

    def _reset_state(self) -> None:
        self.organizers = []

    async def fetch_organizers(self, active: Optional[bool] = None) -> None:
        await self._fetch(
            "fetch_organizers",
            lambda: self.organizer_repository.find_all(active=active),
            lambda organizers: setattr(self, "organizers", organizers),
        )

    async def create_organizer(self, form: OrganizerForm | Mapping[str, Any]) -> Organizer:
        organizer_form = parse_form(OrganizerForm, form)
        return await self._mutate(
            "create_organizer",
            lambda: self.organizer_repository.create(organizer_form),
            lambda organizer: setattr(self, "organizers", [organizer, *self.organizers]),
        )

    async def update_organizer(
        self, organizer_id: OrganizerId, changes: OrganizerUpdate | Mapping[str, Any]
    ) -> Organizer:
        update = parse_form(OrganizerUpdate, changes)
        return await self._mutate(
            "update_organizer",
            lambda: self.organizer_repository.update(organizer_id, update),
            lambda updated: setattr(
                self,
                "organizers",
                [updated if o.id == organizer_id else o for o in self.organizers],
            ),
        )

    async def delete_organizer(self, organizer_id: OrganizerId) -> None:
        await self._mutate(
            "delete_organizer",
            lambda: self.organizer_repository.delete(organizer_id),
            lambda _: setattr(
                self, "organizers", [o for o in self.organizers if o.id != organizer_id]
            ),
        )
