"""HTTP organizer repository."""

from typing import Optional

from hub.adapter.http.client import ApiClient
from hub.adapter.http.envelope import ensure_success, parse_entities, parse_entity, unwrap
from hub.domain.model.form import OrganizerForm, OrganizerUpdate
from hub.domain.model.organizer import Organizer
from hub.domain.repository.organizer import OrganizerRepository
from hub.domain.value import OrganizerId


class HttpOrganizerRepository(OrganizerRepository):
    """Organizer repository backed by the /organizers endpoints."""

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def find_all(self, active: Optional[bool] = None) -> list[Organizer]:
        params: dict[str, str] = {}
        if active is not None:
            params["active"] = "true" if active else "false"

        data = unwrap(await self.client.get("/organizers", params=params))
        return parse_entities(Organizer, data, "organizers")

    async def create(self, form: OrganizerForm) -> Organizer:
        data = unwrap(await self.client.post("/organizers", form.to_payload()))
        return parse_entity(Organizer, data, "organizer")

    async def update(self, organizer_id: OrganizerId, changes: OrganizerUpdate) -> Organizer:
        data = unwrap(
            await self.client.put(f"/organizers/{organizer_id}", changes.to_payload())
        )
        return parse_entity(Organizer, data, "organizer")

    async def delete(self, organizer_id: OrganizerId) -> None:
        ensure_success(await self.client.delete(f"/organizers/{organizer_id}"))
