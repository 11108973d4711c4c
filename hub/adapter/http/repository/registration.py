"""HTTP registration repository."""

from typing import Optional

from hub.adapter.http.client import ApiClient
from hub.adapter.http.envelope import parse_entities, parse_entity, parse_pagination, unwrap
from hub.domain.model.form import RegistrationForm
from hub.domain.model.pagination import Page
from hub.domain.model.registration import EventRegistration
from hub.domain.repository.registration import RegistrationRepository
from hub.domain.value import EventId, RegistrationId, RegistrationStatus


class HttpRegistrationRepository(RegistrationRepository):
    """Registration repository backed by the /registrations endpoints."""

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def find_page(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        event_id: Optional[EventId] = None,
        status: Optional[RegistrationStatus] = None,
    ) -> Page[EventRegistration]:
        params: dict[str, str] = {}
        if page:
            params["page"] = str(page)
        if limit:
            params["limit"] = str(limit)
        if event_id:
            params["eventId"] = event_id
        if status:
            params["status"] = status.value

        data = unwrap(await self.client.get("/registrations", params=params))
        return Page[EventRegistration](
            items=parse_entities(EventRegistration, data, "registrations"),
            pagination=parse_pagination(data),
        )

    async def find_by_id(self, registration_id: RegistrationId) -> EventRegistration:
        data = unwrap(await self.client.get(f"/registrations/{registration_id}"))
        return parse_entity(EventRegistration, data, "registration")

    async def create(self, form: RegistrationForm) -> EventRegistration:
        data = unwrap(await self.client.post("/registrations", form.to_payload()))
        return parse_entity(EventRegistration, data, "registration")
