"""HTTP contact message repository."""

from typing import Optional

from hub.adapter.http.client import ApiClient
from hub.adapter.http.envelope import parse_entities, parse_entity, parse_pagination, unwrap
from hub.domain.model.contact import ContactMessage
from hub.domain.model.form import ContactMessageForm
from hub.domain.model.pagination import Page
from hub.domain.repository.contact import ContactMessageRepository
from hub.domain.value import ContactStatus


class HttpContactMessageRepository(ContactMessageRepository):
    """Contact message repository backed by the /contact endpoints."""

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def find_page(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        status: Optional[ContactStatus] = None,
    ) -> Page[ContactMessage]:
        params: dict[str, str] = {}
        if page:
            params["page"] = str(page)
        if limit:
            params["limit"] = str(limit)
        if status:
            params["status"] = status.value

        data = unwrap(await self.client.get("/contact", params=params))
        return Page[ContactMessage](
            items=parse_entities(ContactMessage, data, "messages"),
            pagination=parse_pagination(data),
        )

    async def submit(self, form: ContactMessageForm) -> ContactMessage:
        data = unwrap(await self.client.post("/contact", form.to_payload()))
        return parse_entity(ContactMessage, data, "contactMessage")
