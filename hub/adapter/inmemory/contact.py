"""In-memory contact message repository for testing."""

from typing import Optional

from hub.adapter.inmemory.common import new_id, now, paginate
from hub.domain.model.contact import ContactMessage
from hub.domain.model.form import ContactMessageForm
from hub.domain.model.pagination import Page
from hub.domain.repository.contact import ContactMessageRepository
from hub.domain.value import ContactMessageId, ContactStatus


class InMemoryContactMessageRepository(ContactMessageRepository):
    """In-memory implementation of ContactMessageRepository for testing."""

    def __init__(self) -> None:
        self._messages: dict[ContactMessageId, ContactMessage] = {}

    async def find_page(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        status: Optional[ContactStatus] = None,
    ) -> Page[ContactMessage]:
        messages = list(self._messages.values())
        if status:
            messages = [m for m in messages if m.status == status]
        messages.sort(key=lambda m: m.created_at, reverse=True)
        return paginate(messages, page, limit)

    async def submit(self, form: ContactMessageForm) -> ContactMessage:
        timestamp = now()
        message = ContactMessage(
            id=ContactMessageId(new_id()),
            name=form.name,
            email=form.email,
            subject=form.subject,
            message=form.message,
            status=ContactStatus.NEW,
            created_at=timestamp,
            updated_at=timestamp,
        )
        return await self.save(message)

    async def save(self, message: ContactMessage) -> ContactMessage:
        self._messages[message.id] = message
        return message
