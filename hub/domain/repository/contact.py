"""Contact message repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hub.domain.model.contact import ContactMessage
from hub.domain.model.form import ContactMessageForm
from hub.domain.model.pagination import Page
from hub.domain.value import ContactStatus


class ContactMessageRepository(ABC):
    """Repository for contact messages."""

    @abstractmethod
    async def find_page(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        status: Optional[ContactStatus] = None,
    ) -> Page[ContactMessage]:
        """List received messages (admin)."""
        pass

    @abstractmethod
    async def submit(self, form: ContactMessageForm) -> ContactMessage:
        """Send a message through the public contact form."""
        pass
