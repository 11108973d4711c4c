"""Contact message entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hub.domain.model.common import DomainModel
from hub.domain.value import ContactMessageId, ContactStatus


class ContactMessage(DomainModel):
    """Enquiry submitted through the public contact form."""

    id: ContactMessageId = Field(alias="_id")
    name: str
    email: str
    subject: Optional[str] = None
    message: str
    status: ContactStatus = ContactStatus.NEW
    admin_notes: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
