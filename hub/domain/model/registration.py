"""Event registration entity."""

from datetime import datetime
from typing import Optional, Union

from pydantic import Field

from hub.domain.model.common import DomainModel
from hub.domain.model.event import EventSummary
from hub.domain.value import EventId, RegistrationId, RegistrationStatus


class EventRegistration(DomainModel):
    """A participant's registration for an event.

    `event_id` is either the bare event id or, when the backend populates
    the reference, an embedded event summary.
    """

    id: RegistrationId = Field(alias="_id")
    event_id: Union[EventSummary, EventId]
    user_email: str
    user_name: str
    phone_number: str = ""
    registration_date: Optional[datetime] = None
    status: RegistrationStatus = RegistrationStatus.PENDING
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def event_ref(self) -> EventId:
        """Id of the registered event, whatever shape the reference has."""
        if isinstance(self.event_id, EventSummary):
            return self.event_id.id
        return self.event_id
