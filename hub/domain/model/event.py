"""Event entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hub.domain.model.common import DomainModel
from hub.domain.value import EventId


class Event(DomainModel):
    """A community event open for registration."""

    id: EventId = Field(alias="_id")
    title: str
    description: str = ""
    date: datetime
    location: str = ""
    image_url: str = ""
    max_participants: int = Field(default=0, ge=0)
    current_participants: int = Field(default=0, ge=0)
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def spots_left(self) -> int:
        return max(self.max_participants - self.current_participants, 0)

    @property
    def is_full(self) -> bool:
        return self.max_participants > 0 and self.spots_left == 0


class EventSummary(DomainModel):
    """Embedded event reference returned with registrations."""

    id: EventId = Field(alias="_id")
    title: str
    date: Optional[datetime] = None
    location: Optional[str] = None
