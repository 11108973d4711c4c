"""In-memory repository implementations for tests and offline development."""

from hub.adapter.inmemory.auth import InMemoryAuthRepository
from hub.adapter.inmemory.comment import InMemoryCommentRepository
from hub.adapter.inmemory.contact import InMemoryContactMessageRepository
from hub.adapter.inmemory.event import InMemoryEventRepository
from hub.adapter.inmemory.gallery import InMemoryGalleryRepository
from hub.adapter.inmemory.organizer import InMemoryOrganizerRepository
from hub.adapter.inmemory.registration import InMemoryRegistrationRepository

__all__ = [
    "InMemoryAuthRepository",
    "InMemoryCommentRepository",
    "InMemoryContactMessageRepository",
    "InMemoryEventRepository",
    "InMemoryGalleryRepository",
    "InMemoryOrganizerRepository",
    "InMemoryRegistrationRepository",
]
