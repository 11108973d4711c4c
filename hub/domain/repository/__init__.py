"""Repository interfaces for the community hub.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the adapter layer: HTTP against the platform API,
or in memory for tests and offline development.
"""

from hub.domain.repository.auth import AuthRepository
from hub.domain.repository.comment import CommentQuery, CommentRepository
from hub.domain.repository.contact import ContactMessageRepository
from hub.domain.repository.event import EventRepository
from hub.domain.repository.gallery import GalleryRepository
from hub.domain.repository.organizer import OrganizerRepository
from hub.domain.repository.registration import RegistrationRepository

__all__ = [
    "AuthRepository",
    "CommentQuery",
    "CommentRepository",
    "ContactMessageRepository",
    "EventRepository",
    "GalleryRepository",
    "OrganizerRepository",
    "RegistrationRepository",
]
