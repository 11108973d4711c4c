"""HTTP repository implementations."""

from hub.adapter.http.repository.auth import HttpAuthRepository
from hub.adapter.http.repository.comment import HttpCommentRepository
from hub.adapter.http.repository.contact import HttpContactMessageRepository
from hub.adapter.http.repository.event import HttpEventRepository
from hub.adapter.http.repository.gallery import HttpGalleryRepository
from hub.adapter.http.repository.organizer import HttpOrganizerRepository
from hub.adapter.http.repository.registration import HttpRegistrationRepository

__all__ = [
    "HttpAuthRepository",
    "HttpCommentRepository",
    "HttpContactMessageRepository",
    "HttpEventRepository",
    "HttpGalleryRepository",
    "HttpOrganizerRepository",
    "HttpRegistrationRepository",
]
