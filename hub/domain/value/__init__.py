"""Domain value objects for the community hub."""

from hub.domain.value.common import ValueObject
from hub.domain.value.identifiers import (
    CommentId,
    ContactMessageId,
    EventId,
    GalleryImageId,
    OrganizerId,
    RegistrationId,
    UserId,
)
from hub.domain.value.types import (
    ContactStatus,
    MessageFilter,
    ModerationFilter,
    RegistrationAlertFrequency,
    RegistrationStatus,
    is_valid_email,
    is_valid_phone,
)

__all__ = [
    "ValueObject",
    # Identifiers
    "CommentId",
    "ContactMessageId",
    "EventId",
    "GalleryImageId",
    "OrganizerId",
    "RegistrationId",
    "UserId",
    # Types
    "ContactStatus",
    "MessageFilter",
    "ModerationFilter",
    "RegistrationAlertFrequency",
    "RegistrationStatus",
    "is_valid_email",
    "is_valid_phone",
]
