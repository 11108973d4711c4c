"""Strongly typed identifiers for community hub entities.

Identifiers are opaque strings issued by the backend (Mongo ObjectIds or
Firestore document ids depending on the deployment).
"""

from typing import NewType

CommentId = NewType("CommentId", str)
EventId = NewType("EventId", str)
GalleryImageId = NewType("GalleryImageId", str)
OrganizerId = NewType("OrganizerId", str)
RegistrationId = NewType("RegistrationId", str)
ContactMessageId = NewType("ContactMessageId", str)
UserId = NewType("UserId", str)
