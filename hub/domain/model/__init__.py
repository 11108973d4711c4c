"""Domain model entities for the community hub."""

from hub.domain.model.comment import Comment
from hub.domain.model.contact import ContactMessage
from hub.domain.model.event import Event, EventSummary
from hub.domain.model.form import (
    CommentForm,
    ContactMessageForm,
    EventForm,
    EventUpdate,
    GalleryImageForm,
    LoginForm,
    OrganizerForm,
    OrganizerUpdate,
    RegistrationForm,
    form_errors,
    parse_form,
)
from hub.domain.model.gallery import GalleryImage, Uploader
from hub.domain.model.organizer import Organizer, SocialLinks
from hub.domain.model.pagination import Page, Pagination
from hub.domain.model.registration import EventRegistration
from hub.domain.model.user import User

__all__ = [
    "Comment",
    "ContactMessage",
    "Event",
    "EventRegistration",
    "EventSummary",
    "GalleryImage",
    "Organizer",
    "Page",
    "Pagination",
    "SocialLinks",
    "Uploader",
    "User",
    # Forms
    "CommentForm",
    "ContactMessageForm",
    "EventForm",
    "EventUpdate",
    "GalleryImageForm",
    "LoginForm",
    "OrganizerForm",
    "OrganizerUpdate",
    "RegistrationForm",
    "form_errors",
    "parse_form",
]
