"""Input forms validated on the caller side before any network call.

Forms serialize to the camelCase request bodies the API expects.
"""

from datetime import datetime
from typing import Any, Mapping, Optional, TypeVar

from pydantic import ConfigDict, Field, ValidationError as PydanticValidationError
from pydantic import field_validator

from hub.domain.error import ValidationError
from hub.domain.model.comment import CONTENT_MAX_LENGTH
from hub.domain.model.organizer import SocialLinks
from hub.domain.value import CommentId, EventId, is_valid_email, is_valid_phone
from hub.domain.value.common import ValueObject

F = TypeVar("F", bound="Form")


class Form(ValueObject):
    """Base class for forms."""

    model_config = ConfigDict(str_strip_whitespace=True)

    def to_payload(self) -> dict[str, Any]:
        """Request body for this form (unset optional fields omitted)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def _check_email(value: str) -> str:
    if not is_valid_email(value):
        raise ValueError("Please enter a valid email address")
    return value


def _check_phone(value: str) -> str:
    if not is_valid_phone(value):
        raise ValueError("Please enter a valid phone number")
    return value


class CommentForm(Form):
    """New comment or reply."""

    content: str = Field(min_length=1, max_length=CONTENT_MAX_LENGTH)
    author_name: str = Field(min_length=1, max_length=100)
    author_email: str
    event_id: Optional[EventId] = None
    parent_id: Optional[CommentId] = None

    @field_validator("author_email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _check_email(v)


class EventForm(Form):
    """New event (admin)."""

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    date: datetime
    location: str = Field(min_length=1)
    image_url: str = ""
    max_participants: int = Field(ge=1)
    is_active: bool = True


class EventUpdate(Form):
    """Partial event update (admin). Only set fields are sent."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    date: Optional[datetime] = None
    location: Optional[str] = None
    image_url: Optional[str] = None
    max_participants: Optional[int] = Field(default=None, ge=1)
    is_active: Optional[bool] = None


class GalleryImageForm(Form):
    """New gallery image (admin)."""

    image_url: str = Field(min_length=1)
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None


class OrganizerForm(Form):
    """New organizer (admin)."""

    name: str = Field(min_length=1, max_length=100)
    position: str = Field(min_length=1)
    bio: str = ""
    profile_image_url: str = ""
    social_links: Optional[SocialLinks] = None
    is_active: bool = True


class OrganizerUpdate(Form):
    """Partial organizer update (admin)."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    position: Optional[str] = None
    bio: Optional[str] = None
    profile_image_url: Optional[str] = None
    social_links: Optional[SocialLinks] = None
    is_active: Optional[bool] = None


class RegistrationForm(Form):
    """Public event registration."""

    event_id: EventId = Field(min_length=1)
    user_email: str
    user_name: str = Field(min_length=1, max_length=100)
    phone_number: str

    @field_validator("user_email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _check_email(v)

    @field_validator("phone_number")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        return _check_phone(v)


class ContactMessageForm(Form):
    """Public contact form."""

    name: str = Field(min_length=1, max_length=100)
    email: str
    subject: Optional[str] = Field(default=None, max_length=200)
    message: str = Field(min_length=10, max_length=5000)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _check_email(v)


class LoginForm(Form):
    """Admin credentials."""

    email: str
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _check_email(v)


def parse_form(form_type: type[F], data: "F | Mapping[str, Any]") -> F:
    """Validate raw input into a form.

    Args:
        form_type: Form class to validate against
        data: Already-built form or a mapping of field values

    Returns:
        The validated form

    Raises:
        ValidationError: With one message per invalid field (keyed by wire name)
    """
    if isinstance(data, form_type):
        return data
    try:
        return form_type.model_validate(data)
    except PydanticValidationError as e:
        field_errors: dict[str, str] = {}
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "__root__"
            field_errors.setdefault(field, error["msg"].removeprefix("Value error, "))
        raise ValidationError("Please correct the highlighted fields", field_errors) from e


def form_errors(errors: Any) -> dict[str, str]:
    """Map server-side validation errors onto form fields.

    The API reports either a list of `{param, msg}` entries or a ready-made
    `{field: message}` mapping.
    """
    if not errors:
        return {}
    if isinstance(errors, list):
        return {
            str(error["param"]): str(error.get("msg", ""))
            for error in errors
            if isinstance(error, dict) and error.get("param")
        }
    if isinstance(errors, dict):
        return {str(k): str(v) for k, v in errors.items()}
    return {}
