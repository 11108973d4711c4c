"""Domain value types for the community hub."""

import re
from enum import Enum

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^[+]?[1-9][\d]{0,15}$")


class ModerationFilter(str, Enum):
    """Comment moderation tabs."""

    ALL = "all"
    PENDING = "pending"
    APPROVED = "approved"


class MessageFilter(str, Enum):
    """Contact message tabs (by age)."""

    ALL = "all"
    NEW = "new"
    PAST = "past"


class ContactStatus(str, Enum):
    """Handling status of a contact message."""

    NEW = "new"
    IN_REVIEW = "in_review"
    RESOLVED = "resolved"


class RegistrationStatus(str, Enum):
    """Status of an event registration."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class RegistrationAlertFrequency(str, Enum):
    """How often admins are alerted about new registrations."""

    IMMEDIATE = "immediate"
    DAILY = "daily"
    WEEKLY = "weekly"


def is_valid_email(email: str) -> bool:
    """Check an email address has the shape local@domain.tld."""
    return bool(EMAIL_PATTERN.match(email))


def is_valid_phone(phone: str) -> bool:
    """Check a phone number (whitespace ignored) is up to 16 digits."""
    return bool(PHONE_PATTERN.match(re.sub(r"\s", "", phone)))
