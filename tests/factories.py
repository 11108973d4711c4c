"""Entity builders for tests."""

from datetime import datetime, timedelta, timezone
from itertools import count
from typing import Optional

from hub.domain.model.comment import Comment
from hub.domain.model.contact import ContactMessage
from hub.domain.model.event import Event
from hub.domain.value import CommentId, ContactMessageId, EventId

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)

_sequence = count(1)


def make_comment(
    comment_id: Optional[str] = None,
    content: str = "Looking forward to it!",
    is_approved: bool = False,
    parent_id: Optional[str] = None,
    event_id: Optional[str] = None,
    created_at: Optional[datetime] = None,
    **overrides,
) -> Comment:
    """Build a comment; later calls get later timestamps."""
    n = next(_sequence)
    return Comment(
        id=CommentId(comment_id or f"comment-{n}"),
        content=content,
        author_name="Amira",
        author_email="amira@example.org",
        is_approved=is_approved,
        created_at=created_at or BASE_TIME + timedelta(minutes=n),
        parent_id=CommentId(parent_id) if parent_id else None,
        event_id=EventId(event_id) if event_id else None,
        **overrides,
    )


def make_message(
    created_at: datetime,
    message_id: Optional[str] = None,
    message: str = "Is there parking near the venue?",
) -> ContactMessage:
    n = next(_sequence)
    return ContactMessage(
        id=ContactMessageId(message_id or f"message-{n}"),
        name="Joris",
        email="joris@example.org",
        message=message,
        created_at=created_at,
    )


def make_event(
    event_id: Optional[str] = None,
    title: str = "Community iftar",
    is_active: bool = True,
    **overrides,
) -> Event:
    n = next(_sequence)
    return Event(
        id=EventId(event_id or f"event-{n}"),
        title=title,
        description="Shared dinner at the hub",
        date=BASE_TIME + timedelta(days=n),
        location="GAFC Community Hub, Rotterdam",
        max_participants=40,
        is_active=is_active,
        **overrides,
    )
