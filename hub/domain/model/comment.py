"""Comment entity.

Comments are public submissions on an event (or on the site as a whole).
A comment with a parent is a reply; nesting depth is unbounded in storage,
the reply form is only offered down to a configured display depth.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hub.domain.model.common import DomainModel
from hub.domain.value import CommentId, EventId

CONTENT_MAX_LENGTH = 2000


class Comment(DomainModel):
    """Comment entity.

    New comments always start unapproved (the approval gate); only admins
    toggle `is_approved` or delete a comment. Content is never edited after
    creation.
    """

    id: CommentId = Field(alias="_id")
    content: str = Field(min_length=1, max_length=CONTENT_MAX_LENGTH)
    author_name: str
    author_email: str
    is_approved: bool = False
    created_at: datetime
    updated_at: Optional[datetime] = None
    parent_id: Optional[CommentId] = None
    event_id: Optional[EventId] = None
    reply_count: Optional[int] = Field(default=None, ge=0)

    @property
    def is_reply(self) -> bool:
        """Whether this comment answers another comment."""
        return self.parent_id is not None

    @property
    def has_replies(self) -> bool:
        return bool(self.reply_count)
