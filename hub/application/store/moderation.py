"""Comment moderation view logic.

Everything here is derived from the comments currently held by the store;
no extra requests are made. Tab counts therefore cover the loaded page
only, not the whole dataset.
"""

from typing import Optional

import logfire

from hub.application.store.comment import CommentStore
from hub.domain.error import BusinessRuleViolationError
from hub.domain.model.comment import Comment
from hub.domain.value import CommentId, ModerationFilter
from hub.domain.value.common import ValueObject


class ModerationCounts(ValueObject):
    """Tab badge counts."""

    all: int
    pending: int
    approved: int

    def for_filter(self, selector: ModerationFilter) -> int:
        return getattr(self, selector.value)


def filter_comments(comments: list[Comment], selector: ModerationFilter) -> list[Comment]:
    """Comments shown under a moderation tab."""
    if selector is ModerationFilter.PENDING:
        return [c for c in comments if not c.is_approved]
    if selector is ModerationFilter.APPROVED:
        return [c for c in comments if c.is_approved]
    return list(comments)


def moderation_counts(comments: list[Comment]) -> ModerationCounts:
    approved = sum(1 for c in comments if c.is_approved)
    return ModerationCounts(
        all=len(comments),
        pending=len(comments) - approved,
        approved=approved,
    )


class ModerationView:
    """Admin moderation screen over a comment store.

    Approve and reject are a reversible two-state toggle. Deleting takes two
    steps: select a target, then confirm. Cancelling sends nothing.
    """

    def __init__(self, store: CommentStore) -> None:
        self.store = store
        self.selected = ModerationFilter.ALL
        self.pending_delete: Optional[CommentId] = None

    @property
    def visible(self) -> list[Comment]:
        return filter_comments(self.store.comments, self.selected)

    @property
    def counts(self) -> ModerationCounts:
        return moderation_counts(self.store.comments)

    def select(self, selector: ModerationFilter | str) -> None:
        self.selected = ModerationFilter(selector)

    async def approve(self, comment_id: CommentId) -> Comment:
        return await self.store.update_comment(comment_id, is_approved=True)

    async def reject(self, comment_id: CommentId) -> Comment:
        return await self.store.update_comment(comment_id, is_approved=False)

    def request_delete(self, comment_id: CommentId) -> None:
        """First step: remember which comment the confirmation is about."""
        self.pending_delete = comment_id

    def cancel_delete(self) -> None:
        self.pending_delete = None

    async def confirm_delete(self) -> CommentId:
        """Second step: delete the selected comment.

        The selection is kept when the request fails so it can be retried.

        Returns:
            ID of the deleted comment

        Raises:
            BusinessRuleViolationError: If no deletion was requested
            AdapterError: If the request fails
        """
        if self.pending_delete is None:
            raise BusinessRuleViolationError("No comment selected for deletion")

        comment_id = self.pending_delete
        await self.store.delete_comment(comment_id)
        self.pending_delete = None
        logfire.info("Comment deleted by moderator", comment_id=comment_id)
        return comment_id
