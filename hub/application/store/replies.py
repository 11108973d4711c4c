"""Lazy reply threads.

A ReplyLoader drives the replies toggle of one comment:

    COLLAPSED --toggle--> LOADING --ok--> EXPANDED --toggle--> COLLAPSED
                             |
                             +--error--> COLLAPSED (nothing cached, ReplyLoadError)

Once replies are cached in the comment store, toggling only flips
visibility. Submitting a reply always re-fetches the whole thread.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

import logfire

from hub.adapter.error import AdapterError, error_message
from hub.application.store.comment import CommentStore
from hub.domain.error import BusinessRuleViolationError, ReplyLoadError
from hub.domain.model.comment import Comment
from hub.domain.model.form import CommentForm, parse_form
from hub.domain.value import CommentId


class ReplyState(str, Enum):
    """Visibility state of a reply thread."""

    COLLAPSED = "collapsed"
    LOADING = "loading"
    EXPANDED = "expanded"


class ReplyLoader:
    """Replies toggle for a single comment."""

    def __init__(
        self,
        store: CommentStore,
        comment_id: CommentId,
        depth: int = 0,
    ) -> None:
        """Initialize reply loader.

        Args:
            store: Comment store holding the canonical records
            comment_id: Parent comment ID
            depth: Nesting depth of the parent comment (0 for top-level)
        """
        self.store = store
        self.comment_id = comment_id
        self.depth = depth
        self.state = ReplyState.COLLAPSED

    @property
    def is_expanded(self) -> bool:
        return self.state is ReplyState.EXPANDED

    @property
    def is_loading(self) -> bool:
        return self.state is ReplyState.LOADING

    @property
    def replies(self) -> list[Comment]:
        """Cached replies, read from the store's canonical table."""
        return self.store.replies_of(self.comment_id)

    @property
    def can_reply(self) -> bool:
        """Whether the reply form is offered at this depth."""
        return self.depth < self.store.settings.max_reply_depth

    def child(self, reply_id: CommentId) -> "ReplyLoader":
        """Loader for a reply of this comment, one level deeper."""
        return ReplyLoader(self.store, reply_id, depth=self.depth + 1)

    async def toggle(self) -> ReplyState:
        """Show or hide the replies, fetching them the first time.

        Returns:
            The new state

        Raises:
            ReplyLoadError: If the first fetch fails (state stays collapsed)
        """
        if self.state is ReplyState.LOADING:
            return self.state

        if self.store.replies_loaded(self.comment_id):
            self.state = (
                ReplyState.COLLAPSED if self.is_expanded else ReplyState.EXPANDED
            )
            return self.state

        self.state = ReplyState.LOADING
        try:
            await self.store.fetch_replies(self.comment_id)
        except AdapterError as e:
            self.state = ReplyState.COLLAPSED
            logfire.warn(
                "Failed to load replies", comment_id=self.comment_id, error=str(e)
            )
            raise ReplyLoadError(self.comment_id) from e

        self.state = ReplyState.EXPANDED
        return self.state

    async def submit_reply(self, form: CommentForm | Mapping[str, Any]) -> Comment:
        """Submit a reply to this comment and reload the thread.

        The thread is re-fetched even though the new reply is pending
        approval, so it shows exactly what the server returns.

        Raises:
            BusinessRuleViolationError: If replies are not allowed at this depth
            ValidationError: If the form is invalid
            AdapterError: If the submission fails
            ReplyLoadError: If the submission succeeded but the reload failed
        """
        if not self.can_reply:
            raise BusinessRuleViolationError(
                f"Replies are limited to {self.store.settings.max_reply_depth} levels"
            )

        reply_form = parse_form(CommentForm, form)
        created = await self.store.create_comment(
            reply_form.model_copy(update={"parent_id": self.comment_id})
        )
        logfire.info("Reply submitted", comment_id=self.comment_id, reply_id=created.id)

        try:
            await self.store.fetch_replies(self.comment_id)
        except AdapterError as e:
            raise ReplyLoadError(self.comment_id, error_message(e)) from e
        return created
