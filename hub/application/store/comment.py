"""Comment aggregate store.

Holds the comments of one view (global or per event) in a normalized
table: every comment the store has seen is kept once by id, the listing
keeps an ordered list of ids, and replies are indexed by parent id. An
approve, reject or delete therefore updates the single canonical record
wherever it is displayed (listing or an open reply thread).
"""

from collections.abc import Mapping
from typing import Any, Optional

import logfire

from hub.application.store.base import Store
from hub.config import CommentSettings
from hub.domain.model.comment import Comment
from hub.domain.model.form import CommentForm, parse_form
from hub.domain.model.pagination import Page, Pagination
from hub.domain.repository.comment import CommentQuery, CommentRepository
from hub.domain.value import CommentId


class CommentStore(Store):
    """Cache and mutation surface for comments."""

    name = "comment_store"

    def __init__(
        self,
        comment_repository: CommentRepository,
        settings: Optional[CommentSettings] = None,
    ) -> None:
        """Initialize comment store.

        Args:
            comment_repository: Comment repository
            settings: Comment settings (approved filter flag, page size)
        """
        super().__init__()
        self.comment_repository = comment_repository
        self.settings = settings or CommentSettings()
        self.pagination: Optional[Pagination] = None
        self._records: dict[CommentId, Comment] = {}
        self._listed: list[CommentId] = []
        self._children: dict[CommentId, list[CommentId]] = {}

    def _reset_state(self) -> None:
        self.pagination = None
        self._records = {}
        self._listed = []
        self._children = {}

    @property
    def comments(self) -> list[Comment]:
        """The held listing, in server order."""
        return [self._records[comment_id] for comment_id in self._listed]

    def get(self, comment_id: CommentId) -> Optional[Comment]:
        return self._records.get(comment_id)

    def replies_loaded(self, parent_id: CommentId) -> bool:
        """Whether replies of a comment have been fetched (possibly none)."""
        return parent_id in self._children

    def replies_of(self, parent_id: CommentId) -> list[Comment]:
        """Cached replies of a comment (empty if never loaded)."""
        return [self._records[reply_id] for reply_id in self._children.get(parent_id, [])]

    async def fetch_comments(self, **params: Any) -> None:
        """Fetch a page of comments and replace the held listing.

        Accepts `page`, `limit`, `approved`, `event_id` and `parent_id`.
        Passing `parent_id=None` lists top-level comments only; leaving it
        out applies no parent filter.

        Never raises on request failure: the message lands in `error` and
        the previous listing is kept.
        """
        query = CommentQuery(**params)
        if query.limit is None:
            query = query.model_copy(update={"limit": self.settings.default_page_size})
        if query.approved is not None and not self.settings.approved_filter_enabled:
            logfire.debug(
                "Approved filter disabled, not forwarded", approved=query.approved
            )
            query = query.without_approved()

        await self._fetch(
            "fetch_comments",
            lambda: self.comment_repository.find_page(query),
            lambda page: self._apply_listing(page, query),
        )

    async def fetch_replies(self, parent_id: CommentId) -> list[Comment]:
        """Fetch all replies of a comment, replacing its cached thread.

        Raises:
            AdapterError: If the request fails (cache left untouched)
        """
        with logfire.span(f"{self.name}.fetch_replies", parent_id=parent_id):
            replies = await self.comment_repository.find_replies(parent_id)
            self._apply_replies(parent_id, replies)
            self._notify()
            logfire.info("Replies loaded", parent_id=parent_id, count=len(replies))
            return self.replies_of(parent_id)

    async def create_comment(self, form: CommentForm | Mapping[str, Any]) -> Comment:
        """Validate and submit a comment.

        The created comment is not inserted locally: it stays invisible
        until an admin approves it.

        Raises:
            ValidationError: If the form is invalid (no request is sent)
            AdapterError: If the request fails
        """
        comment_form = parse_form(CommentForm, form)
        return await self._mutate(
            "create_comment",
            lambda: self.comment_repository.create(comment_form),
            lambda _: None,
        )

    async def update_comment(self, comment_id: CommentId, is_approved: bool) -> Comment:
        """Set the approval state of a comment and replace it in place.

        Raises:
            AdapterError: If the request fails (state unchanged)
        """
        return await self._mutate(
            "update_comment",
            lambda: self.comment_repository.set_approval(comment_id, is_approved),
            lambda updated: self._replace(comment_id, updated),
        )

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment and drop it (with its replies) from the store.

        Raises:
            AdapterError: If the request fails (state unchanged)
        """
        await self._mutate(
            "delete_comment",
            lambda: self.comment_repository.delete(comment_id),
            lambda _: self._remove(comment_id),
        )

    def _apply_listing(self, page: Page[Comment], query: CommentQuery) -> None:
        items = page.items
        if query.top_level_only:
            items = [c for c in items if c.parent_id is None]
            if len(items) != len(page.items):
                logfire.warn(
                    "Replies dropped from top-level listing",
                    dropped=len(page.items) - len(items),
                )

        # Keep records still referenced by a reply thread
        threaded = {reply_id for ids in self._children.values() for reply_id in ids}
        self._records = {
            comment_id: record
            for comment_id, record in self._records.items()
            if comment_id in threaded
        }
        for comment in items:
            self._records[comment.id] = comment
        self._listed = [comment.id for comment in items]
        self.pagination = page.pagination

    def _apply_replies(self, parent_id: CommentId, replies: list[Comment]) -> None:
        for reply in replies:
            self._records[reply.id] = reply
        self._children[parent_id] = [reply.id for reply in replies]

    def _replace(self, comment_id: CommentId, updated: Comment) -> None:
        if comment_id in self._records:
            self._records[comment_id] = updated

    def _remove(self, comment_id: CommentId) -> None:
        removed_comment = self._records.get(comment_id)
        if removed_comment and removed_comment.parent_id in self._records:
            parent = self._records[removed_comment.parent_id]
            if parent.reply_count:
                self._records[parent.id] = parent.model_copy(
                    update={"reply_count": parent.reply_count - 1}
                )

        pending = [comment_id]
        removed: set[CommentId] = set()
        while pending:
            current = pending.pop()
            removed.add(current)
            pending.extend(self._children.pop(current, []))

        for removed_id in removed:
            self._records.pop(removed_id, None)
        self._listed = [i for i in self._listed if i not in removed]
        for parent_id, reply_ids in self._children.items():
            self._children[parent_id] = [i for i in reply_ids if i not in removed]
