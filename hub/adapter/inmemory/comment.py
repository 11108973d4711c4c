"""In-memory comment repository for testing."""

from hub.adapter.error import ApplicationError
from hub.adapter.inmemory.common import new_id, now, paginate
from hub.domain.model.comment import Comment
from hub.domain.model.form import CommentForm
from hub.domain.model.pagination import Page
from hub.domain.repository.comment import CommentQuery, CommentRepository
from hub.domain.value import CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Mirrors the server: newest first, reply counts derived on read,
    unknown ids answered with `success: false`.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_page(self, query: CommentQuery) -> Page[Comment]:
        """List comments matching a query."""
        comments = list(self._comments.values())

        if query.approved is not None:
            comments = [c for c in comments if c.is_approved == query.approved]
        if query.event_id:
            comments = [c for c in comments if c.event_id == query.event_id]
        if query.filters_parent:
            comments = [c for c in comments if c.parent_id == query.parent_id]

        comments.sort(key=lambda c: c.created_at, reverse=True)
        return paginate([self._with_reply_count(c) for c in comments], query.page, query.limit)

    async def find_replies(self, parent_id: CommentId) -> list[Comment]:
        """List direct replies, oldest first."""
        replies = [c for c in self._comments.values() if c.parent_id == parent_id]
        replies.sort(key=lambda c: c.created_at)
        return [self._with_reply_count(c) for c in replies]

    async def create(self, form: CommentForm) -> Comment:
        """Store a new unapproved comment."""
        if form.parent_id and form.parent_id not in self._comments:
            raise ApplicationError("Parent comment not found", 404)

        timestamp = now()
        comment = Comment(
            id=CommentId(new_id()),
            content=form.content,
            author_name=form.author_name,
            author_email=form.author_email,
            is_approved=False,
            created_at=timestamp,
            updated_at=timestamp,
            parent_id=form.parent_id,
            event_id=form.event_id,
        )
        return await self.save(comment)

    async def set_approval(self, comment_id: CommentId, is_approved: bool) -> Comment:
        """Toggle approval of a stored comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            raise ApplicationError("Comment not found", 404)

        updated = comment.model_copy(
            update={"is_approved": is_approved, "updated_at": now()}
        )
        self._comments[comment_id] = updated
        return self._with_reply_count(updated)

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and its whole reply subtree."""
        if comment_id not in self._comments:
            raise ApplicationError("Comment not found", 404)

        pending = [comment_id]
        while pending:
            current = pending.pop()
            self._comments.pop(current, None)
            pending.extend(c.id for c in self._comments.values() if c.parent_id == current)

    async def save(self, comment: Comment) -> Comment:
        """Insert or replace a comment (test seeding)."""
        self._comments[comment.id] = comment
        return comment

    def _with_reply_count(self, comment: Comment) -> Comment:
        count = sum(1 for c in self._comments.values() if c.parent_id == comment.id)
        return comment.model_copy(update={"reply_count": count})
