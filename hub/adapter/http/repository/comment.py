"""HTTP comment repository."""

import logfire

from hub.adapter.http.client import ApiClient
from hub.adapter.http.envelope import (
    ensure_success,
    parse_entities,
    parse_entity,
    parse_pagination,
    unwrap,
)
from hub.domain.model.comment import Comment
from hub.domain.model.form import CommentForm
from hub.domain.model.pagination import Page
from hub.domain.repository.comment import CommentQuery, CommentRepository
from hub.domain.value import CommentId


class HttpCommentRepository(CommentRepository):
    """Comment repository backed by the /comments endpoints."""

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def find_page(self, query: CommentQuery) -> Page[Comment]:
        params = query.to_params()
        with logfire.span("comment_repository.find_page", **params):
            data = unwrap(await self.client.get("/comments", params=params))
            return Page[Comment](
                items=parse_entities(Comment, data, "comments"),
                pagination=parse_pagination(data),
            )

    async def find_replies(self, parent_id: CommentId) -> list[Comment]:
        with logfire.span("comment_repository.find_replies", parent_id=parent_id):
            data = unwrap(await self.client.get(f"/comments/{parent_id}/replies"))
            return parse_entities(Comment, data, "comments")

    async def create(self, form: CommentForm) -> Comment:
        with logfire.span(
            "comment_repository.create",
            event_id=form.event_id,
            parent_id=form.parent_id,
        ):
            data = unwrap(await self.client.post("/comments", form.to_payload()))
            return parse_entity(Comment, data, "comment")

    async def set_approval(self, comment_id: CommentId, is_approved: bool) -> Comment:
        with logfire.span(
            "comment_repository.set_approval",
            comment_id=comment_id,
            is_approved=is_approved,
        ):
            envelope = await self.client.put(
                f"/comments/{comment_id}", {"isApproved": is_approved}
            )
            return parse_entity(Comment, unwrap(envelope), "comment")

    async def delete(self, comment_id: CommentId) -> None:
        with logfire.span("comment_repository.delete", comment_id=comment_id):
            ensure_success(await self.client.delete(f"/comments/{comment_id}"))
