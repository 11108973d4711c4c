"""Comment store scenarios over the HTTP repository and a mock API."""

import json

import httpx
import pytest

from hub.adapter.error import ApplicationError
from hub.adapter.http.client import ApiClient
from hub.adapter.http.repository import HttpCommentRepository
from hub.adapter.http.session import AuthSession
from hub.application.store import CommentStore, ModerationView
from hub.config import CommentSettings
from hub.domain.repository import CommentQuery
from hub.domain.value import CommentId, ModerationFilter

LISTING = {
    "success": True,
    "data": {
        "comments": [
            {
                "id": "a1",
                "content": "hi",
                "authorName": "X",
                "authorEmail": "x@x.com",
                "isApproved": False,
                "createdAt": "2024-01-01T00:00:00Z",
            }
        ],
        "pagination": {"current": 1, "pages": 1, "total": 1},
    },
}


class FakeApi:
    """Minimal stand-in for the comment endpoints."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")

        if request.method == "GET" and path == "/comments":
            return httpx.Response(200, json=LISTING)
        if request.method == "GET" and path == "/comments/a1/replies":
            return httpx.Response(200, json={"success": True, "data": {"comments": []}})
        if request.method == "PUT" and path == "/comments/a1":
            body = json.loads(request.content)
            comment = {**LISTING["data"]["comments"][0], "isApproved": body["isApproved"]}
            return httpx.Response(200, json={"success": True, "data": {"comment": comment}})
        if request.method == "DELETE" and path == "/comments/a1":
            return httpx.Response(200, json={"success": True, "message": "Deleted"})
        return httpx.Response(404, json={"success": False, "message": "Comment not found"})


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def repository(api: FakeApi) -> HttpCommentRepository:
    client = ApiClient(
        base_url="http://hub.test/api",
        session=AuthSession(),
        transport=httpx.MockTransport(api),
    )
    return HttpCommentRepository(client)


class TestCommentScenarios:
    """End-to-end store scenarios against a mocked API."""

    @pytest.mark.asyncio
    async def test_listing_is_held_and_filtered(self, repository: HttpCommentRepository):
        """A fetched pending comment shows under pending but not approved."""
        # Arrange
        store = CommentStore(repository)
        view = ModerationView(store)

        # Act
        await store.fetch_comments()

        # Assert
        assert len(store.comments) == 1
        held = store.comments[0]
        assert held.id == "a1"
        assert held.is_approved is False
        assert held.model_dump(by_alias=True)["_id"] == "a1"
        view.select(ModerationFilter.PENDING)
        assert [c.id for c in view.visible] == ["a1"]
        view.select(ModerationFilter.APPROVED)
        assert view.visible == []

    @pytest.mark.asyncio
    async def test_approval_updates_counts(self, repository: HttpCommentRepository):
        """Approving moves one comment from pending to approved."""
        # Arrange
        store = CommentStore(repository)
        view = ModerationView(store)
        await store.fetch_comments()
        before = view.counts

        # Act
        await store.update_comment(CommentId("a1"), is_approved=True)

        # Assert
        assert store.get(CommentId("a1")).is_approved is True
        assert view.counts.approved == before.approved + 1
        assert view.counts.pending == before.pending - 1

    @pytest.mark.asyncio
    async def test_delete_of_unknown_id_keeps_list(self, repository: HttpCommentRepository):
        store = CommentStore(repository)
        await store.fetch_comments()

        with pytest.raises(ApplicationError):
            await store.delete_comment(CommentId("zz"))

        assert len(store.comments) == 1

    @pytest.mark.asyncio
    async def test_delete_removes_entry(self, repository: HttpCommentRepository):
        store = CommentStore(repository)
        await store.fetch_comments()

        await store.delete_comment(CommentId("a1"))

        assert store.comments == []


class TestHttpCommentRepository:
    """Tests for request shapes."""

    @pytest.mark.asyncio
    async def test_query_parameters(self, api: FakeApi, repository: HttpCommentRepository):
        await repository.find_page(
            CommentQuery(page=2, limit=10, event_id="e1", parent_id=None, approved=True)
        )

        params = api.requests[0].url.params
        assert params["page"] == "2"
        assert params["limit"] == "10"
        assert params["eventId"] == "e1"
        assert params["parentId"] == "null"
        assert params["approved"] == "true"

    @pytest.mark.asyncio
    async def test_store_does_not_forward_approved_by_default(
        self, api: FakeApi, repository: HttpCommentRepository
    ):
        store = CommentStore(repository, CommentSettings())

        await store.fetch_comments(approved=True, parent_id=None)

        params = api.requests[0].url.params
        assert "approved" not in params
        assert params["parentId"] == "null"
        assert params["limit"] == "50"

    @pytest.mark.asyncio
    async def test_replies_endpoint(self, api: FakeApi, repository: HttpCommentRepository):
        replies = await repository.find_replies(CommentId("a1"))

        assert replies == []
        assert api.requests[0].url.path == "/api/comments/a1/replies"

    @pytest.mark.asyncio
    async def test_approval_body(self, api: FakeApi, repository: HttpCommentRepository):
        await repository.set_approval(CommentId("a1"), False)

        request = api.requests[0]
        assert request.method == "PUT"
        assert json.loads(request.content) == {"isApproved": False}
