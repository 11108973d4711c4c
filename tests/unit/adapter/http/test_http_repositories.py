"""Request and response shapes of the non-comment HTTP repositories."""

import json

import httpx
import pytest

from hub.adapter.error import ProtocolError
from hub.adapter.http.client import ApiClient
from hub.adapter.http.repository import (
    HttpAuthRepository,
    HttpContactMessageRepository,
    HttpEventRepository,
    HttpGalleryRepository,
    HttpOrganizerRepository,
    HttpRegistrationRepository,
)
from hub.adapter.http.session import AuthSession
from hub.domain.model.form import ContactMessageForm, LoginForm
from hub.domain.value import ContactStatus

EVENT = {
    "id": "e1",
    "title": "Community iftar",
    "date": "2024-03-20T18:30:00Z",
    "maxParticipants": 40,
    "currentParticipants": 40,
}


class Recorder:
    """Answers every request with a fixed envelope and keeps the requests."""

    def __init__(self, body: dict, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    def client(self) -> ApiClient:
        return ApiClient(
            base_url="http://hub.test/api",
            session=AuthSession(),
            transport=httpx.MockTransport(self),
        )


class TestHttpEventRepository:
    """Tests for HttpEventRepository."""

    @pytest.mark.asyncio
    async def test_lists_events(self):
        recorder = Recorder(
            {
                "success": True,
                "data": {
                    "events": [EVENT],
                    "pagination": {"current": 1, "pages": 1, "total": 1},
                },
            }
        )
        repository = HttpEventRepository(recorder.client())

        page = await repository.find_page(page=1, limit=5, active=True)

        params = recorder.requests[0].url.params
        assert (params["page"], params["limit"], params["active"]) == ("1", "5", "true")
        assert page.items[0].id == "e1"
        assert page.items[0].is_full

    @pytest.mark.asyncio
    async def test_delete_needs_no_data(self):
        recorder = Recorder({"success": True, "message": "Event deleted"})
        repository = HttpEventRepository(recorder.client())

        await repository.delete("e1")

        assert recorder.requests[0].method == "DELETE"
        assert recorder.requests[0].url.path == "/api/events/e1"


class TestHttpContactMessageRepository:
    """Tests for HttpContactMessageRepository."""

    @pytest.mark.asyncio
    async def test_submit_sends_camel_case_body(self):
        recorder = Recorder(
            {
                "success": True,
                "data": {
                    "contactMessage": {
                        "_id": "m1",
                        "name": "Joris",
                        "email": "joris@example.org",
                        "message": "Is there parking near the venue?",
                        "createdAt": "2024-03-01T10:00:00Z",
                    }
                },
            }
        )
        repository = HttpContactMessageRepository(recorder.client())

        created = await repository.submit(
            ContactMessageForm(
                name="Joris",
                email="joris@example.org",
                message="Is there parking near the venue?",
            )
        )

        assert json.loads(recorder.requests[0].content) == {
            "name": "Joris",
            "email": "joris@example.org",
            "message": "Is there parking near the venue?",
        }
        assert created.id == "m1"
        assert created.status is ContactStatus.NEW

    @pytest.mark.asyncio
    async def test_status_filter(self):
        recorder = Recorder({"success": True, "data": {"messages": []}})
        repository = HttpContactMessageRepository(recorder.client())

        page = await repository.find_page(status=ContactStatus.RESOLVED)

        assert recorder.requests[0].url.params["status"] == "resolved"
        assert page.items == []
        assert page.pagination is None


class TestHttpRegistrationRepository:
    """Tests for HttpRegistrationRepository."""

    @pytest.mark.asyncio
    async def test_embedded_event_reference(self):
        recorder = Recorder(
            {
                "success": True,
                "data": {
                    "registration": {
                        "id": "r1",
                        "eventId": {"_id": "e1", "title": "Community iftar"},
                        "userEmail": "lina@example.org",
                        "userName": "Lina",
                        "status": "confirmed",
                    }
                },
            }
        )
        repository = HttpRegistrationRepository(recorder.client())

        registration = await repository.find_by_id("r1")

        assert registration.event_ref == "e1"
        assert registration.id == "r1"


class TestHttpGalleryAndOrganizers:
    """Tests for the gallery and organizer repositories."""

    @pytest.mark.asyncio
    async def test_gallery_list_key(self):
        recorder = Recorder(
            {
                "success": True,
                "data": {"images": [{"id": "g1", "imageUrl": "https://cdn/1.jpg"}]},
            }
        )

        page = await HttpGalleryRepository(recorder.client()).find_page()

        assert page.items[0].image_url == "https://cdn/1.jpg"

    @pytest.mark.asyncio
    async def test_organizer_active_filter(self):
        recorder = Recorder(
            {"success": True, "data": {"organizers": [{"_id": "o1", "name": "Fatima"}]}}
        )

        organizers = await HttpOrganizerRepository(recorder.client()).find_all(
            active=False
        )

        assert recorder.requests[0].url.params["active"] == "false"
        assert organizers[0].name == "Fatima"


class TestHttpAuthRepository:
    """Tests for HttpAuthRepository."""

    @pytest.mark.asyncio
    async def test_login_returns_user_and_token(self):
        recorder = Recorder(
            {
                "success": True,
                "data": {
                    "token": "tok-1",
                    "user": {"id": "u1", "email": "admin@example.org", "role": "admin"},
                },
            }
        )
        repository = HttpAuthRepository(recorder.client())

        user, token = await repository.login(
            LoginForm(email="admin@example.org", password="s3cret")
        )

        assert token == "tok-1"
        assert user.id == "u1"

    @pytest.mark.asyncio
    async def test_login_without_token_is_protocol_error(self):
        recorder = Recorder(
            {
                "success": True,
                "data": {"user": {"id": "u1", "email": "admin@example.org"}},
            }
        )
        repository = HttpAuthRepository(recorder.client())

        with pytest.raises(ProtocolError):
            await repository.login(LoginForm(email="admin@example.org", password="x"))
