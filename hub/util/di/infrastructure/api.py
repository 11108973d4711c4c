"""Platform API infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire

from hub.adapter.http.client import ApiClient
from hub.adapter.http.repository import (
    HttpAuthRepository,
    HttpCommentRepository,
    HttpContactMessageRepository,
    HttpEventRepository,
    HttpGalleryRepository,
    HttpOrganizerRepository,
    HttpRegistrationRepository,
)
from hub.adapter.http.session import AuthSession
from hub.config import Settings
from hub.domain.repository import (
    AuthRepository,
    CommentRepository,
    ContactMessageRepository,
    EventRepository,
    GalleryRepository,
    OrganizerRepository,
    RegistrationRepository,
)
from hub.util.di.base import ProviderBase
from hub.util.error import ConfigurationError


class ApiProvider(ProviderBase):
    """Platform API component base."""

    __mock_component__ = "api"


class ProdApiProvider(ApiProvider):
    """Production provider talking to the REST API over httpx."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_client(
        self, settings: Settings, session: AuthSession
    ) -> AsyncIterator[ApiClient]:
        """Provide API client, closed with the container."""
        if not settings.api.base_url:
            raise ConfigurationError("API__BASE_URL must be set")

        client = ApiClient(
            base_url=settings.api.base_url,
            session=session,
            timeout=settings.api.timeout,
        )
        logfire.info("API client opened", base_url=settings.api.base_url)
        try:
            yield client
        finally:
            await client.aclose()
            logfire.info("API client closed")

    @provide(scope=Scope.APP)
    def get_comment_repository(self, client: ApiClient) -> CommentRepository:
        return HttpCommentRepository(client)

    @provide(scope=Scope.APP)
    def get_event_repository(self, client: ApiClient) -> EventRepository:
        return HttpEventRepository(client)

    @provide(scope=Scope.APP)
    def get_gallery_repository(self, client: ApiClient) -> GalleryRepository:
        return HttpGalleryRepository(client)

    @provide(scope=Scope.APP)
    def get_organizer_repository(self, client: ApiClient) -> OrganizerRepository:
        return HttpOrganizerRepository(client)

    @provide(scope=Scope.APP)
    def get_registration_repository(self, client: ApiClient) -> RegistrationRepository:
        return HttpRegistrationRepository(client)

    @provide(scope=Scope.APP)
    def get_contact_repository(self, client: ApiClient) -> ContactMessageRepository:
        return HttpContactMessageRepository(client)

    @provide(scope=Scope.APP)
    def get_auth_repository(self, client: ApiClient) -> AuthRepository:
        return HttpAuthRepository(client)
