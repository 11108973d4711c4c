"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from hub.adapter.http.session import AuthSession
from hub.config import CommentSettings, ContactSettings, Settings
from hub.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide client settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_contact_settings(self, settings: Settings) -> ContactSettings:
        return settings.contact

    @provide(scope=Scope.APP)
    def provide_auth_session(self) -> AuthSession:
        """Provide the session shared by the API client and the auth store."""
        return AuthSession()
