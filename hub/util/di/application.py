"""Application layer DI providers."""

from dishka import Scope, provide

from hub.adapter.http.session import AuthSession
from hub.application.store import (
    AdminSettingsStore,
    AuthStore,
    CommentStore,
    ContactMessageStore,
    EventStore,
    GalleryStore,
    OrganizerStore,
    RegistrationStore,
)
from hub.config import CommentSettings, ContactSettings, Settings
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


class ProdApplicationProvider(ProviderBase):
    """Aggregate stores - one instance per container, dropped when it closes."""

    @provide(scope=Scope.APP)
    def get_comment_store(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> CommentStore:
        return CommentStore(comment_repository=comment_repository, settings=settings)

    @provide(scope=Scope.APP)
    def get_event_store(self, event_repository: EventRepository) -> EventStore:
        return EventStore(event_repository=event_repository)

    @provide(scope=Scope.APP)
    def get_gallery_store(self, gallery_repository: GalleryRepository) -> GalleryStore:
        return GalleryStore(gallery_repository=gallery_repository)

    @provide(scope=Scope.APP)
    def get_organizer_store(
        self, organizer_repository: OrganizerRepository
    ) -> OrganizerStore:
        return OrganizerStore(organizer_repository=organizer_repository)

    @provide(scope=Scope.APP)
    def get_registration_store(
        self, registration_repository: RegistrationRepository
    ) -> RegistrationStore:
        return RegistrationStore(registration_repository=registration_repository)

    @provide(scope=Scope.APP)
    def get_contact_store(
        self, contact_repository: ContactMessageRepository, settings: ContactSettings
    ) -> ContactMessageStore:
        return ContactMessageStore(contact_repository=contact_repository, settings=settings)

    @provide(scope=Scope.APP)
    def get_auth_store(
        self, auth_repository: AuthRepository, session: AuthSession
    ) -> AuthStore:
        return AuthStore(auth_repository=auth_repository, session=session)

    @provide(scope=Scope.APP)
    def get_settings_store(self, settings: Settings) -> AdminSettingsStore:
        """Provide admin preferences, persisted when a path is configured."""
        return AdminSettingsStore(path=settings.admin_settings_path)
