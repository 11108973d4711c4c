"""Registration aggregate store."""

from collections.abc import Mapping
from typing import Any, Optional

from hub.application.store.base import Store
from hub.domain.model.form import RegistrationForm, parse_form
from hub.domain.model.pagination import Page, Pagination
from hub.domain.model.registration import EventRegistration
from hub.domain.repository.registration import RegistrationRepository
from hub.domain.value import EventId, RegistrationId, RegistrationStatus


class RegistrationStore(Store):
    name = "registration_store"

    def __init__(self, registration_repository: RegistrationRepository) -> None:
        super().__init__()
        self.registration_repository = registration_repository
        self.registrations: list[EventRegistration] = []
        self.current_registration: Optional[EventRegistration] = None
        self.pagination: Optional[Pagination] = None

    def _reset_state(self) -> None:
        self.registrations = []
        self.current_registration = None
        self.pagination = None

    async def fetch_registrations(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        event_id: Optional[EventId] = None,
        status: Optional[RegistrationStatus] = None,
    ) -> None:
        await self._fetch(
            "fetch_registrations",
            lambda: self.registration_repository.find_page(
                page=page, limit=limit, event_id=event_id, status=status
            ),
            self._apply_listing,
        )

    async def fetch_registration(self, registration_id: RegistrationId) -> None:
        await self._fetch(
            "fetch_registration",
            lambda: self.registration_repository.find_by_id(registration_id),
            lambda registration: setattr(self, "current_registration", registration),
        )

    async def create_registration(
        self, form: RegistrationForm | Mapping[str, Any]
    ) -> EventRegistration:
        """Register for an event from the public site.

        The admin listing is not touched; it is refreshed on its next fetch.
        """
        registration_form = parse_form(RegistrationForm, form)
        return await self._mutate(
            "create_registration",
            lambda: self.registration_repository.create(registration_form),
            lambda _: None,
        )

    def _apply_listing(self, page: Page[EventRegistration]) -> None:
        self.registrations = page.items
        self.pagination = page.pagination
