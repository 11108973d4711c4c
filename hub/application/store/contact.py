"""Contact message aggregate store."""

from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import logfire

from hub.adapter.error import ApplicationError
from hub.application.store.base import Store
from hub.config import ContactSettings
from hub.domain.error import ValidationError
from hub.domain.model.contact import ContactMessage
from hub.domain.model.form import ContactMessageForm, form_errors, parse_form
from hub.domain.model.pagination import Page, Pagination
from hub.domain.repository.contact import ContactMessageRepository
from hub.domain.value import ContactStatus, MessageFilter
from hub.domain.value.common import ValueObject


class MessageBuckets(ValueObject):
    """Messages split by age for the admin inbox tabs."""

    new: list[ContactMessage]
    past: list[ContactMessage]

    @property
    def all(self) -> list[ContactMessage]:
        return [*self.new, *self.past]

    def for_filter(self, selector: MessageFilter) -> list[ContactMessage]:
        if selector is MessageFilter.NEW:
            return self.new
        if selector is MessageFilter.PAST:
            return self.past
        return self.all

    def counts(self) -> dict[MessageFilter, int]:
        return {
            MessageFilter.ALL: len(self.new) + len(self.past),
            MessageFilter.NEW: len(self.new),
            MessageFilter.PAST: len(self.past),
        }


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def bucket_messages(
    messages: list[ContactMessage],
    new_message_days: int = 7,
    now: Optional[datetime] = None,
) -> MessageBuckets:
    """Split messages into new and past.

    A message received at or after `now - new_message_days` is new.
    Timestamps without a timezone are read as UTC.
    """
    threshold = _as_utc(now or datetime.now(timezone.utc)) - timedelta(days=new_message_days)
    new: list[ContactMessage] = []
    past: list[ContactMessage] = []
    for message in messages:
        (new if _as_utc(message.created_at) >= threshold else past).append(message)
    return MessageBuckets(new=new, past=past)


class ContactMessageStore(Store):
    """Admin inbox and public contact form."""

    name = "contact_store"

    def __init__(
        self,
        contact_repository: ContactMessageRepository,
        settings: Optional[ContactSettings] = None,
    ) -> None:
        super().__init__()
        self.contact_repository = contact_repository
        self.settings = settings or ContactSettings()
        self.messages: list[ContactMessage] = []
        self.pagination: Optional[Pagination] = None

    def _reset_state(self) -> None:
        self.messages = []
        self.pagination = None

    async def fetch_messages(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        status: Optional[ContactStatus] = None,
    ) -> None:
        await self._fetch(
            "fetch_messages",
            lambda: self.contact_repository.find_page(page=page, limit=limit, status=status),
            self._apply_listing,
        )

    def bucket_messages(self, now: Optional[datetime] = None) -> MessageBuckets:
        return bucket_messages(self.messages, self.settings.new_message_days, now)

    async def submit_message(
        self, form: ContactMessageForm | Mapping[str, Any]
    ) -> ContactMessage:
        """Send a message through the public contact form.

        Raises:
            ValidationError: If the form is invalid, or the server rejected
                it with field errors
            AdapterError: If the request fails otherwise
        """
        message_form = parse_form(ContactMessageForm, form)
        try:
            return await self._mutate(
                "submit_message",
                lambda: self.contact_repository.submit(message_form),
                lambda _: None,
            )
        except ApplicationError as e:
            field_errors = form_errors(e.errors)
            if not field_errors:
                raise
            logfire.info("Contact form rejected", fields=sorted(field_errors))
            raise ValidationError(e.message, field_errors) from e

    def _apply_listing(self, page: Page[ContactMessage]) -> None:
        self.messages = page.items
        self.pagination = page.pagination
