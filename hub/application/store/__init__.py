from hub.application.store.auth import AuthStore
from hub.application.store.base import Store
from hub.application.store.comment import CommentStore
from hub.application.store.contact import ContactMessageStore, MessageBuckets, bucket_messages
from hub.application.store.event import EventStore
from hub.application.store.gallery import GalleryStore
from hub.application.store.moderation import (
    ModerationCounts,
    ModerationView,
    filter_comments,
    moderation_counts,
)
from hub.application.store.organizer import OrganizerStore
from hub.application.store.registration import RegistrationStore
from hub.application.store.replies import ReplyLoader, ReplyState
from hub.application.store.settings import AdminSettings, AdminSettingsStore

__all__ = [
    "AdminSettings",
    "AdminSettingsStore",
    "AuthStore",
    "CommentStore",
    "ContactMessageStore",
    "EventStore",
    "GalleryStore",
    "MessageBuckets",
    "ModerationCounts",
    "ModerationView",
    "OrganizerStore",
    "RegistrationStore",
    "ReplyLoader",
    "ReplyState",
    "Store",
    "bucket_messages",
    "filter_comments",
    "moderation_counts",
]
