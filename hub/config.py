"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseModel):
    """REST API configuration."""

    # Base URL of the platform API, including the /api prefix
    base_url: str = "http://localhost:5000/api"

    # Request timeout in seconds (None = transport default)
    timeout: float | None = 30.0


class CommentSettings(BaseModel):
    """Comment listing and moderation configuration."""

    # Forward the `approved` filter to the server.
    # Disabled by default: the backing Firestore collection has no composite
    # index for approved + parentId + eventId queries yet.
    approved_filter_enabled: bool = False

    # Replies are offered only below this nesting depth
    max_reply_depth: int = Field(default=3, ge=1)

    # Page size used when a caller does not pass `limit`
    default_page_size: int = Field(default=50, ge=1)


class ContactSettings(BaseModel):
    """Contact message configuration."""

    # Messages younger than this many days are shown as "new"
    new_message_days: int = Field(default=7, ge=1)


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Client settings.

    Set environment variables to override, using `__` for nested values:

        API__BASE_URL=https://hub.example.org/api
        COMMENTS__APPROVED_FILTER_ENABLED=true
        CONTACT__NEW_MESSAGE_DAYS=14
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows API__BASE_URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Where admin dashboard preferences are stored (None = not persisted)
    admin_settings_path: Path | None = None

    # Nested settings
    api: APISettings = APISettings()
    comments: CommentSettings = CommentSettings()
    contact: ContactSettings = ContactSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
