"""Admin dashboard preferences.

Local only: nothing here is sent to the API. When a path is given the
settings are persisted as JSON and reloaded on start.
"""

from pathlib import Path
from typing import Optional

import logfire
from pydantic import Field
from pydantic import ValidationError as PydanticValidationError

from hub.application.store.base import Store
from hub.domain.value import RegistrationAlertFrequency
from hub.domain.value.common import ValueObject


class DefaultEventSettings(ValueObject):
    max_participants: int = Field(default=50, ge=1)
    location: str = "GAFC Community Hub, Rotterdam"


class DashboardPreferences(ValueObject):
    compact_tables: bool = False


class AdminSettings(ValueObject):
    moderation_alerts: bool = True
    registration_alerts: RegistrationAlertFrequency = RegistrationAlertFrequency.IMMEDIATE
    default_event_settings: DefaultEventSettings = DefaultEventSettings()
    dashboard_preferences: DashboardPreferences = DashboardPreferences()


class AdminSettingsStore(Store):
    name = "settings_store"

    def __init__(self, path: Optional[Path] = None) -> None:
        super().__init__()
        self.path = path
        self.settings = self._load()

    @property
    def moderation_alerts(self) -> bool:
        return self.settings.moderation_alerts

    @property
    def registration_alerts(self) -> RegistrationAlertFrequency:
        return self.settings.registration_alerts

    @property
    def default_event_settings(self) -> DefaultEventSettings:
        return self.settings.default_event_settings

    @property
    def dashboard_preferences(self) -> DashboardPreferences:
        return self.settings.dashboard_preferences

    def toggle_moderation_alerts(self, value: bool) -> None:
        self._set(moderation_alerts=value)

    def set_registration_alerts(self, value: RegistrationAlertFrequency | str) -> None:
        self._set(registration_alerts=RegistrationAlertFrequency(value))

    def update_default_event_settings(self, **updates) -> None:
        merged = self.settings.default_event_settings.model_dump() | updates
        self._set(default_event_settings=DefaultEventSettings.model_validate(merged))

    def update_dashboard_preferences(self, **updates) -> None:
        merged = self.settings.dashboard_preferences.model_dump() | updates
        self._set(dashboard_preferences=DashboardPreferences.model_validate(merged))

    def reset_settings(self) -> None:
        self.settings = AdminSettings()
        self._save()
        self._notify()

    def _reset_state(self) -> None:
        self.settings = AdminSettings()

    def _set(self, **changes) -> None:
        self.settings = self.settings.model_copy(update=changes)
        self._save()
        self._notify()

    def _load(self) -> AdminSettings:
        if self.path is None or not self.path.exists():
            return AdminSettings()
        try:
            return AdminSettings.model_validate_json(self.path.read_text())
        except PydanticValidationError as e:
            logfire.warn("Ignoring unreadable admin settings", path=str(self.path), error=str(e))
            return AdminSettings()

    def _save(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self.settings.model_dump_json(by_alias=True, indent=2))
