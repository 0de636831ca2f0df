"""In-memory storage backends, used by tests and as the default store."""

from typing import Optional
from uuid import UUID

from onboarding.models.audit import WizardEvent
from onboarding.services.storage.interface import (
    AuditStorageInterface,
    NotFoundError,
    PreferenceStore,
)


class InMemoryPreferenceStore(PreferenceStore):
    """Preference store backed by a dict."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        if key not in self._values:
            raise NotFoundError(f"Preference not set: {key}")
        del self._values[key]

    def as_dict(self) -> dict[str, str]:
        return dict(self._values)


class InMemoryAuditStorage(AuditStorageInterface):
    """Append-only event list."""

    def __init__(self):
        self._events: list[WizardEvent] = []

    def append_event(self, event: WizardEvent) -> bool:
        self._events.append(event)
        return True

    def get_events_by_session(self, session_id: UUID) -> list[WizardEvent]:
        return [event for event in self._events if event.session_id == session_id]

    @property
    def events(self) -> list[WizardEvent]:
        return list(self._events)
