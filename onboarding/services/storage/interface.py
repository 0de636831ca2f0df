"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Run the wizard against the device's key/value preferences in the app
2. Use in-memory storage for testing
3. Keep the wizard decoupled from where preferences actually live

The interface is intentionally simple - string keys, string values.
Just the operations the onboarding flow needs.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional
from uuid import UUID

from onboarding.models.audit import WizardEvent


class PreferenceKey(str, Enum):
    """Preference keys shared with the rest of the app."""
    USER_CURRENCY = "anita_user_currency"
    NUMBER_FORMAT = "anita_number_format"
    PREFERRED_LANGUAGE = "anita_preferred_language_code"
    SURVEY_RESPONSE = "anita_onboarding_survey_response"


class PreferenceStore(ABC):
    """
    Abstract key/value preference store.

    Any implementation (JSON file, device defaults, etc.)
    must implement these methods.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read a preference.

        Args:
            key: Preference key

        Returns:
            The stored value, or None if not set

        Raises:
            StorageError: If the backend cannot be read
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Write a preference, overwriting any previous value.

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Remove a preference.

        Raises:
            NotFoundError: If the key is not set
        """
        pass


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Audit logs are append-only - we never delete or modify them.
    """

    @abstractmethod
    def append_event(self, event: WizardEvent) -> bool:
        """
        Append an audit event to the log.

        Returns:
            True if logged successfully
        """
        pass

    @abstractmethod
    def get_events_by_session(self, session_id: UUID) -> list[WizardEvent]:
        """
        Get all events of one wizard session.

        Returns:
            List of related events in chronological order
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class NotFoundError(StorageError):
    """Key not found in storage."""
    pass


class StorageConnectionError(StorageError):
    """Could not reach the storage backend."""
    pass
