"""
Storage Services Package

Provides abstract interfaces and concrete implementations for preference
and audit storage. Designed so the wizard never knows where data lives.
"""

from onboarding.services.storage.interface import (
    AuditStorageInterface,
    NotFoundError,
    PreferenceKey,
    PreferenceStore,
    StorageConnectionError,
    StorageError,
)
from onboarding.services.storage.memory import (
    InMemoryAuditStorage,
    InMemoryPreferenceStore,
)
from onboarding.services.storage.json_file import JsonFilePreferenceStore
from onboarding.services.storage.survey_results import (
    load_survey_result,
    save_survey_result,
)

__all__ = [
    # Interfaces
    "AuditStorageInterface",
    "PreferenceKey",
    "PreferenceStore",
    # Exceptions
    "NotFoundError",
    "StorageConnectionError",
    "StorageError",
    # Implementations
    "InMemoryAuditStorage",
    "InMemoryPreferenceStore",
    "JsonFilePreferenceStore",
    # Survey result helpers
    "load_survey_result",
    "save_survey_result",
]
