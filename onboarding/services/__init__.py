"""Services package."""

from onboarding.services.storage import (
    AuditStorageInterface,
    InMemoryAuditStorage,
    InMemoryPreferenceStore,
    JsonFilePreferenceStore,
    NotFoundError,
    PreferenceKey,
    PreferenceStore,
    StorageConnectionError,
    StorageError,
    load_survey_result,
    save_survey_result,
)

__all__ = [
    "AuditStorageInterface",
    "InMemoryAuditStorage",
    "InMemoryPreferenceStore",
    "JsonFilePreferenceStore",
    "NotFoundError",
    "PreferenceKey",
    "PreferenceStore",
    "StorageConnectionError",
    "StorageError",
    "load_survey_result",
    "save_survey_result",
]
