"""
Survey Result Persistence

Helpers for the host's completion callback. The result is stored as
camelCase JSON under one preference key, next to the language code
the rest of the app reads.
"""

from typing import Optional

from pydantic import ValidationError

from onboarding.models.survey import SurveyResult
from onboarding.services.storage.interface import (
    PreferenceKey,
    PreferenceStore,
    StorageError,
)


def save_survey_result(store: PreferenceStore, result: SurveyResult) -> None:
    """
    Persist a completed survey.

    Raises:
        StorageError: If the store rejects the write
    """
    store.set(PreferenceKey.SURVEY_RESPONSE.value, result.to_storage_json())
    store.set(PreferenceKey.PREFERRED_LANGUAGE.value, result.language_code)


def load_survey_result(store: PreferenceStore) -> Optional[SurveyResult]:
    """
    Load the stored survey, if any.

    Returns:
        The result, or None if nothing is stored

    Raises:
        StorageError: If the stored payload cannot be decoded
    """
    payload = store.get(PreferenceKey.SURVEY_RESPONSE.value)
    if payload is None:
        return None

    try:
        return SurveyResult.from_storage_json(payload)
    except (ValidationError, ValueError) as e:
        raise StorageError(f"Stored survey result is corrupt: {e}") from e
