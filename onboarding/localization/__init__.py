"""Localization package."""

from onboarding.localization.resolver import (
    DEFAULT_LANGUAGE,
    TRANSLATIONS,
    LocalizationResolver,
    get_resolver,
    t,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "TRANSLATIONS",
    "LocalizationResolver",
    "get_resolver",
    "t",
]
