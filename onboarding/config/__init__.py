"""Configuration package."""

from onboarding.config.settings import (
    Settings,
    WizardSettings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "Settings",
    "WizardSettings",
    "get_settings",
    "validate_all_settings",
]
