"""
Configuration Management for the Onboarding Wizard

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The page order and prefix-page count are product policy and live in
the sequencer, not here; only the values that legitimately vary per
deployment (defaults, whitelist, storage location) are configurable.
"""

import re
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_CURRENCY_CODE = re.compile(r"[A-Z]{3}")


class WizardSettings(BaseSettings):
    """
    Onboarding wizard settings.

    Loads configuration from ONBOARDING_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="ONBOARDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Localization
    default_language: str = Field(
        default="en",
        min_length=2,
        max_length=8,
        description="Language used when a translation is missing"
    )

    # Currency
    default_currency: str = Field(
        default="USD",
        min_length=3,
        max_length=3,
        description="Currency used when the stored preference is missing or invalid"
    )
    supported_currencies: str = Field(
        default="USD,EUR,GBP,CHF,PLN,TRY,CAD",
        description="Comma-separated currency whitelist, in display order"
    )

    # Preference storage
    preferences_path: str = Field(
        default=".onboarding_preferences.json",
        description="Path to the JSON preference store used by the host app"
    )
    seed_language_from_preferences: bool = Field(
        default=False,
        description="Pre-select the language stored by a previous session"
    )

    # Input limits
    max_name_length: int = Field(
        default=50,
        ge=1,
        le=200,
        description="Display names longer than this are truncated on entry"
    )

    @field_validator('default_language')
    @classmethod
    def normalize_language(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator('default_currency')
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        return v.strip().upper()

    @model_validator(mode='after')
    def validate_currencies(self) -> 'WizardSettings':
        """Whitelist entries must be ISO codes and include the fallback currency."""
        if not self.currency_whitelist:
            raise ValueError("supported_currencies must list at least one currency")
        invalid = [code for code in self.currency_whitelist if not _CURRENCY_CODE.fullmatch(code)]
        if invalid:
            raise ValueError(
                f"supported_currencies must hold 3-letter codes, got {', '.join(invalid)}"
            )
        if self.default_currency not in self.currency_whitelist:
            raise ValueError(
                f"Default currency {self.default_currency} is not in "
                f"supported_currencies ({self.supported_currencies})"
            )
        return self

    @property
    def currency_whitelist(self) -> tuple[str, ...]:
        """Get supported currencies as an ordered, de-duplicated tuple."""
        codes = []
        for code in self.supported_currencies.split(","):
            code = code.strip().upper()
            if code and code not in codes:
                codes.append(code)
        return tuple(codes)


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def wizard(self) -> WizardSettings:
        return WizardSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    try:
        _ = settings.wizard
        results["wizard"] = True
    except Exception as e:
        results["wizard"] = False
        results["wizard_error"] = str(e)

    return results
