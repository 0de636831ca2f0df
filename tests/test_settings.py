"""Tests for configuration."""

import pytest
from pydantic import ValidationError

from onboarding.config import WizardSettings, get_settings, validate_all_settings


class TestWizardSettings:
    """Tests for WizardSettings."""

    def test_defaults(self, settings):
        """Test the shipped defaults."""
        assert settings.default_language == "en"
        assert settings.default_currency == "USD"
        assert settings.currency_whitelist == ("USD", "EUR", "GBP", "CHF", "PLN", "TRY", "CAD")
        assert settings.max_name_length == 50
        assert settings.seed_language_from_preferences is False

    def test_environment_overrides(self, monkeypatch):
        """Test ONBOARDING_* variables are read."""
        monkeypatch.setenv("ONBOARDING_DEFAULT_CURRENCY", "eur")
        monkeypatch.setenv("ONBOARDING_SUPPORTED_CURRENCIES", "eur, pln ,EUR")
        monkeypatch.setenv("ONBOARDING_SEED_LANGUAGE_FROM_PREFERENCES", "true")

        settings = WizardSettings(_env_file=None)

        assert settings.default_currency == "EUR"
        assert settings.currency_whitelist == ("EUR", "PLN")
        assert settings.seed_language_from_preferences is True

    def test_default_currency_must_be_whitelisted(self):
        """Test the fallback currency must be selectable."""
        with pytest.raises(ValidationError, match="not in"):
            WizardSettings(
                _env_file=None,
                default_currency="JPY",
                supported_currencies="USD,EUR",
            )

    def test_empty_whitelist_rejected(self):
        """Test at least one currency is required."""
        with pytest.raises(ValidationError):
            WizardSettings(_env_file=None, supported_currencies=" , ")

    @pytest.mark.parametrize("codes", ["USD,USDT", "USD,EU", "USD,U5D"])
    def test_whitelist_codes_must_be_three_letters(self, codes):
        """Test every whitelisted currency is an ISO-style code."""
        with pytest.raises(ValidationError, match="3-letter"):
            WizardSettings(_env_file=None, supported_currencies=codes)

    def test_max_name_length_bounds(self):
        """Test the name length limit range."""
        with pytest.raises(ValidationError):
            WizardSettings(_env_file=None, max_name_length=0)

    def test_language_is_normalized(self):
        """Test the default language is lowercased."""
        assert WizardSettings(_env_file=None, default_language=" DE ").default_language == "de"


class TestSettingsRoot:
    """Tests for the cached root settings."""

    def test_get_settings_is_cached(self):
        """Test the same instance is returned until the cache is cleared."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()

    def test_validate_all_settings(self):
        """Test the startup check reports the wizard section."""
        get_settings.cache_clear()
        assert validate_all_settings()["wizard"] is True
        get_settings.cache_clear()
