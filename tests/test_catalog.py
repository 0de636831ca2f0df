"""Tests for the default language and question catalogs."""

import pytest
from pydantic import ValidationError

from onboarding.models.catalog import (
    DEFAULT_LANGUAGES,
    DEFAULT_QUESTIONS,
    WizardCatalog,
    default_catalog,
)
from onboarding.models.survey import LanguageOption, Question


class TestDefaultCatalog:
    """Tests for the built-in catalogs."""

    def test_language_order(self):
        """Test the languages offered, in display order."""
        codes = [language.code for language in DEFAULT_LANGUAGES]
        assert codes == ["en", "de", "fr", "es", "it", "pl", "tr", "ru", "uk"]

    def test_question_order(self):
        """Test that question order is page order."""
        ids = [question.id for question in DEFAULT_QUESTIONS]
        assert ids == ["goal", "help_first", "tracking_today", "situation", "challenge"]

    def test_every_question_has_six_options(self):
        """Test each default question offers six options."""
        for question in DEFAULT_QUESTIONS:
            assert len(question.options) == 6

    def test_default_catalog_uses_defaults(self, catalog):
        """Test default_catalog() without arguments."""
        assert catalog.languages == DEFAULT_LANGUAGES
        assert catalog.questions == DEFAULT_QUESTIONS
        assert catalog.question_ids[0] == "goal"

    def test_default_catalog_with_custom_questions(self, four_question_catalog):
        """Test replacing only the question list."""
        assert len(four_question_catalog.questions) == 4
        assert four_question_catalog.languages == DEFAULT_LANGUAGES


class TestCatalogLookup:
    """Tests for catalog lookups."""

    def test_language_lookup_is_case_insensitive(self, catalog):
        """Test finding a language by code regardless of case."""
        assert catalog.language("DE").display_name == "Deutsch"
        assert catalog.language(" uk ").code == "uk"

    def test_unknown_language(self, catalog):
        """Test that unknown or empty codes return None."""
        assert catalog.language("xx") is None
        assert catalog.language(None) is None
        assert catalog.language("") is None

    def test_question_lookup(self, catalog):
        """Test finding a question by id."""
        assert catalog.question("challenge").id == "challenge"
        assert catalog.question("nope") is None


class TestCatalogValidation:
    """Tests for catalog construction checks."""

    def test_duplicate_language_codes_rejected(self):
        """Test that language codes must be unique."""
        with pytest.raises(ValueError, match="Duplicate language codes"):
            WizardCatalog(languages=(
                LanguageOption(code="en", display_name="English"),
                LanguageOption(code="EN", display_name="English (again)"),
            ))

    def test_duplicate_question_ids_rejected(self):
        """Test that question ids must be unique."""
        with pytest.raises(ValueError, match="Duplicate question ids"):
            WizardCatalog(questions=(
                Question(id="goal", options=("a",)),
                Question(id="goal", options=("b",)),
            ))

    def test_empty_question_list_rejected(self):
        """Test that a catalog needs at least one question."""
        with pytest.raises(ValidationError):
            WizardCatalog(questions=())
