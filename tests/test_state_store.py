"""Tests for the survey state store."""

import pytest

from onboarding.currency import CurrencyFormatMapper
from onboarding.errors import InvalidCatalogReferenceError
from onboarding.models.catalog import DEFAULT_QUESTIONS
from onboarding.models.survey import LanguageOption
from onboarding.validation import ValidationGate
from onboarding.wizard import PageSequencer, SurveyStateStore


GERMAN = LanguageOption(code="de", display_name="Deutsch")


@pytest.fixture
def store():
    return SurveyStateStore(DEFAULT_QUESTIONS)


class TestSeeding:
    """Tests for the initial state."""

    def test_default_currency(self, store):
        """Test a store without a stored currency starts on the default."""
        assert store.state.selected_currency == "USD"
        assert store.state.selected_language is None

    def test_valid_stored_currency(self):
        """Test a stored whitelisted currency is used."""
        store = SurveyStateStore(DEFAULT_QUESTIONS, initial_currency="eur")
        assert store.state.selected_currency == "EUR"

    def test_invalid_stored_currency_is_coerced(self):
        """Test an unknown stored currency falls back to the default."""
        store = SurveyStateStore(DEFAULT_QUESTIONS, initial_currency="XYZ")
        assert store.state.selected_currency == "USD"

    def test_custom_default_currency(self):
        """Test coercion uses the mapper's default."""
        mapper = CurrencyFormatMapper(whitelist=["EUR", "PLN"], default_currency="EUR")
        store = SurveyStateStore(DEFAULT_QUESTIONS, currency_mapper=mapper)
        assert store.state.selected_currency == "EUR"

    def test_initial_language(self):
        """Test a pre-selected language."""
        store = SurveyStateStore(DEFAULT_QUESTIONS, initial_language=GERMAN)
        assert store.state.language_code == "de"


class TestMutations:
    """Tests for user-driven mutations."""

    def test_select_language_keeps_answers(self, store):
        """Test changing language does not reset answers."""
        store.answer("goal", "save_more")
        store.select_language(GERMAN)
        assert store.state.selected_language == GERMAN
        assert store.answer_for("goal") == "save_more"

    def test_name_is_stored_as_typed(self, store):
        """Test names are not trimmed on entry."""
        assert store.set_user_name("  Ana ") == "  Ana "
        assert store.state.user_name == "  Ana "
        assert store.state.trimmed_name == "Ana"

    def test_none_name_becomes_empty(self, store):
        """Test clearing the name field."""
        store.set_user_name(None)
        assert store.state.user_name == ""

    def test_name_truncated_to_maximum(self):
        """Test overly long names are cut at the configured maximum."""
        store = SurveyStateStore(DEFAULT_QUESTIONS, max_name_length=5)
        assert store.set_user_name("Alexandra") == "Alexa"

    def test_leading_whitespace_does_not_count_toward_maximum(self):
        """Test a padded name is not truncated down to blanks."""
        store = SurveyStateStore(DEFAULT_QUESTIONS, max_name_length=5)
        gate = ValidationGate(PageSequencer(DEFAULT_QUESTIONS))

        assert store.set_user_name("      Ana") == "Ana"
        assert store.set_user_name("   Alexandra") == "Alexa"
        assert gate.is_next_enabled(1, store.state)

    def test_short_padded_name_is_kept_as_typed(self):
        """Test names within the limit keep their whitespace."""
        store = SurveyStateStore(DEFAULT_QUESTIONS, max_name_length=5)
        assert store.set_user_name(" Ana ") == " Ana "

    def test_select_currency_normalizes(self, store):
        """Test interactive currency selection."""
        assert store.select_currency(" pln ") == "PLN"
        assert store.state.selected_currency == "PLN"

    def test_select_unknown_currency_raises(self, store):
        """Test the UI can only select whitelisted currencies."""
        with pytest.raises(InvalidCatalogReferenceError) as exc_info:
            store.select_currency("JPY")
        assert exc_info.value.kind == "currency"
        assert store.state.selected_currency == "USD"

    def test_answer_overwrites(self, store):
        """Test re-answering replaces the previous option."""
        assert store.answer("goal", "save_more")
        assert store.answer("goal", "pay_debt")
        assert store.answer_for("goal") == "pay_debt"
        assert len(store.state.answers) == 1

    def test_clear_answer(self, store):
        """Test removing an answer."""
        store.answer("goal", "save_more")
        store.clear_answer("goal")
        store.clear_answer("goal")
        assert store.answer_for("goal") is None


class TestCatalogInvariants:
    """Tests that answers only ever hold catalog ids."""

    def test_unknown_question_ignored(self):
        """Test an unknown question id changes nothing and is reported."""
        reported = []
        store = SurveyStateStore(
            DEFAULT_QUESTIONS,
            on_invalid_reference=lambda kind, ref: reported.append((kind, ref)),
        )
        assert not store.answer("favorite_color", "blue")
        assert store.state.answers == {}
        assert reported == [("question", "favorite_color")]

    def test_unknown_option_ignored(self):
        """Test an option outside the question's list is rejected."""
        reported = []
        store = SurveyStateStore(
            DEFAULT_QUESTIONS,
            on_invalid_reference=lambda kind, ref: reported.append((kind, ref)),
        )
        store.answer("goal", "save_more")
        assert not store.answer("goal", "buy_yacht")
        assert store.answer_for("goal") == "save_more"
        assert reported == [("option", "goal.buy_yacht")]


class TestSnapshot:
    """Tests for state snapshots."""

    def test_snapshot_is_independent(self, store):
        """Test later mutations do not reach an earlier snapshot."""
        store.answer("goal", "save_more")
        snapshot = store.snapshot()

        store.answer("goal", "pay_debt")
        store.set_user_name("Ana")

        assert snapshot.answers == {"goal": "save_more"}
        assert snapshot.user_name == ""
