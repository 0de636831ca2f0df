"""Tests for the validation gate."""

import pytest

from onboarding.models.catalog import DEFAULT_QUESTIONS
from onboarding.models.survey import LanguageOption, SurveyState
from onboarding.validation import ValidationGate
from onboarding.wizard import PageSequencer


ENGLISH = LanguageOption(code="en", display_name="English")


@pytest.fixture
def gate():
    return ValidationGate(PageSequencer(DEFAULT_QUESTIONS))


def complete_state() -> SurveyState:
    return SurveyState(
        selected_language=ENGLISH,
        user_name="Ana",
        selected_currency="EUR",
        answers={question.id: question.options[0] for question in DEFAULT_QUESTIONS},
    )


class TestPageChecks:
    """Tests for is_next_enabled on each page kind."""

    def test_language_page(self, gate):
        """Test Next needs a selected language."""
        assert not gate.is_next_enabled(0, SurveyState())
        assert gate.is_next_enabled(0, SurveyState(selected_language=ENGLISH))

    def test_name_page_rejects_whitespace(self, gate):
        """Test a whitespace-only name does not count."""
        assert not gate.is_next_enabled(1, SurveyState(user_name=""))
        assert not gate.is_next_enabled(1, SurveyState(user_name="   "))
        assert gate.is_next_enabled(1, SurveyState(user_name=" Ana "))

    def test_currency_page(self, gate):
        """Test the seeded default currency already satisfies the page."""
        assert gate.is_next_enabled(2, SurveyState())
        assert not gate.is_next_enabled(2, SurveyState(selected_currency=" "))

    def test_question_page(self, gate):
        """Test a question page needs its own answer."""
        state = SurveyState(answers={"goal": "save_more"})
        assert gate.is_next_enabled(3, state)
        assert not gate.is_next_enabled(4, state)

    def test_unknown_page_falls_back_to_completeness(self, gate):
        """Test indices outside the page list use the full check."""
        assert not gate.is_next_enabled(99, SurveyState())
        assert gate.is_next_enabled(99, complete_state())

    def test_gate_is_pure(self, gate):
        """Test repeated calls give the same answer and change nothing."""
        state = SurveyState(selected_language=ENGLISH)
        before = state.model_copy(deep=True)
        assert gate.is_next_enabled(0, state) == gate.is_next_enabled(0, state)
        assert state == before


class TestCompleteness:
    """Tests for is_complete and missing_fields."""

    def test_complete_state(self, gate):
        """Test a fully filled state."""
        state = complete_state()
        assert gate.is_complete(state)
        assert gate.missing_fields(state) == []

    def test_missing_answer(self, gate):
        """Test one unanswered question makes the state incomplete."""
        state = complete_state()
        state.answers.pop("situation")
        assert not gate.is_complete(state)

        issues = gate.missing_fields(state)
        assert [issue.field for issue in issues] == ["answers.situation"]
        assert issues[0].page_index == 6

    def test_missing_fields_in_page_order(self, gate):
        """Test every unmet requirement is reported, first page first."""
        issues = gate.missing_fields(SurveyState(user_name="  "))
        fields = [issue.field for issue in issues]
        assert fields[:2] == ["selected_language", "user_name"]
        assert fields[2:] == [f"answers.{q.id}" for q in DEFAULT_QUESTIONS]
        assert issues[1].issue_type == "blank"

    def test_empty_name_is_missing(self, gate):
        """Test an empty name is 'missing' rather than 'blank'."""
        issues = gate.missing_fields(SurveyState())
        name_issue = next(issue for issue in issues if issue.field == "user_name")
        assert name_issue.issue_type == "missing"
