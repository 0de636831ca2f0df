"""
Tests for the Onboarding Wizard models

Test strategy:
1. Unit tests for individual components (models, catalogs, gate)
2. Flow tests for the wizard session (in-memory storage only)
3. No files outside pytest's tmp_path, no network
"""

import json
from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import ValidationError

from onboarding.models.survey import (
    CurrencyOption,
    LanguageOption,
    NumberFormatSpec,
    Question,
    SurveyResult,
    SurveyState,
    ValidationIssue,
)
from onboarding.models.audit import (
    AuditSeverity,
    WizardEvent,
    WizardEventBuilder,
    WizardEventType,
)


class TestCatalogModels:
    """Tests for the frozen catalog entry models."""

    def test_language_option_lowercases_code(self):
        """Test that language codes are normalized to lowercase."""
        language = LanguageOption(code=" DE ", display_name="Deutsch")
        assert language.code == "de"

    def test_language_option_identity_is_code(self):
        """Test that two options with the same code are equal."""
        a = LanguageOption(code="de", display_name="Deutsch")
        b = LanguageOption(code="de", display_name="German")
        assert a == b
        assert len({a, b}) == 1

    def test_language_option_is_frozen(self):
        """Test that catalog entries cannot be mutated."""
        language = LanguageOption(code="en", display_name="English")
        with pytest.raises(ValidationError):
            language.code = "de"

    def test_question_rejects_duplicate_options(self):
        """Test that option ids must be unique inside a question."""
        with pytest.raises(ValueError, match="Duplicate option ids"):
            Question(id="goal", options=("a", "b", "a"))

    def test_question_rejects_empty_options(self):
        """Test that a question needs at least one option."""
        with pytest.raises(ValidationError):
            Question(id="goal", options=())

    def test_question_has_option(self):
        """Test option membership lookup."""
        question = Question(id="goal", options=("save_more", "pay_debt"))
        assert question.has_option("pay_debt")
        assert not question.has_option("buy_yacht")

    def test_currency_option_label(self):
        """Test the currency page row label."""
        option = CurrencyOption(code="USD", symbol="$", name="US Dollar")
        assert option.label == "$  USD  •  US Dollar"


class TestNumberFormatSpec:
    """Tests for number format rendering."""

    def test_dot_decimal_format(self):
        """Test '1,234.56' style formatting."""
        spec = NumberFormatSpec(pattern="1,234.56", decimal_separator=".", grouping_separator=",")
        assert spec.format_amount(Decimal("1234.56")) == "1,234.56"

    def test_comma_decimal_format(self):
        """Test '1.234,56' style formatting."""
        spec = NumberFormatSpec(pattern="1.234,56", decimal_separator=",", grouping_separator=".")
        assert spec.format_amount(Decimal("1234567.891")) == "1.234.567,89"

    def test_rounds_half_up(self):
        """Test that amounts are rounded to cents, half up."""
        spec = NumberFormatSpec(pattern="1,234.56", decimal_separator=".", grouping_separator=",")
        assert spec.format_amount(Decimal("0.005")) == "0.01"

    def test_negative_amount(self):
        """Test that the sign is kept in front of the grouped digits."""
        spec = NumberFormatSpec(pattern="1.234,56", decimal_separator=",", grouping_separator=".")
        assert spec.format_amount(Decimal("-1500")) == "-1.500,00"

    def test_separators_must_differ(self):
        """Test that identical separators are rejected."""
        with pytest.raises(ValueError, match="must differ"):
            NumberFormatSpec(pattern="1.234.56", decimal_separator=".", grouping_separator=".")


class TestSurveyState:
    """Tests for the mutable session state."""

    def test_defaults(self):
        """Test a fresh state."""
        state = SurveyState()
        assert state.selected_language is None
        assert state.user_name == ""
        assert state.selected_currency == "USD"
        assert state.answers == {}
        assert state.language_code is None

    def test_trimmed_name(self):
        """Test that the trimmed name strips surrounding whitespace."""
        state = SurveyState(user_name="  Ana  ")
        assert state.trimmed_name == "Ana"
        assert state.user_name == "  Ana  "


class TestSurveyResult:
    """Tests for the immutable survey result and its stored form."""

    def _result(self, **overrides):
        data = dict(
            language_code="de",
            user_name="Ana",
            currency_code="EUR",
            answers={"goal": "save_more"},
            completed_at=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        )
        data.update(overrides)
        return SurveyResult(**data)

    def test_result_is_frozen(self):
        """Test that a result cannot be modified after creation."""
        result = self._result()
        with pytest.raises(ValidationError):
            result.currency_code = "USD"

    def test_storage_json_uses_camel_case(self):
        """Test the stored key names shared with the mobile client."""
        payload = json.loads(self._result().to_storage_json())
        assert payload["languageCode"] == "de"
        assert payload["userName"] == "Ana"
        assert payload["currencyCode"] == "EUR"
        assert payload["answers"] == {"goal": "save_more"}
        assert "completedAt" in payload

    def test_storage_json_round_trip(self):
        """Test that a stored result decodes to an equal result."""
        result = self._result()
        assert SurveyResult.from_storage_json(result.to_storage_json()) == result

    def test_legacy_payload_defaults_currency_and_name(self):
        """Test decoding responses saved before currency and name existed."""
        payload = json.dumps({
            "languageCode": "pl",
            "answers": {"goal": "pay_debt"},
            "completedAt": "2023-05-01T10:00:00Z",
        })
        result = SurveyResult.from_storage_json(payload)
        assert result.currency_code == "USD"
        assert result.user_name == ""
        assert result.answers == {"goal": "pay_debt"}

    def test_non_object_payload_rejected(self):
        """Test that a JSON array is not a survey result."""
        with pytest.raises(ValueError):
            SurveyResult.from_storage_json("[1, 2, 3]")


class TestValidationIssue:
    """Tests for ValidationIssue."""

    def test_issue_creation(self):
        """Test ValidationIssue model creation."""
        issue = ValidationIssue(
            field="answers.goal",
            issue_type="missing",
            message="Question 'goal' is not answered",
            page_index=3,
        )
        assert issue.field == "answers.goal"
        assert issue.page_index == 3

    def test_page_index_cannot_be_negative(self):
        """Test that page_index must be >= 0."""
        with pytest.raises(ValidationError):
            ValidationIssue(field="x", issue_type="missing", message="m", page_index=-1)


class TestAuditModels:
    """Tests for audit event models."""

    def test_wizard_event_creation(self):
        """Test WizardEvent creation."""
        event = WizardEvent(
            event_type=WizardEventType.SESSION_STARTED,
            description="Onboarding started",
        )
        assert event.event_id is not None
        assert event.severity == AuditSeverity.INFO
        assert event.timestamp.tzinfo is not None

    def test_wizard_event_to_log_dict(self):
        """Test conversion to a structured log dict."""
        session_id = uuid4()
        event = WizardEventBuilder.language_selected("de", session_id, page_index=0)
        log_dict = event.to_log_dict()

        assert log_dict["event_type"] == "language_selected"
        assert log_dict["session_id"] == str(session_id)
        assert log_dict["details"] == {"language_code": "de"}
        assert log_dict["is_user_action"] is True

    def test_name_entered_records_length_only(self):
        """Test that the display name itself never enters an event."""
        event = WizardEventBuilder.name_entered(name_length=3, session_id=uuid4())
        assert event.details == {"name_length": 3}

    def test_page_changed_is_debug(self):
        """Test page changes are logged at debug severity."""
        event = WizardEventBuilder.page_changed(2, 3, uuid4())
        assert event.severity == AuditSeverity.DEBUG
        assert event.page_index == 3
        assert "forward" in event.description

    def test_transition_blocked_is_warning(self):
        """Test blocked transitions carry the missing fields."""
        event = WizardEventBuilder.transition_blocked(1, ["user_name"], uuid4())
        assert event.severity == AuditSeverity.WARNING
        assert event.details["missing_fields"] == ["user_name"]

    def test_preference_write_failed_is_error(self):
        """Test storage failures are logged as errors."""
        event = WizardEventBuilder.preference_write_failed(
            key="anita_user_currency",
            error_message="disk full",
        )
        assert event.severity == AuditSeverity.ERROR
        assert event.error_message == "disk full"
