"""
Audit Models for the Onboarding Wizard

Every user action in a wizard session is logged for audit purposes.
This provides:
1. Traceability of how a survey result came to be
2. Debugging information when a caller misuses the wizard
3. Funnel data (which page users stop on)

DESIGN DECISION: Events never carry the user's display name,
only its length. The name is personal data and logs travel further
than the survey result does.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class WizardEventType(str, Enum):
    """
    Types of events we audit.

    Every user action and every terminal outcome has its own type.
    """
    # Session lifecycle
    SESSION_STARTED = "session_started"
    SURVEY_COMPLETED = "survey_completed"

    # User selections
    LANGUAGE_SELECTED = "language_selected"
    NAME_ENTERED = "name_entered"
    CURRENCY_SELECTED = "currency_selected"
    QUESTION_ANSWERED = "question_answered"

    # Navigation
    PAGE_CHANGED = "page_changed"
    TRANSITION_BLOCKED = "transition_blocked"

    # Failures
    INVALID_REFERENCE = "invalid_reference"
    PREFERENCE_WRITE_FAILED = "preference_write_failed"
    COMPLETION_CALLBACK_FAILED = "completion_callback_failed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class WizardEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of the wizard's audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: WizardEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Correlation - all events of one wizard session share this
    session_id: Optional[UUID] = Field(
        default=None,
        description="Wizard session this event belongs to"
    )
    page_index: Optional[int] = Field(
        default=None,
        ge=0,
        description="Page the user was on"
    )

    # Event details
    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "session_id": str(self.session_id) if self.session_id else None,
            "page_index": self.page_index,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class WizardEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = WizardEventBuilder.language_selected("de", session_id)
        event = WizardEventBuilder.survey_completed(result, session_id)
    """

    @staticmethod
    def session_started(
        total_pages: int,
        seeded_currency: str,
        seeded_language: Optional[str],
        session_id: UUID
    ) -> WizardEvent:
        return WizardEvent(
            event_type=WizardEventType.SESSION_STARTED,
            session_id=session_id,
            page_index=0,
            description=f"Onboarding started with {total_pages} pages",
            details={
                "total_pages": total_pages,
                "seeded_currency": seeded_currency,
                "seeded_language": seeded_language,
            },
        )

    @staticmethod
    def language_selected(
        language_code: str,
        session_id: UUID,
        page_index: Optional[int] = None
    ) -> WizardEvent:
        return WizardEvent(
            event_type=WizardEventType.LANGUAGE_SELECTED,
            session_id=session_id,
            page_index=page_index,
            description=f"Language selected: {language_code}",
            details={"language_code": language_code},
            is_user_action=True,
        )

    @staticmethod
    def name_entered(
        name_length: int,
        session_id: UUID,
        page_index: Optional[int] = None
    ) -> WizardEvent:
        return WizardEvent(
            event_type=WizardEventType.NAME_ENTERED,
            session_id=session_id,
            page_index=page_index,
            description="Display name edited",
            details={"name_length": name_length},
            is_user_action=True,
        )

    @staticmethod
    def currency_selected(
        currency_code: str,
        number_format: str,
        session_id: UUID,
        page_index: Optional[int] = None
    ) -> WizardEvent:
        return WizardEvent(
            event_type=WizardEventType.CURRENCY_SELECTED,
            session_id=session_id,
            page_index=page_index,
            description=f"Currency selected: {currency_code}",
            details={
                "currency_code": currency_code,
                "number_format": number_format,
            },
            is_user_action=True,
        )

    @staticmethod
    def question_answered(
        question_id: str,
        option_id: str,
        session_id: UUID,
        page_index: Optional[int] = None
    ) -> WizardEvent:
        return WizardEvent(
            event_type=WizardEventType.QUESTION_ANSWERED,
            session_id=session_id,
            page_index=page_index,
            description=f"Answered {question_id}: {option_id}",
            details={
                "question_id": question_id,
                "option_id": option_id,
            },
            is_user_action=True,
        )

    @staticmethod
    def page_changed(
        from_index: int,
        to_index: int,
        session_id: UUID
    ) -> WizardEvent:
        direction = "forward" if to_index > from_index else "back"
        return WizardEvent(
            event_type=WizardEventType.PAGE_CHANGED,
            severity=AuditSeverity.DEBUG,
            session_id=session_id,
            page_index=to_index,
            description=f"Moved {direction} from page {from_index} to {to_index}",
            details={
                "from_index": from_index,
                "to_index": to_index,
            },
            is_user_action=True,
        )

    @staticmethod
    def transition_blocked(
        page_index: int,
        missing_fields: list[str],
        session_id: UUID
    ) -> WizardEvent:
        return WizardEvent(
            event_type=WizardEventType.TRANSITION_BLOCKED,
            severity=AuditSeverity.WARNING,
            session_id=session_id,
            page_index=page_index,
            description=f"Next blocked on page {page_index}",
            details={"missing_fields": missing_fields},
            is_user_action=True,
        )

    @staticmethod
    def survey_completed(
        language_code: str,
        currency_code: str,
        answer_count: int,
        session_id: UUID
    ) -> WizardEvent:
        return WizardEvent(
            event_type=WizardEventType.SURVEY_COMPLETED,
            session_id=session_id,
            description=f"Onboarding completed ({answer_count} answers)",
            details={
                "language_code": language_code,
                "currency_code": currency_code,
                "answer_count": answer_count,
            },
            is_user_action=True,
        )

    @staticmethod
    def invalid_reference(
        kind: str,
        reference: str,
        session_id: Optional[UUID] = None
    ) -> WizardEvent:
        return WizardEvent(
            event_type=WizardEventType.INVALID_REFERENCE,
            severity=AuditSeverity.WARNING,
            session_id=session_id,
            description=f"Ignored unknown {kind}: {reference}",
            details={
                "kind": kind,
                "reference": reference,
            },
        )

    @staticmethod
    def preference_write_failed(
        key: str,
        error_message: str,
        session_id: Optional[UUID] = None
    ) -> WizardEvent:
        return WizardEvent(
            event_type=WizardEventType.PREFERENCE_WRITE_FAILED,
            severity=AuditSeverity.ERROR,
            session_id=session_id,
            description=f"Could not persist preference: {key}",
            error_message=error_message,
            details={"key": key},
        )

    @staticmethod
    def completion_callback_failed(
        error_message: str,
        session_id: Optional[UUID] = None
    ) -> WizardEvent:
        return WizardEvent(
            event_type=WizardEventType.COMPLETION_CALLBACK_FAILED,
            severity=AuditSeverity.ERROR,
            session_id=session_id,
            description="Completion callback raised",
            error_message=error_message,
        )
