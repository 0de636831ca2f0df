"""
Audit Logger

DESIGN DECISION: Every user action in the wizard is logged.
This provides:
1. Traceability of how a survey result came to be
2. Funnel data (where users stop, which pages block them)
3. Evidence when a host app misuses the wizard

The audit logger:
- Is synchronous; the wizard core has no event loop
- Gracefully handles failures (a broken audit sink never breaks onboarding)
- Tags every event with the session id so one session can be traced
"""

from typing import Optional
from uuid import UUID, uuid4

import structlog

from onboarding.models.audit import AuditSeverity, WizardEvent, WizardEventBuilder
from onboarding.services.storage import AuditStorageInterface


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. An optional audit sink (for persistence)
    """

    def __init__(
        self,
        storage: Optional[AuditStorageInterface] = None,
    ):
        """
        Initialize audit logger.

        Args:
            storage: Storage backend for persistence.
                    If None, only logs locally.
        """
        self._storage = storage
        self._logger = structlog.get_logger("onboarding.audit")

    def log(self, event: WizardEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Persists to storage if available.

        Returns True if storage write succeeded (or no storage configured).
        """
        # Always log locally
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("wizard_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("wizard_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("wizard_event", **log_dict)
        else:
            self._logger.info("wizard_event", **log_dict)

        if self._storage:
            try:
                return self._storage.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_storage_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def log_session_started(
        self,
        total_pages: int,
        seeded_currency: str,
        seeded_language: Optional[str],
        session_id: UUID,
    ) -> None:
        """Log the start of a wizard session."""
        self.log(WizardEventBuilder.session_started(
            total_pages=total_pages,
            seeded_currency=seeded_currency,
            seeded_language=seeded_language,
            session_id=session_id,
        ))

    def log_language_selected(
        self,
        language_code: str,
        session_id: UUID,
        page_index: Optional[int] = None,
    ) -> None:
        self.log(WizardEventBuilder.language_selected(
            language_code=language_code,
            session_id=session_id,
            page_index=page_index,
        ))

    def log_name_entered(
        self,
        name: str,
        session_id: UUID,
        page_index: Optional[int] = None,
    ) -> None:
        """Log a name edit. Only the trimmed length is recorded."""
        self.log(WizardEventBuilder.name_entered(
            name_length=len(name.strip()),
            session_id=session_id,
            page_index=page_index,
        ))

    def log_currency_selected(
        self,
        currency_code: str,
        number_format: str,
        session_id: UUID,
        page_index: Optional[int] = None,
    ) -> None:
        self.log(WizardEventBuilder.currency_selected(
            currency_code=currency_code,
            number_format=number_format,
            session_id=session_id,
            page_index=page_index,
        ))

    def log_question_answered(
        self,
        question_id: str,
        option_id: str,
        session_id: UUID,
        page_index: Optional[int] = None,
    ) -> None:
        self.log(WizardEventBuilder.question_answered(
            question_id=question_id,
            option_id=option_id,
            session_id=session_id,
            page_index=page_index,
        ))

    def log_page_changed(
        self,
        from_index: int,
        to_index: int,
        session_id: UUID,
    ) -> None:
        self.log(WizardEventBuilder.page_changed(
            from_index=from_index,
            to_index=to_index,
            session_id=session_id,
        ))

    def log_transition_blocked(
        self,
        page_index: int,
        missing_fields: list[str],
        session_id: UUID,
    ) -> None:
        """Log a Next press that the validation gate refused."""
        self.log(WizardEventBuilder.transition_blocked(
            page_index=page_index,
            missing_fields=missing_fields,
            session_id=session_id,
        ))

    def log_survey_completed(
        self,
        language_code: str,
        currency_code: str,
        answer_count: int,
        session_id: UUID,
    ) -> None:
        self.log(WizardEventBuilder.survey_completed(
            language_code=language_code,
            currency_code=currency_code,
            answer_count=answer_count,
            session_id=session_id,
        ))

    def log_invalid_reference(
        self,
        kind: str,
        reference: str,
        session_id: Optional[UUID] = None,
    ) -> None:
        self.log(WizardEventBuilder.invalid_reference(
            kind=kind,
            reference=reference,
            session_id=session_id,
        ))

    def log_preference_write_failed(
        self,
        key: str,
        error_message: str,
        session_id: Optional[UUID] = None,
    ) -> None:
        self.log(WizardEventBuilder.preference_write_failed(
            key=key,
            error_message=error_message,
            session_id=session_id,
        ))

    def log_completion_callback_failed(
        self,
        error_message: str,
        session_id: Optional[UUID] = None,
    ) -> None:
        self.log(WizardEventBuilder.completion_callback_failed(
            error_message=error_message,
            session_id=session_id,
        ))


def create_session_id() -> UUID:
    """
    Create a new session ID for tracking related events.

    One per wizard session; every event of that session carries it.
    """
    return uuid4()
