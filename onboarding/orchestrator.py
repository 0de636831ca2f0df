"""
Main Orchestrator for the Onboarding Wizard

This module ties together all the components and defines the
end-to-end onboarding flow:
    language → name → currency → survey questions → SurveyResult

DESIGN DECISION: The orchestrator enforces the boundaries:
- No page is left forward until the validation gate allows it
- No result is emitted before the survey is complete, and never twice
- Preference writes never interrupt the user
- Every step is audited

This is the "glue" that ensures the flow behaves correctly
even when the host app or the preference store misbehaves.
"""

from decimal import Decimal
from typing import Callable, Optional, Union
from uuid import UUID

import structlog

from onboarding.audit import AuditLogger, create_session_id
from onboarding.config import WizardSettings, get_settings
from onboarding.currency import CurrencyFormatMapper
from onboarding.errors import InvalidCatalogReferenceError, WizardFinishedError
from onboarding.localization import LocalizationResolver
from onboarding.models.catalog import WizardCatalog, default_catalog
from onboarding.models.survey import (
    CurrencyOption,
    LanguageOption,
    NumberFormatSpec,
    Question,
    SurveyResult,
    SurveyState,
    ValidationIssue,
)
from onboarding.services.storage import (
    InMemoryPreferenceStore,
    JsonFilePreferenceStore,
    PreferenceKey,
    PreferenceStore,
    StorageError,
)
from onboarding.validation import ValidationGate
from onboarding.wizard import (
    PageKind,
    PageSequencer,
    ResultBuilder,
    SurveyStateStore,
    Transition,
    WizardPage,
)


logger = structlog.get_logger(__name__)

CompletionCallback = Callable[[SurveyResult], None]

_PREFIX_TEXT_KEYS = {
    PageKind.LANGUAGE: "onboarding.language",
    PageKind.NAME: "onboarding.name",
    PageKind.CURRENCY: "onboarding.currency",
}


class OnboardingWizard:
    """
    One onboarding session.

    Flow:
    1. Seed → currency (and optionally language) from stored preferences
    2. Collect → language, name, currency, one answer per question
    3. Gate → every Next press is checked against the current page
    4. Complete → build the SurveyResult on the last page
    5. Hand off → on_complete is called exactly once

    After step 5 the session is finished; further navigation raises.
    """

    def __init__(
        self,
        catalog: Optional[WizardCatalog] = None,
        preferences: Optional[PreferenceStore] = None,
        on_complete: Optional[CompletionCallback] = None,
        audit_logger: Optional[AuditLogger] = None,
        settings: Optional[WizardSettings] = None,
        resolver: Optional[LocalizationResolver] = None,
        currency_mapper: Optional[CurrencyFormatMapper] = None,
        session_id: Optional[UUID] = None,
    ):
        self._settings = settings or get_settings().wizard
        self._catalog = catalog or default_catalog()
        self._preferences = preferences or InMemoryPreferenceStore()
        self._on_complete = on_complete
        self._audit_logger = audit_logger
        self._session_id = session_id or create_session_id()
        self._resolver = resolver or LocalizationResolver(
            default_language=self._settings.default_language,
        )
        self._currency_mapper = currency_mapper or CurrencyFormatMapper(
            whitelist=self._settings.currency_whitelist,
            default_currency=self._settings.default_currency,
        )

        seeded_currency = self._seed_currency()
        seeded_language = self._seed_language()

        self._store = SurveyStateStore(
            questions=self._catalog.questions,
            currency_mapper=self._currency_mapper,
            initial_currency=seeded_currency,
            initial_language=seeded_language,
            max_name_length=self._settings.max_name_length,
            on_invalid_reference=self._report_invalid_reference,
        )
        self._sequencer = PageSequencer(self._catalog.questions)
        self._gate = ValidationGate(self._sequencer)
        self._builder = ResultBuilder(self._gate)

        self._result: Optional[SurveyResult] = None

        if self._audit_logger:
            self._audit_logger.log_session_started(
                total_pages=self._sequencer.total_pages,
                seeded_currency=seeded_currency,
                seeded_language=seeded_language.code if seeded_language else None,
                session_id=self._session_id,
            )

    # =========================================================================
    # Seeding from stored preferences
    # =========================================================================

    def _seed_currency(self) -> str:
        """
        Read the stored currency and coerce it onto the whitelist.

        A stored value that is not whitelisted is replaced by the
        default, and the default is written back so the rest of the
        app agrees with the wizard.
        """
        stored = self._read_preference(PreferenceKey.USER_CURRENCY)
        seeded = self._currency_mapper.normalize(stored)

        if stored is not None and not self._currency_mapper.is_supported(stored):
            logger.info(
                "stored_currency_reset",
                stored=stored,
                currency=seeded,
                session_id=str(self._session_id),
            )
            self._persist_currency(seeded)

        return seeded

    def _seed_language(self) -> Optional[LanguageOption]:
        if not self._settings.seed_language_from_preferences:
            return None
        stored = self._read_preference(PreferenceKey.PREFERRED_LANGUAGE)
        return self._catalog.language(stored)

    # =========================================================================
    # Read-only views
    # =========================================================================

    @property
    def session_id(self) -> UUID:
        return self._session_id

    @property
    def catalog(self) -> WizardCatalog:
        return self._catalog

    @property
    def resolver(self) -> LocalizationResolver:
        return self._resolver

    @property
    def state(self) -> SurveyState:
        """Copy of the current state; mutate through the wizard's methods."""
        return self._store.snapshot()

    @property
    def result(self) -> Optional[SurveyResult]:
        """The emitted result, once the session is finished."""
        return self._result

    @property
    def is_finished(self) -> bool:
        return self._result is not None

    @property
    def page_index(self) -> int:
        return self._sequencer.page_index

    @property
    def total_pages(self) -> int:
        return self._sequencer.total_pages

    @property
    def language_code(self) -> str:
        """Language used for display: the selection, else the default."""
        return self._store.state.language_code or self._resolver.default_language

    def current_page(self) -> WizardPage:
        return self._sequencer.current_page()

    def current_question(self) -> Optional[Question]:
        return self._sequencer.question_for_page(self._sequencer.page_index)

    def language_options(self) -> tuple[LanguageOption, ...]:
        return self._catalog.languages

    def currency_options(self) -> list[CurrencyOption]:
        return self._currency_mapper.currency_options()

    def number_format(self) -> NumberFormatSpec:
        """Number format for the currently selected currency."""
        return self._currency_mapper.format_for_currency(self._store.state.selected_currency)

    def format_amount(self, amount: Union[Decimal, int, float, str]) -> str:
        """Render an amount in the selected currency's number format."""
        return self.number_format().format_amount(Decimal(str(amount)))

    def missing_fields(self) -> list[ValidationIssue]:
        return self._gate.missing_fields(self._store.state)

    # =========================================================================
    # User actions
    # =========================================================================

    def select_language(self, code: str) -> LanguageOption:
        """
        Select the app language.

        The language applies to the rest of the app at once, so it is
        persisted immediately rather than at completion.

        Raises:
            InvalidCatalogReferenceError: If the code is not in the catalog
        """
        language = self._catalog.language(code)
        if language is None:
            self._report_invalid_reference("language", str(code))
            raise InvalidCatalogReferenceError("language", code)

        self._store.select_language(language)
        self._write_preference(PreferenceKey.PREFERRED_LANGUAGE, language.code)

        if self._audit_logger:
            self._audit_logger.log_language_selected(
                language_code=language.code,
                session_id=self._session_id,
                page_index=self._sequencer.page_index,
            )
        return language

    def set_user_name(self, name: Optional[str]) -> str:
        """Store the display name as typed (truncated to the configured maximum)."""
        stored = self._store.set_user_name(name)

        if self._audit_logger:
            self._audit_logger.log_name_entered(
                name=stored,
                session_id=self._session_id,
                page_index=self._sequencer.page_index,
            )
        return stored

    def select_currency(self, code: str) -> str:
        """
        Select a currency and persist it with its number format.

        Returns:
            The normalized currency code

        Raises:
            InvalidCatalogReferenceError: If the code is not whitelisted
        """
        try:
            normalized = self._store.select_currency(code)
        except InvalidCatalogReferenceError:
            self._report_invalid_reference("currency", str(code))
            raise

        number_format = self._persist_currency(normalized)

        if self._audit_logger:
            self._audit_logger.log_currency_selected(
                currency_code=normalized,
                number_format=number_format.pattern,
                session_id=self._session_id,
                page_index=self._sequencer.page_index,
            )
        return normalized

    def answer(self, question_id: str, option_id: str) -> bool:
        """
        Answer a survey question.

        Returns False (and changes nothing) for unknown ids.
        """
        recorded = self._store.answer(question_id, option_id)

        if recorded and self._audit_logger:
            self._audit_logger.log_question_answered(
                question_id=question_id,
                option_id=option_id,
                session_id=self._session_id,
                page_index=self._sequencer.page_index_for_question(question_id),
            )
        return recorded

    def answer_current(self, option_id: str) -> bool:
        """Answer the question on the current page; False on prefix pages."""
        question = self.current_question()
        if question is None:
            return False
        return self.answer(question.id, option_id)

    def clear_answer(self, question_id: str) -> None:
        self._store.clear_answer(question_id)

    # =========================================================================
    # Navigation
    # =========================================================================

    def is_next_enabled(self) -> bool:
        return self._gate.is_next_enabled(self._sequencer.page_index, self._store.state)

    def can_go_back(self) -> bool:
        return not self.is_finished and self._sequencer.can_go_back()

    def next(self) -> Transition:
        """
        Press Next (or Get Started on the last page).

        Returns:
            BLOCKED if the current page is invalid (index unchanged),
            ADVANCED after moving one page forward, or
            COMPLETED after the result was built and handed off

        Raises:
            WizardFinishedError: If the session already completed
        """
        self._ensure_not_finished()

        from_index = self._sequencer.page_index

        if not self.is_next_enabled():
            if self._audit_logger:
                missing = [
                    issue.field
                    for issue in self._gate.missing_fields(self._store.state)
                    if issue.page_index == from_index
                ]
                self._audit_logger.log_transition_blocked(
                    page_index=from_index,
                    missing_fields=missing,
                    session_id=self._session_id,
                )
            return Transition.BLOCKED

        transition = self._sequencer.go_forward()

        if transition == Transition.COMPLETED:
            self._complete()
        elif self._audit_logger:
            self._audit_logger.log_page_changed(
                from_index=from_index,
                to_index=self._sequencer.page_index,
                session_id=self._session_id,
            )

        return transition

    def back(self) -> int:
        """
        Go one page back; a no-op on the first page.

        Raises:
            WizardFinishedError: If the session already completed
        """
        self._ensure_not_finished()

        from_index = self._sequencer.page_index
        to_index = self._sequencer.go_back()

        if to_index != from_index and self._audit_logger:
            self._audit_logger.log_page_changed(
                from_index=from_index,
                to_index=to_index,
                session_id=self._session_id,
            )
        return to_index

    def jump_to(self, page_index: int) -> int:
        """Restore a saved page position (clamped into range)."""
        self._ensure_not_finished()
        return self._sequencer.jump_to(page_index)

    def _ensure_not_finished(self) -> None:
        if self.is_finished:
            raise WizardFinishedError(
                f"Onboarding session {self._session_id} already completed"
            )

    def _complete(self) -> None:
        """Build the result, finish the session and hand the result off."""
        result = self._builder.build(self._store.state)
        self._result = result

        if self._audit_logger:
            self._audit_logger.log_survey_completed(
                language_code=result.language_code,
                currency_code=result.currency_code,
                answer_count=len(result.answers),
                session_id=self._session_id,
            )

        if self._on_complete is None:
            return

        try:
            self._on_complete(result)
        except Exception as e:
            # The hand-off is fire-and-forget; the session stays finished
            logger.error(
                "completion_callback_failed",
                error=str(e),
                session_id=str(self._session_id),
            )
            if self._audit_logger:
                self._audit_logger.log_completion_callback_failed(
                    error_message=str(e),
                    session_id=self._session_id,
                )

    # =========================================================================
    # Display text
    # =========================================================================

    def progress_fraction(self) -> float:
        return self._sequencer.progress_fraction()

    def progress_label(self) -> str:
        """Localized header counter such as '3/8'."""
        current, total = self._sequencer.progress_label().split("/")
        return self._resolver.resolve(
            self.language_code,
            "onboarding.progress",
            current=current,
            total=total,
        )

    def page_title(self, page: Optional[WizardPage] = None) -> str:
        page = page or self.current_page()
        if page.is_question:
            return self._resolver.question_title(self.language_code, page.question_id)
        return self._resolver.resolve(self.language_code, f"{_PREFIX_TEXT_KEYS[page.kind]}.title")

    def page_subtitle(self, page: Optional[WizardPage] = None) -> Optional[str]:
        page = page or self.current_page()
        if page.is_question:
            return self._resolver.question_subtitle(self.language_code, page.question_id)
        return self._resolver.lookup(self.language_code, f"{_PREFIX_TEXT_KEYS[page.kind]}.subtitle")

    def option_label(self, question_id: str, option_id: str) -> str:
        return self._resolver.option_label(self.language_code, question_id, option_id)

    def next_button_label(self) -> str:
        key = "common.get_started" if self._sequencer.is_last_page() else "common.next"
        return self._resolver.resolve(self.language_code, key)

    def back_button_label(self) -> str:
        return self._resolver.resolve(self.language_code, "common.back")

    def greeting(self) -> Optional[str]:
        """Greeting shown under the name field once a name is entered."""
        name = self._store.state.trimmed_name
        if not name:
            return None
        return self._resolver.resolve(self.language_code, "onboarding.name.greeting", name=name)

    # =========================================================================
    # Preference access (never raises to the caller)
    # =========================================================================

    def _persist_currency(self, currency_code: str) -> NumberFormatSpec:
        number_format = self._currency_mapper.format_for_currency(currency_code)
        self._write_preference(PreferenceKey.USER_CURRENCY, currency_code)
        self._write_preference(PreferenceKey.NUMBER_FORMAT, number_format.pattern)
        return number_format

    def _read_preference(self, key: PreferenceKey) -> Optional[str]:
        try:
            return self._preferences.get(key.value)
        except StorageError as e:
            logger.warning(
                "preference_read_failed",
                key=key.value,
                error=str(e),
                session_id=str(self._session_id),
            )
            return None

    def _write_preference(self, key: PreferenceKey, value: str) -> None:
        try:
            self._preferences.set(key.value, value)
        except StorageError as e:
            logger.error(
                "preference_write_failed",
                key=key.value,
                error=str(e),
                session_id=str(self._session_id),
            )
            if self._audit_logger:
                self._audit_logger.log_preference_write_failed(
                    key=key.value,
                    error_message=str(e),
                    session_id=self._session_id,
                )

    def _report_invalid_reference(self, kind: str, reference: str) -> None:
        if self._audit_logger:
            self._audit_logger.log_invalid_reference(
                kind=kind,
                reference=reference,
                session_id=self._session_id,
            )


def create_wizard(
    on_complete: Optional[CompletionCallback] = None,
    use_storage: bool = True,
    preferences: Optional[PreferenceStore] = None,
) -> OnboardingWizard:
    """
    Factory function to create a wizard with the configured components.

    Args:
        on_complete: Receives the SurveyResult once.
        use_storage: Whether to use the JSON preference file from settings.
                    Set to False for an in-memory store.
        preferences: Explicit store; overrides use_storage.

    Returns:
        A fresh OnboardingWizard on its first page
    """
    settings = get_settings().wizard

    if preferences is None:
        if use_storage:
            preferences = JsonFilePreferenceStore(settings.preferences_path)
        else:
            preferences = InMemoryPreferenceStore()

    return OnboardingWizard(
        preferences=preferences,
        on_complete=on_complete,
        audit_logger=AuditLogger(),  # Local-only logging
        settings=settings,
    )
