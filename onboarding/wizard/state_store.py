"""
Survey State Store

Holds the one mutable SurveyState of a wizard session.

DESIGN DECISION: All mutation goes through this store, and every
write is checked against the catalogs. The store is the reason the
catalog invariants hold:
- answers only ever contain catalog question ids and their options
- selected_currency is always on the whitelist

Interactive selections of unknown languages or currencies raise,
because the UI only offers catalog entries. Unknown answer keys are
ignored and logged. Stored preferences used for seeding are coerced,
never rejected.
"""

from typing import Callable, Optional, Sequence

import structlog

from onboarding.currency.formats import CurrencyFormatMapper, normalize_currency_code
from onboarding.errors import InvalidCatalogReferenceError
from onboarding.models.survey import LanguageOption, Question, SurveyState


logger = structlog.get_logger(__name__)


class SurveyStateStore:
    """
    Single owner of a session's SurveyState.

    Single-threaded: all calls come from the UI's event handling in
    response to discrete user actions.
    """

    def __init__(
        self,
        questions: Sequence[Question],
        currency_mapper: Optional[CurrencyFormatMapper] = None,
        initial_currency: Optional[str] = None,
        initial_language: Optional[LanguageOption] = None,
        max_name_length: Optional[int] = None,
        on_invalid_reference: Optional[Callable[[str, str], None]] = None,
    ):
        """
        Initialize the store.

        Args:
            questions: Question catalog used to check answers.
            currency_mapper: Whitelist and default currency.
            initial_currency: Persisted preference; coerced to the
                             whitelist (unknown -> default).
            initial_language: Optional pre-selected language.
            max_name_length: Names longer than this are truncated.
            on_invalid_reference: Called with (kind, reference) when an
                                 unknown answer key is ignored.
        """
        self._questions = {question.id: question for question in questions}
        self._currency_mapper = currency_mapper or CurrencyFormatMapper()
        self._max_name_length = max_name_length
        self._on_invalid_reference = on_invalid_reference

        self._state = SurveyState(
            selected_language=initial_language,
            selected_currency=self._currency_mapper.normalize(initial_currency),
        )

    @property
    def state(self) -> SurveyState:
        """
        The live state.

        Read-only by convention; use snapshot() to keep a copy.
        """
        return self._state

    def snapshot(self) -> SurveyState:
        """Deep copy of the current state."""
        return self._state.model_copy(deep=True)

    # -------------------------------------------------------------------------
    # Page 0: language
    # -------------------------------------------------------------------------

    def select_language(self, language: LanguageOption) -> None:
        """Select a language. Answers already given are kept."""
        self._state.selected_language = language

    # -------------------------------------------------------------------------
    # Page 1: name
    # -------------------------------------------------------------------------

    def set_user_name(self, name: Optional[str]) -> str:
        """
        Store the display name as typed.

        Full trimming happens on validation and in the result, so the
        text field keeps showing what the user typed. Leading whitespace
        is dropped before truncation so it cannot use up the length limit.
        """
        name = name or ""
        if self._max_name_length is not None and len(name) > self._max_name_length:
            name = name.lstrip()[:self._max_name_length]
        self._state.user_name = name
        return name

    # -------------------------------------------------------------------------
    # Page 2: currency
    # -------------------------------------------------------------------------

    def select_currency(self, code: str) -> str:
        """
        Select a whitelisted currency.

        Returns the normalized code.

        Raises:
            InvalidCatalogReferenceError: If the code is not whitelisted.
        """
        normalized = normalize_currency_code(code)
        if not self._currency_mapper.is_supported(normalized):
            raise InvalidCatalogReferenceError("currency", code)
        self._state.selected_currency = normalized
        return normalized

    # -------------------------------------------------------------------------
    # Question pages
    # -------------------------------------------------------------------------

    def answer(self, question_id: str, option_id: str) -> bool:
        """
        Record (or overwrite) the answer to a question.

        Returns True if recorded. Unknown question or option ids are
        a caller bug; they are logged and ignored.
        """
        question = self._questions.get(question_id)
        if question is None:
            self._report_invalid("question", question_id)
            return False
        if not question.has_option(option_id):
            self._report_invalid("option", f"{question_id}.{option_id}")
            return False

        self._state.answers[question_id] = option_id
        return True

    def clear_answer(self, question_id: str) -> None:
        self._state.answers.pop(question_id, None)

    def answer_for(self, question_id: str) -> Optional[str]:
        return self._state.answers.get(question_id)

    def _report_invalid(self, kind: str, reference: str) -> None:
        logger.warning("invalid_catalog_reference", kind=kind, reference=reference)
        if self._on_invalid_reference is not None:
            self._on_invalid_reference(kind, reference)
