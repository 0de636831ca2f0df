"""
Result Builder

Assembles the immutable SurveyResult at the terminal transition.

CRITICAL: Building from an incomplete state is a programming error.
The gate blocks every page until it is valid and the sequencer only
allows adjacent moves, so the UI cannot reach this with gaps. If it
happens anyway we fail loudly instead of emitting a partial result.
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from onboarding.errors import IncompleteSurveyError
from onboarding.models.survey import SurveyResult, SurveyState

if TYPE_CHECKING:
    from onboarding.validation.gate import ValidationGate


class ResultBuilder:
    """Turns a complete SurveyState into a SurveyResult."""

    def __init__(self, gate: "ValidationGate"):
        self._gate = gate

    def build(
        self,
        state: SurveyState,
        now: Optional[datetime] = None,
    ) -> SurveyResult:
        """
        Build the survey result.

        Args:
            state: The session's state; must be complete.
            now: Completion timestamp; defaults to the current UTC time.

        Returns:
            A frozen SurveyResult holding a copy of the answers.

        Raises:
            IncompleteSurveyError: If any required field is missing.
        """
        if not self._gate.is_complete(state):
            raise IncompleteSurveyError(self._gate.missing_fields(state))

        return SurveyResult(
            language_code=state.selected_language.code,
            user_name=state.trimmed_name,
            currency_code=state.selected_currency.strip(),
            answers=dict(state.answers),
            completed_at=now or datetime.now(timezone.utc),
        )
