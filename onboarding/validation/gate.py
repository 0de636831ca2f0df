"""
Validation Gate

Decides whether "Next" is enabled on a page.

DESIGN DECISION: The gate is re-evaluated on every page, every
render. A later page cannot assume earlier pages are still filled
in, because the user may have gone back and cleared them. The gate is
pure: one indexed lookup per call, no mutation.

IMPORTANT: The gate NEVER fixes anything. It reports whether the
page is valid and, via missing_fields(), what is still missing.
"""

from onboarding.models.survey import SurveyState, ValidationIssue
from onboarding.wizard.sequencer import PageKind, PageSequencer, WizardPage


class ValidationGate:
    """
    Page-by-page validity checks over a survey state.

    Only the sequencer's page list is consulted, never its current
    index, so results depend on (page_index, state) alone.
    """

    def __init__(self, sequencer: PageSequencer):
        """
        Initialize the gate.

        Args:
            sequencer: Supplies the page list and question catalog.
        """
        self._sequencer = sequencer

    def is_next_enabled(self, page_index: int, state: SurveyState) -> bool:
        """
        Check whether the user may leave a page forward.

        Unknown page indices fall back to the full completeness check.
        """
        page = self._sequencer.page_at(page_index)
        if page is None:
            return self.is_complete(state)
        return self._is_page_valid(page, state)

    def _is_page_valid(self, page: WizardPage, state: SurveyState) -> bool:
        if page.kind == PageKind.LANGUAGE:
            return state.selected_language is not None
        if page.kind == PageKind.NAME:
            return state.trimmed_name != ""
        if page.kind == PageKind.CURRENCY:
            return state.selected_currency.strip() != ""
        return state.answers.get(page.question_id) is not None

    def is_complete(self, state: SurveyState) -> bool:
        """
        Overall completeness.

        True iff a language is selected, the trimmed name and currency
        are non-empty and every catalog question has an answer.
        """
        if state.selected_language is None:
            return False
        if not state.trimmed_name:
            return False
        if not state.selected_currency.strip():
            return False
        return all(
            state.answers.get(question.id) is not None
            for question in self._sequencer.questions
        )

    def missing_fields(self, state: SurveyState) -> list[ValidationIssue]:
        """
        List every unmet requirement, in page order.

        Returns an empty list when the state is complete.
        """
        issues = []

        for page in self._sequencer.pages:
            if self._is_page_valid(page, state):
                continue

            if page.kind == PageKind.LANGUAGE:
                issues.append(ValidationIssue(
                    field="selected_language",
                    issue_type="missing",
                    message="No language selected",
                    page_index=page.index,
                ))
            elif page.kind == PageKind.NAME:
                issues.append(ValidationIssue(
                    field="user_name",
                    issue_type="blank" if state.user_name else "missing",
                    message="Display name is empty",
                    page_index=page.index,
                ))
            elif page.kind == PageKind.CURRENCY:
                issues.append(ValidationIssue(
                    field="selected_currency",
                    issue_type="missing",
                    message="No currency selected",
                    page_index=page.index,
                ))
            else:
                issues.append(ValidationIssue(
                    field=f"answers.{page.question_id}",
                    issue_type="missing",
                    message=f"Question '{page.question_id}' is not answered",
                    page_index=page.index,
                ))

        return issues
