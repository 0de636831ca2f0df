"""
Wizard Exceptions

DESIGN DECISION: The wizard core has no user-visible error state.
Everything that can go wrong for the user is either normalized
(currency and translation fallbacks) or structurally prevented by
the validation gate. What remains is caller bugs, and those raise.
"""

from typing import Optional


class WizardError(Exception):
    """Base exception for onboarding wizard operations."""
    pass


class InvalidCatalogReferenceError(WizardError):
    """A language, currency, question or option id is not in its catalog."""

    def __init__(self, kind: str, reference: str):
        self.kind = kind
        self.reference = reference
        super().__init__(f"Unknown {kind}: {reference!r}")


class IncompleteSurveyError(WizardError):
    """
    A survey result was requested before every page was valid.

    The UI must never reach this: the validation gate blocks the
    terminal transition until the survey is complete.
    """

    def __init__(self, issues: Optional[list] = None):
        self.issues = list(issues or [])
        fields = ", ".join(issue.field for issue in self.issues) or "unknown"
        super().__init__(f"Survey is incomplete (missing: {fields})")


class WizardFinishedError(WizardError):
    """Navigation was attempted after the survey result was emitted."""
    pass
