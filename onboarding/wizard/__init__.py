"""Wizard state machine package."""

from onboarding.wizard.sequencer import (
    PREFIX_PAGE_COUNT,
    PREFIX_PAGES,
    PageKind,
    PageSequencer,
    Transition,
    WizardPage,
)
from onboarding.wizard.state_store import SurveyStateStore
from onboarding.wizard.result_builder import ResultBuilder

__all__ = [
    "PREFIX_PAGE_COUNT",
    "PREFIX_PAGES",
    "PageKind",
    "PageSequencer",
    "ResultBuilder",
    "SurveyStateStore",
    "Transition",
    "WizardPage",
]
