"""
Data Models Package

This package contains all Pydantic models used by the onboarding wizard.
All data flowing through the wizard must conform to these schemas.
"""

from onboarding.models.survey import (
    CurrencyOption,
    LanguageOption,
    NumberFormatSpec,
    Question,
    SurveyResult,
    SurveyState,
    ValidationIssue,
)
from onboarding.models.catalog import (
    DEFAULT_LANGUAGES,
    DEFAULT_QUESTIONS,
    WizardCatalog,
    default_catalog,
)
from onboarding.models.audit import (
    AuditSeverity,
    WizardEvent,
    WizardEventBuilder,
    WizardEventType,
)

__all__ = [
    # Survey models
    "CurrencyOption",
    "LanguageOption",
    "NumberFormatSpec",
    "Question",
    "SurveyResult",
    "SurveyState",
    "ValidationIssue",
    # Catalogs
    "DEFAULT_LANGUAGES",
    "DEFAULT_QUESTIONS",
    "WizardCatalog",
    "default_catalog",
    # Audit models
    "AuditSeverity",
    "WizardEvent",
    "WizardEventBuilder",
    "WizardEventType",
]
