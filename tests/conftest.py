"""Shared fixtures for the onboarding wizard tests."""

import pytest

from onboarding.audit import AuditLogger
from onboarding.config import WizardSettings
from onboarding.models.catalog import DEFAULT_QUESTIONS, default_catalog
from onboarding.orchestrator import OnboardingWizard
from onboarding.services.storage import InMemoryAuditStorage, InMemoryPreferenceStore


@pytest.fixture
def settings():
    return WizardSettings(_env_file=None)


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def four_question_catalog():
    return default_catalog(questions=DEFAULT_QUESTIONS[:4])


@pytest.fixture
def preferences():
    return InMemoryPreferenceStore()


@pytest.fixture
def audit_storage():
    return InMemoryAuditStorage()


@pytest.fixture
def audit_logger(audit_storage):
    return AuditLogger(audit_storage)


@pytest.fixture
def completed():
    """Collects every result handed to on_complete."""
    return []


@pytest.fixture
def wizard(catalog, preferences, audit_logger, settings, completed):
    return OnboardingWizard(
        catalog=catalog,
        preferences=preferences,
        on_complete=completed.append,
        audit_logger=audit_logger,
        settings=settings,
    )


def fill_prefix_pages(wizard, language="en", name="Ana", currency="EUR"):
    """Fill and leave the language, name and currency pages."""
    wizard.select_language(language)
    wizard.next()
    wizard.set_user_name(name)
    wizard.next()
    wizard.select_currency(currency)
    wizard.next()


def answer_all(wizard, option_index=0):
    """Answer every question page and press Next after each."""
    transitions = []
    for question in wizard.catalog.questions:
        wizard.answer(question.id, question.options[option_index])
        transitions.append(wizard.next())
    return transitions
