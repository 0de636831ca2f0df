"""
Fixed Onboarding Catalogs

The language list and question list are supplied to the wizard at
construction time and never change during a session.

DESIGN DECISION: Catalog order is meaningful. Languages are listed
with the highest-volume markets first for faster selection, and
question order is page order.
"""

from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

from onboarding.models.survey import LanguageOption, Question


DEFAULT_LANGUAGES: tuple[LanguageOption, ...] = (
    LanguageOption(code="en", display_name="English"),
    LanguageOption(code="de", display_name="Deutsch"),
    LanguageOption(code="fr", display_name="Français"),
    LanguageOption(code="es", display_name="Español"),
    LanguageOption(code="it", display_name="Italiano"),
    LanguageOption(code="pl", display_name="Polski"),
    LanguageOption(code="tr", display_name="Türkçe"),
    LanguageOption(code="ru", display_name="Русский"),
    LanguageOption(code="uk", display_name="Українська"),
)

DEFAULT_QUESTIONS: tuple[Question, ...] = (
    Question(
        id="goal",
        options=(
            "save_more",
            "pay_debt",
            "emergency_fund",
            "start_investing",
            "stop_overspending",
            "big_purchase",
        ),
    ),
    Question(
        id="help_first",
        options=(
            "budgeting",
            "expense_tracking",
            "debt_strategy",
            "income_growth",
            "investing_basics",
            "goal_planning",
        ),
    ),
    Question(
        id="tracking_today",
        options=(
            "not_tracking",
            "mental_notes",
            "spreadsheet",
            "bank_app",
            "budget_app",
            "other",
        ),
    ),
    Question(
        id="situation",
        options=(
            "paycheck_to_paycheck",
            "some_savings",
            "stable",
            "debt_heavy",
            "building_wealth",
            "prefer_not_say",
        ),
    ),
    Question(
        id="challenge",
        options=(
            "impulse_spending",
            "no_budget",
            "debt_stress",
            "irregular_income",
            "saving_consistency",
            "investing_confusion",
        ),
    ),
)


class WizardCatalog(BaseModel):
    """
    The languages and questions one wizard session iterates over.

    Validated once on construction: ids must be unique and both lists
    non-empty.
    """
    model_config = ConfigDict(frozen=True)

    languages: tuple[LanguageOption, ...] = Field(
        default=DEFAULT_LANGUAGES,
        min_length=1,
    )
    questions: tuple[Question, ...] = Field(
        default=DEFAULT_QUESTIONS,
        min_length=1,
    )

    @model_validator(mode='after')
    def validate_unique_ids(self) -> 'WizardCatalog':
        language_codes = [language.code for language in self.languages]
        if len(set(language_codes)) != len(language_codes):
            raise ValueError(f"Duplicate language codes: {language_codes}")

        question_ids = [question.id for question in self.questions]
        if len(set(question_ids)) != len(question_ids):
            raise ValueError(f"Duplicate question ids: {question_ids}")

        return self

    @property
    def question_ids(self) -> tuple[str, ...]:
        return tuple(question.id for question in self.questions)

    def language(self, code: Optional[str]) -> Optional[LanguageOption]:
        """Find a language by code (case-insensitive)."""
        if not code:
            return None
        code = code.strip().lower()
        for language in self.languages:
            if language.code == code:
                return language
        return None

    def question(self, question_id: str) -> Optional[Question]:
        for question in self.questions:
            if question.id == question_id:
                return question
        return None


def default_catalog(
    languages: Optional[Sequence[LanguageOption]] = None,
    questions: Optional[Sequence[Question]] = None,
) -> WizardCatalog:
    """Build a catalog, substituting the defaults for anything not given."""
    return WizardCatalog(
        languages=tuple(languages) if languages is not None else DEFAULT_LANGUAGES,
        questions=tuple(questions) if questions is not None else DEFAULT_QUESTIONS,
    )
