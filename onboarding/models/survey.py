"""
Core Data Models for the Onboarding Wizard

These models define the schemas for everything the wizard reads,
mutates and emits:
1. Catalog entries (languages, questions, currencies) are frozen
2. SurveyState is the single mutable object, owned by one session
3. SurveyResult is frozen and produced exactly once per session

DESIGN DECISION: SurveyResult serializes with camelCase keys
(languageCode, currencyCode, completedAt) so that responses saved by
the mobile client and by this package are interchangeable.
"""

import json
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel


# =============================================================================
# CATALOG MODELS - Immutable for the lifetime of a wizard session
# =============================================================================

class LanguageOption(BaseModel):
    """
    A selectable app language.

    Identity is the language code; display_name is shown as written
    in the language itself ("Deutsch", not "German").
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    code: str = Field(
        ...,
        min_length=2,
        max_length=8,
        description="Language code (e.g., 'en', 'de')"
    )
    display_name: str = Field(
        ...,
        min_length=1,
        description="Language name in its own language"
    )

    @field_validator('code')
    @classmethod
    def lowercase_code(cls, v: str) -> str:
        return v.lower()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LanguageOption):
            return self.code == other.code
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.code)


class Question(BaseModel):
    """
    One survey question and its ordered option ids.

    Option order is display order. The question text and option labels
    are not stored here; they are resolved per language at render time.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Stable question identifier (e.g., 'goal')"
    )
    options: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Ordered option identifiers"
    )

    @field_validator('options')
    @classmethod
    def validate_unique_options(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Option ids must be unique within a question."""
        if len(set(v)) != len(v):
            raise ValueError(f"Duplicate option ids: {v}")
        if any(not option.strip() for option in v):
            raise ValueError("Option ids cannot be blank")
        return v

    def has_option(self, option_id: str) -> bool:
        return option_id in self.options


class CurrencyOption(BaseModel):
    """A selectable currency as shown on the currency page."""
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    code: str = Field(
        ...,
        min_length=3,
        max_length=3,
        description="ISO 4217 currency code"
    )
    symbol: str = Field(
        ...,
        min_length=1,
        description="Display symbol (e.g., '$', 'zł')"
    )
    name: str = Field(
        ...,
        min_length=1,
        description="English currency name"
    )

    @property
    def label(self) -> str:
        """Row label in the form used by the currency page."""
        return f"{self.symbol}  {self.code}  •  {self.name}"


class NumberFormatSpec(BaseModel):
    """
    Decimal and grouping conventions for displaying money.

    The pattern string is what gets persisted to preferences and
    read back by the rest of the app.
    """
    model_config = ConfigDict(frozen=True)

    pattern: str = Field(
        ...,
        description="Canonical sample, e.g. '1,234.56' or '1.234,56'"
    )
    decimal_separator: str = Field(
        ...,
        min_length=1,
        max_length=1,
    )
    grouping_separator: str = Field(
        ...,
        min_length=1,
        max_length=1,
    )

    @model_validator(mode='after')
    def validate_separators(self) -> 'NumberFormatSpec':
        if self.decimal_separator == self.grouping_separator:
            raise ValueError("Decimal and grouping separators must differ")
        return self

    def format_amount(self, amount: Union[Decimal, int, str]) -> str:
        """Render an amount with two decimals using these separators."""
        value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        sign = "-" if value < 0 else ""
        integer, fraction = f"{abs(value):,.2f}".split(".")
        integer = integer.replace(",", self.grouping_separator)
        return f"{sign}{integer}{self.decimal_separator}{fraction}"


# =============================================================================
# SESSION STATE - Mutable, single owner
# =============================================================================

class SurveyState(BaseModel):
    """
    The answer set collected during one wizard session.

    CRITICAL: Only SurveyStateStore mutates this. Everything else
    reads snapshots.
    """
    model_config = ConfigDict(validate_assignment=True)

    selected_language: Optional[LanguageOption] = None
    user_name: str = Field(
        default="",
        description="Display name as typed; trimmed on validation"
    )
    selected_currency: str = Field(
        default="USD",
        description="Currency code from the whitelist"
    )
    answers: dict[str, str] = Field(
        default_factory=dict,
        description="question id -> selected option id"
    )

    @property
    def trimmed_name(self) -> str:
        return self.user_name.strip()

    @property
    def language_code(self) -> Optional[str]:
        return self.selected_language.code if self.selected_language else None


# =============================================================================
# RESULT - Immutable, produced once
# =============================================================================

class SurveyResult(BaseModel):
    """
    The structured outcome of a completed onboarding session.

    CRITICAL: Only ResultBuilder creates this. The answers mapping is a
    copy taken at build time; later changes to the session do not
    reach it.
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    language_code: str = Field(
        ...,
        min_length=2,
        description="Selected app language"
    )
    user_name: str = Field(
        default="",
        description="Trimmed display name"
    )
    currency_code: str = Field(
        default="USD",
        min_length=3,
        max_length=3,
        description="Selected currency"
    )
    answers: dict[str, str] = Field(
        default_factory=dict,
        description="question id -> option id"
    )
    completed_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the terminal transition happened (UTC)"
    )

    def to_storage_json(self) -> str:
        """Serialize for the preference store (camelCase keys)."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_storage_json(cls, payload: Union[str, bytes]) -> 'SurveyResult':
        """
        Decode a stored survey response.

        Older builds saved responses without currencyCode or userName;
        those decode with 'USD' and an empty name.
        """
        data = json.loads(payload)
        if not isinstance(data, dict):
            raise ValueError("Stored survey response must be a JSON object")
        if "currencyCode" not in data and "currency_code" not in data:
            data["currencyCode"] = "USD"
        if "userName" not in data and "user_name" not in data:
            data["userName"] = ""
        return cls.model_validate(data)


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single unmet requirement found in a survey state."""

    field: str = Field(
        ...,
        description="Field with the issue (e.g., 'user_name', 'answers.goal')"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'blank')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    page_index: Optional[int] = Field(
        default=None,
        ge=0,
        description="Page where the user can fix this"
    )
