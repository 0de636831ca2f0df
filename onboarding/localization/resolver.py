"""
Localization Resolver

Turns (language code, key) pairs into display text.

DESIGN DECISION: One nested table {language: {key: text}} is built
once at import time. Every lookup walks the same fallback chain:

    requested language -> default language -> raw identifier

The resolver never raises and never caches per session, so switching
language mid-wizard re-renders every later page on the next lookup.
"""

from functools import lru_cache
from typing import Any, Mapping, Optional

import structlog

from onboarding.localization.strings import UI_STRINGS
from onboarding.localization.survey_text import QUESTION_EMOJI, SURVEY_TEXT


DEFAULT_LANGUAGE = "en"

_LOCALE_IDENTIFIERS = {
    "en": "en_US",
    "de": "de_DE",
    "fr": "fr_FR",
    "es": "es_ES",
    "it": "it_IT",
    "pl": "pl_PL",
    "ru": "ru_RU",
    "tr": "tr_TR",
    "uk": "uk_UA",
}

logger = structlog.get_logger(__name__)


def _merge_tables(*tables: Mapping[str, Mapping[str, str]]) -> dict[str, dict[str, str]]:
    merged: dict[str, dict[str, str]] = {}
    for table in tables:
        for language, entries in table.items():
            merged.setdefault(language, {}).update(entries)
    return merged


TRANSLATIONS: dict[str, dict[str, str]] = _merge_tables(UI_STRINGS, SURVEY_TEXT)


class LocalizationResolver:
    """
    Stateless lookup over a translation table.

    Usage:
        resolver = LocalizationResolver()
        resolver.resolve("de", "common.next")            # "Weiter"
        resolver.resolve("en", "chat.conversations", count=3)
        resolver.option_label("fr", "goal", "save_more")
    """

    def __init__(
        self,
        translations: Optional[Mapping[str, Mapping[str, str]]] = None,
        default_language: str = DEFAULT_LANGUAGE,
        question_emoji: Optional[Mapping[str, str]] = None,
    ):
        self._translations = translations if translations is not None else TRANSLATIONS
        self._default_language = default_language.strip().lower()
        self._question_emoji = question_emoji if question_emoji is not None else QUESTION_EMOJI

    @property
    def default_language(self) -> str:
        return self._default_language

    def supported_languages(self) -> tuple[str, ...]:
        return tuple(self._translations.keys())

    def has_language(self, language_code: Optional[str]) -> bool:
        return self._table_language(language_code) is not None

    def _table_language(self, language_code: Optional[str]) -> Optional[str]:
        """
        Map a requested code onto a table language.

        Accepts region-qualified codes ('de-AT', 'pt_BR') by falling
        back to the base language.
        """
        if not language_code:
            return None
        code = language_code.strip().lower()
        if code in self._translations:
            return code
        base = code.replace("_", "-").split("-", 1)[0]
        if base in self._translations:
            return base
        return None

    def lookup(self, language_code: Optional[str], key: str) -> Optional[str]:
        """
        Find a translation without the raw-key fallback.

        Returns None when neither the requested nor the default
        language has the key.
        """
        language = self._table_language(language_code)
        if language is not None:
            value = self._translations[language].get(key)
            if value is not None:
                return value

        default_table = self._translations.get(self._default_language, {})
        value = default_table.get(key)
        if value is None:
            logger.debug(
                "translation_missing",
                language_code=language_code,
                key=key,
            )
        return value

    def resolve(self, language_code: Optional[str], key: str, **params: Any) -> str:
        """
        Resolve a key to display text.

        Args:
            language_code: Requested language; None uses the default.
            key: Translation key (e.g., 'common.next').
            **params: Values for {placeholders} in the text.

        Returns:
            The localized, interpolated text, or the key itself.
        """
        value = self.lookup(language_code, key)
        if value is None:
            return key
        return _interpolate(value, params)

    def question_title(self, language_code: Optional[str], question_id: str) -> str:
        """Localized question title with its emoji suffix."""
        title = self.lookup(language_code, f"question.{question_id}.title") or question_id
        emoji = self._question_emoji.get(question_id)
        if emoji:
            return f"{title} {emoji}"
        return title

    def question_subtitle(self, language_code: Optional[str], question_id: str) -> Optional[str]:
        """Localized subtitle; most questions have none."""
        return self.lookup(language_code, f"question.{question_id}.subtitle")

    def option_label(
        self,
        language_code: Optional[str],
        question_id: str,
        option_id: str,
    ) -> str:
        """Localized option label; falls back to the raw option id."""
        label = self.lookup(language_code, f"option.{question_id}.{option_id}")
        return label if label is not None else option_id

    @staticmethod
    def locale_identifier(language_code: Optional[str]) -> str:
        """Platform locale for number/date formatting ('de' -> 'de_DE')."""
        if not language_code:
            return _LOCALE_IDENTIFIERS[DEFAULT_LANGUAGE]
        return _LOCALE_IDENTIFIERS.get(
            language_code.strip().lower(),
            _LOCALE_IDENTIFIERS[DEFAULT_LANGUAGE],
        )


def _interpolate(template: str, params: Mapping[str, Any]) -> str:
    if not params:
        return template
    try:
        return template.format(**params)
    except (KeyError, IndexError, ValueError) as e:
        logger.warning(
            "translation_interpolation_failed",
            template=template,
            error=str(e),
        )
        return template


@lru_cache()
def get_resolver() -> LocalizationResolver:
    """Shared resolver over the built-in tables."""
    return LocalizationResolver()


def t(key: str, language_code: Optional[str] = None, **params: Any) -> str:
    """Translate ``key`` into ``language_code`` using the shared resolver."""
    return get_resolver().resolve(language_code, key, **params)
