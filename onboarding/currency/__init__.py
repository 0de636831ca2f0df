"""Currency whitelist and number format package."""

from onboarding.currency.formats import (
    COMMA_DECIMAL_FORMAT,
    CURRENCY_OPTIONS,
    DEFAULT_CURRENCY,
    DEFAULT_CURRENCY_WHITELIST,
    DEFAULT_NUMBER_FORMAT,
    DOT_DECIMAL_FORMAT,
    CurrencyFormatMapper,
    format_for_currency,
    normalize_currency_code,
)

__all__ = [
    "COMMA_DECIMAL_FORMAT",
    "CURRENCY_OPTIONS",
    "DEFAULT_CURRENCY",
    "DEFAULT_CURRENCY_WHITELIST",
    "DEFAULT_NUMBER_FORMAT",
    "DOT_DECIMAL_FORMAT",
    "CurrencyFormatMapper",
    "format_for_currency",
    "normalize_currency_code",
]
