"""
Currency Whitelist and Number Formats

Maps a currency code to the decimal/grouping convention used to
display money throughout the app ("1,234.56" vs "1.234,56").

DESIGN DECISION: The mapping is a total function. Every whitelisted
code maps to a format, and anything else maps to the default format.
Unknown currencies are a stored-preference problem, not a reason to
crash a screen.
"""

import re
from typing import Iterable, Optional

from onboarding.models.survey import CurrencyOption, NumberFormatSpec


DEFAULT_CURRENCY = "USD"

DEFAULT_CURRENCY_WHITELIST: tuple[str, ...] = (
    "USD", "EUR", "GBP", "CHF", "PLN", "TRY", "CAD",
)

DOT_DECIMAL_FORMAT = NumberFormatSpec(
    pattern="1,234.56",
    decimal_separator=".",
    grouping_separator=",",
)
COMMA_DECIMAL_FORMAT = NumberFormatSpec(
    pattern="1.234,56",
    decimal_separator=",",
    grouping_separator=".",
)
DEFAULT_NUMBER_FORMAT = DOT_DECIMAL_FORMAT

# Currencies displayed with a decimal comma
_COMMA_DECIMAL_CURRENCIES = frozenset({"EUR", "PLN"})

_CURRENCY_CODE = re.compile(r"[A-Z]{3}")

# Display data for every currency a deployment may whitelist
CURRENCY_OPTIONS: dict[str, CurrencyOption] = {
    option.code: option
    for option in (
        CurrencyOption(code="USD", symbol="$", name="US Dollar"),
        CurrencyOption(code="EUR", symbol="€", name="Euro"),
        CurrencyOption(code="GBP", symbol="£", name="British Pound"),
        CurrencyOption(code="CHF", symbol="CHF", name="Swiss Franc"),
        CurrencyOption(code="PLN", symbol="zł", name="Polish Złoty"),
        CurrencyOption(code="TRY", symbol="₺", name="Turkish Lira"),
        CurrencyOption(code="CAD", symbol="C$", name="Canadian Dollar"),
        CurrencyOption(code="JPY", symbol="¥", name="Japanese Yen"),
        CurrencyOption(code="AUD", symbol="A$", name="Australian Dollar"),
        CurrencyOption(code="CNY", symbol="¥", name="Chinese Yuan"),
        CurrencyOption(code="INR", symbol="₹", name="Indian Rupee"),
        CurrencyOption(code="NZD", symbol="NZ$", name="New Zealand Dollar"),
    )
}


def normalize_currency_code(code: Optional[str]) -> str:
    """Strip and uppercase a currency code; None becomes ''."""
    if code is None:
        return ""
    return code.strip().upper()


class CurrencyFormatMapper:
    """
    Whitelist-aware currency helper.

    Holds no per-session state; one instance can serve every session
    that shares a whitelist.
    """

    def __init__(
        self,
        whitelist: Iterable[str] = DEFAULT_CURRENCY_WHITELIST,
        default_currency: str = DEFAULT_CURRENCY,
    ):
        """
        Initialize the mapper.

        Args:
            whitelist: Selectable currency codes, in display order.
            default_currency: Fallback for missing or unknown codes.
                             Must be in the whitelist.

        Raises:
            ValueError: If a code is not 3 letters or the default is
                        not whitelisted.
        """
        codes = []
        for code in whitelist:
            code = normalize_currency_code(code)
            if code and code not in codes:
                codes.append(code)
        default_currency = normalize_currency_code(default_currency)

        invalid = [code for code in codes if not _CURRENCY_CODE.fullmatch(code)]
        if invalid:
            raise ValueError(f"Currency codes must be 3 letters: {invalid}")

        if default_currency not in codes:
            raise ValueError(
                f"Default currency {default_currency!r} is not in the whitelist {codes}"
            )

        self._whitelist = tuple(codes)
        self._default_currency = default_currency

    @property
    def whitelist(self) -> tuple[str, ...]:
        return self._whitelist

    @property
    def default_currency(self) -> str:
        return self._default_currency

    def is_supported(self, code: Optional[str]) -> bool:
        return normalize_currency_code(code) in self._whitelist

    def normalize(self, code: Optional[str]) -> str:
        """
        Coerce a stored or external value onto the whitelist.

        Returns the normalized code if it is whitelisted,
        otherwise the default currency.
        """
        code = normalize_currency_code(code)
        if code in self._whitelist:
            return code
        return self._default_currency

    def format_for_currency(self, code: Optional[str]) -> NumberFormatSpec:
        """
        Get the number format for a currency.

        Codes outside the whitelist get the default format, even if
        they would otherwise use a decimal comma.
        """
        code = normalize_currency_code(code)
        if code not in self._whitelist:
            return DEFAULT_NUMBER_FORMAT
        if code in _COMMA_DECIMAL_CURRENCIES:
            return COMMA_DECIMAL_FORMAT
        return DOT_DECIMAL_FORMAT

    def currency_options(self) -> list[CurrencyOption]:
        """Display options for the whitelist, in whitelist order."""
        options = []
        for code in self._whitelist:
            option = CURRENCY_OPTIONS.get(code)
            if option is None:
                option = CurrencyOption(code=code, symbol=code, name=code)
            options.append(option)
        return options


_default_mapper = CurrencyFormatMapper()


def format_for_currency(code: Optional[str]) -> NumberFormatSpec:
    """Number format for a code, using the default whitelist."""
    return _default_mapper.format_for_currency(code)
