"""
Currency lookup.

Every three-letter code is an ISO 4217 code; ``DINAR``, ``DOLLAR``, ``PESO``
and ``RIYAL`` are generic names for the currency family. The table below
holds English names, used by any language that doesn't ship its own.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Optional

from .exceptions import UnknownCurrencyError
from .models import CurrencyDefinition

logger = logging.getLogger(__name__)


def _regular(word: str) -> tuple[str, str]:
    return word, word + "s"


CENT = _regular("cent")
CENTAVO = _regular("centavo")
FILS = ("fils", "fils")
SEN = ("sen", "sen")

# code -> (description, (major, major plural), (minor, minor plural))
_TABLE: dict[str, tuple[str, tuple[str, str], tuple[str, str]]] = {
    "AED": ("UAE dirham", _regular("dirham"), FILS),
    "ARS": ("Argentine peso", _regular("argentine peso"), CENTAVO),
    "AUD": ("Australian dollar", _regular("australian dollar"), CENT),
    "BRL": ("Brazilian real", ("real", "reais"), CENTAVO),
    "CAD": ("Canadian dollar", _regular("canadian dollar"), CENT),
    "CHF": ("Swiss franc", _regular("franc"), CENT),
    "CLP": ("Chilean peso", _regular("chilean peso"), CENTAVO),
    "CNY": ("Chinese yuan", _regular("yuan"), CENT),
    "COP": ("Colombian peso", _regular("colombian peso"), CENTAVO),
    "CRC": ("Costa Rican colón", ("colón", "colones"), _regular("céntimo")),
    "DINAR": ("Dinar (generic)", _regular("dinar"), CENT),
    "DOLLAR": ("Dollar (generic)", _regular("dollar"), CENT),
    "DZD": ("Algerian dinar", _regular("algerian dinar"), CENT),
    "EUR": ("Euro", _regular("euro"), CENT),
    "GBP": ("Pound sterling", _regular("pound"), CENT),
    "HKD": ("Hong Kong dollar", _regular("hong kong dollar"), CENT),
    "IDR": ("Indonesian rupiah", _regular("indonesian rupiah"), SEN),
    "ILS": ("Israeli new shekel", _regular("new shekel"), CENT),
    "INR": ("Indian rupee", _regular("rupee"), CENT),
    "JPY": ("Japanese yen", _regular("yen"), CENT),
    "KRW": ("South Korean won", _regular("won"), _regular("jeon")),
    "KWD": ("Kuwaiti dinar", _regular("kuwaiti dinar"), FILS),
    "KZT": ("Kazakhstani tenge", _regular("tenge"), CENT),
    "MXN": ("Mexican peso", _regular("mexican peso"), CENTAVO),
    "MYR": ("Malaysian ringgit", _regular("ringgit"), SEN),
    "NOK": ("Norwegian krone", _regular("norwegian krone"), CENT),
    "NZD": ("New Zealand dollar", _regular("new zealand dollar"), CENT),
    "PEN": ("Peruvian sol", ("sol", "soles"), CENT),
    "PESO": ("Peso (generic)", _regular("peso"), CENT),
    "PHP": ("Philippine peso", _regular("philippine peso"), CENT),
    "PLN": ("Polish złoty", _regular("zloty"), CENT),
    "QAR": ("Qatari riyal", _regular("qatari riyal"), CENT),
    "RIYAL": ("Riyal (generic)", _regular("riyal"), CENT),
    "RUB": ("Russian ruble", _regular("ruble"), CENT),
    "SAR": ("Saudi riyal", _regular("saudi riyal"), _regular("halala")),
    "SGD": ("Singapore dollar", _regular("singapore dollar"), CENT),
    "THB": ("Thai baht", _regular("baht"), _regular("satang")),
    "TRY": ("Turkish lira", _regular("lira"), CENT),
    "TWD": ("New Taiwan dollar", _regular("taiwan dollar"), CENT),
    "UAH": ("Ukrainian hryvnia", _regular("hryvnia"), ("kopiyka", "kopiyok")),
    "USD": ("United States dollar", _regular("US dollar"), CENT),
    "UYU": ("Uruguayan peso", _regular("uruguayan peso"), _regular("centésimo")),
    "VND": ("Vietnamese đồng", _regular("dong"), ("xu", "xu")),
    "ZAR": ("South African rand", _regular("rand"), CENT),
}

CURRENCIES: dict[str, CurrencyDefinition] = {
    code: CurrencyDefinition(
        code=code,
        major=major[0],
        major_plural=major[1],
        minor=minor[0],
        minor_plural=minor[1],
    )
    for code, (_, major, minor) in _TABLE.items()
}


def lookup_currency(
    code: str, overrides: Optional[Mapping[str, CurrencyDefinition]] = None
) -> CurrencyDefinition:
    """Resolve a currency code (case-insensitive) to its unit names.

    Args:
        code: ISO 4217 code or one of the generic family names.
        overrides: Language-specific names keyed by code; the English
            defaults are used for codes missing from it.

    Raises:
        UnknownCurrencyError: the code isn't in the table.
    """
    if not is_currency(code):
        raise UnknownCurrencyError(
            f"Currency '{code}' is not supported",
            {"currency": code},
        )
    key = code.strip().upper()
    if overrides and key in overrides:
        return overrides[key]
    logger.debug("Using default names for currency %s", key)
    return CURRENCIES[key]


def is_currency(code: str) -> bool:
    """True when ``code`` (any case, surrounding spaces ignored) is in the table."""
    return code.strip().upper() in CURRENCIES


def describe_currencies() -> dict[str, str]:
    """Code -> human-readable description, for listings."""
    return {code: description for code, (description, _, _) in _TABLE.items()}
