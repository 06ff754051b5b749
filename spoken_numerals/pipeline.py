"""
Conversion pipeline: request in, words (or a typed error) out.

Flow:
  ┌──────────────────┐
  │ ConversionRequest│
  └────────┬─────────┘
           │
  ┌────────▼─────────┐
  │ Language lookup  │   ← code + preferences -> grammar engine
  └────────┬─────────┘
           │
  ┌────────▼─────────┐
  │ Mode renderer    │   ← normalize, decompose, render, assemble
  └────────┬─────────┘
           │
  ┌────────▼─────────┐
  │ ConversionResult │   ← text, or error code + message
  └──────────────────┘

``convert`` never raises for conversion failures; ``to_words`` and the
module-level ``num2words`` do.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional, Union

from .config import Settings, get_settings
from .exceptions import NumeralError
from .languages import lookup_language
from .models import ConversionRequest, ConversionResult, ErrorInfo, ErrorKind, OutputMode
from .normalizer import Number, describe
from .renderer import render

logger = logging.getLogger(__name__)


class NumberSpeller:
    """Converts numbers to words.

    Usage:
        speller = NumberSpeller()
        result = speller.convert(ConversionRequest(number=42, mode="ordinal"))
        if result.ok:
            print(result.text)  # forty-second
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def to_words(self, request: ConversionRequest) -> str:
        """Render the request, raising ``NumeralError`` on failure."""
        lang = lookup_language(request.lang, request.preferences)
        currency = request.currency
        if request.mode is OutputMode.CURRENCY and currency is None:
            currency = self.settings.default_currency
        logger.debug(
            "Converting %s (lang=%s, mode=%s, currency=%s)",
            describe(request.number), lang.code, request.mode.value, currency,
        )
        return render(request.number, lang, request.mode, currency)

    def convert(self, request: ConversionRequest) -> ConversionResult:
        """Render the request into a ``ConversionResult``.

        Args:
            request: The validated conversion request.

        Returns:
            ConversionResult with ``text`` on success, ``error`` otherwise.
        """
        try:
            text = self.to_words(request)
        except NumeralError as exc:
            logger.info("Conversion failed [%s]: %s", exc.code, exc)
            return ConversionResult(
                lang=request.lang,
                mode=request.mode,
                error=ErrorInfo(code=ErrorKind(exc.code), message=str(exc), details=exc.details),
            )
        return ConversionResult(lang=request.lang, mode=request.mode, text=text)


def parse_target(to: Union[str, OutputMode]) -> tuple[OutputMode, Optional[str]]:
    """Split a ``to=`` argument into (mode, currency).

    Anything that isn't an output mode is taken as a currency code, so
    ``"EUR"`` means currency mode in euros and ``"bogus"`` fails later as an
    unknown currency.
    """
    if isinstance(to, OutputMode):
        return to, None
    try:
        return OutputMode(to.strip().lower()), None
    except ValueError:
        return OutputMode.CURRENCY, to.strip()


def num2words(
    number: Number,
    lang: Optional[str] = None,
    to: Union[str, OutputMode] = OutputMode.CARDINAL,
    preferences: Iterable[str] = (),
) -> str:
    """One-shot conversion.

        >>> num2words(42)
        'forty-two'
        >>> num2words(42.01, to="DOLLAR")
        'forty-two dollars and one cent'

    Raises:
        NumeralError: any conversion failure (see ``exceptions``).
    """
    mode, currency = parse_target(to)
    settings = get_settings()
    request = ConversionRequest(
        number=number,
        lang=lang or settings.default_lang,
        mode=mode,
        currency=currency,
        preferences=tuple(preferences),
    )
    return NumberSpeller(settings).to_words(request)
