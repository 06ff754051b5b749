"""
Custom exception hierarchy for number-to-words conversion.

Each exception type maps to exactly one error kind, so callers can branch on
the type or on the machine-readable ``code`` (see ``models.ErrorKind``).
"""

from __future__ import annotations


class NumeralError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidNumberError(NumeralError):
    """The input cannot be read as a finite number."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_NUMBER", message, details)


class OutOfRangeError(NumeralError):
    """The magnitude exceeds what the language can name."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("OUT_OF_RANGE", message, details)


class UnsupportedPrecisionError(NumeralError):
    """More fractional digits than the output mode allows."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_PRECISION", message, details)


class UnsupportedOrdinalError(NumeralError):
    """The language cannot express this number as an ordinal."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_ORDINAL", message, details)


class UnknownLanguageError(NumeralError):
    """No grammar engine is registered for the language code."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNKNOWN_LANGUAGE", message, details)


class UnknownCurrencyError(NumeralError):
    """No currency definition is registered for the code."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNKNOWN_CURRENCY", message, details)
