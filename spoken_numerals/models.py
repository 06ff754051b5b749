"""
Typed models for conversion requests, intermediate values and results.

Boundary objects (requests, results, currency definitions) are frozen
pydantic models: if a request doesn't fit, it fails at construction, not
halfway through rendering. Internal values that only flow between the
decomposer, the grammar engines and the assembler are plain frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ─── Enumerations ───────────────────────────────────────────────────


class OutputMode(str, Enum):
    """Which assembly path the renderer takes."""

    CARDINAL = "cardinal"  # forty-two
    ORDINAL = "ordinal"  # forty-second
    ORDINAL_NUMERAL = "ordinal_num"  # 42nd
    YEAR = "year"  # nineteen oh-one
    CURRENCY = "currency"  # forty-two dollars and one cent


class ErrorKind(str, Enum):
    """Machine-readable failure kinds; values match ``NumeralError.code``."""

    INVALID_NUMBER = "INVALID_NUMBER"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    UNSUPPORTED_PRECISION = "UNSUPPORTED_PRECISION"
    UNSUPPORTED_ORDINAL = "UNSUPPORTED_ORDINAL"
    UNKNOWN_LANGUAGE = "UNKNOWN_LANGUAGE"
    UNKNOWN_CURRENCY = "UNKNOWN_CURRENCY"


class Gender(str, Enum):
    """Grammatical gender a numeral agrees with."""

    MASCULINE = "m"
    FEMININE = "f"
    NEUTER = "n"


# ─── Intermediate Values ────────────────────────────────────────────


@dataclass(frozen=True)
class NumericValue:
    """A validated number split into sign, integer part and fraction digits.

    ``fraction`` holds the significant fractional digits as written
    (``"01"`` for 42.01, ``""`` for integers); trailing zeros are stripped by
    the normalizer.
    """

    negative: bool
    integer_part: int
    fraction: str = ""

    @property
    def has_fraction(self) -> bool:
        return bool(self.fraction)

    @property
    def is_zero(self) -> bool:
        return self.integer_part == 0 and not self.fraction

    @property
    def minor_units(self) -> int:
        """Fraction scaled to hundredths (cents); only meaningful for <= 2 digits."""
        return int(self.fraction.ljust(2, "0")[:2])


@dataclass(frozen=True)
class MagnitudeGroup:
    """Up to three digits tagged with their scale (0 = ones, 1 = thousands, ...)."""

    digits: int
    magnitude_index: int


@dataclass(frozen=True)
class Token:
    """A single word plus how it attaches to the word before it."""

    text: str
    hyphen: bool = False  # True: "forty" + "two" -> "forty-two"


# ─── Currency ───────────────────────────────────────────────────────


class CurrencyDefinition(BaseModel):
    """Unit names of one currency in one language.

    ``*_paucal`` is the "few" form used by Slavic languages after 2–4
    (``долари``); languages without it fall back to the plural.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    major: str
    major_plural: str
    minor: str
    minor_plural: str
    major_paucal: Optional[str] = None
    minor_paucal: Optional[str] = None
    major_gender: Gender = Gender.MASCULINE
    minor_gender: Gender = Gender.MASCULINE


# ─── Request / Result ───────────────────────────────────────────────


class ConversionRequest(BaseModel):
    """One conversion, fully configured up front.

    Defaults: English, cardinal, and (for currency mode only) the configured
    default currency. A currency combined with any other mode is rejected at
    construction.
    """

    model_config = ConfigDict(frozen=True)

    number: Union[int, Decimal, str]
    lang: str = "en"
    mode: OutputMode = OutputMode.CARDINAL
    currency: Optional[str] = None
    preferences: tuple[str, ...] = ()

    @field_validator("number", mode="before")
    @classmethod
    def _coerce_number(cls, value: object) -> object:
        if isinstance(value, bool):
            raise ValueError("booleans are not numbers")
        if isinstance(value, float):
            # repr() gives the shortest round-tripping literal: 42.01, not 42.0099999...
            return Decimal(repr(value))
        return value

    @model_validator(mode="after")
    def _check_currency_mode(self) -> ConversionRequest:
        if self.currency is not None and self.mode is not OutputMode.CURRENCY:
            raise ValueError(
                f"currency {self.currency!r} given with mode {self.mode.value!r}; "
                f"a currency is only valid with mode 'currency'"
            )
        return self


class ErrorInfo(BaseModel):
    """A failed conversion: machine-readable code plus human-readable message."""

    code: ErrorKind
    message: str
    details: dict = Field(default_factory=dict)


class ConversionResult(BaseModel):
    """Either the rendered words or the reason there are none."""

    lang: str
    mode: OutputMode
    text: Optional[str] = None
    error: Optional[ErrorInfo] = None

    @property
    def ok(self) -> bool:
        return self.error is None
