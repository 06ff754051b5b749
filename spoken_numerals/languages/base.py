"""
The contract every grammar engine implements.

A language is a bundle of immutable tables plus four operations:

    render_group(digits, magnitude_index, is_leading)  -> tokens for 0–999
    magnitude_name(magnitude_index, group_value)        -> "thousand", "millions", ...
    ordinalize(cardinal_tokens, magnitude)              -> "forty-two" -> "forty-second"
    ordinal_numeral(magnitude)                          -> "42nd"

Concrete languages subclass ``Language`` directly (one level, no chains) and
are looked up by code in ``languages.__init__``. Instances are never mutated;
``agreeing_with`` returns a new instance instead.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import ClassVar, Optional, TypeVar

from ..decomposer import decompose
from ..exceptions import UnsupportedOrdinalError
from ..models import CurrencyDefinition, Gender, Token

T = TypeVar("T")


class Language(ABC):
    """Base class for per-language grammar engines."""

    code: ClassVar[str]
    name: ClassVar[str]

    # ─── Lexical tables (overridden per language) ───────────────────
    zero_word: ClassVar[str]
    minus_word: ClassVar[str]
    point_word: ClassVar[str]
    digit_words: ClassVar[tuple[str, ...]]  # 0–9, for reading decimals
    currency_conjunction: ClassVar[str] = ""
    era_suffix: ClassVar[str] = ""
    currency_names: ClassVar[Mapping[str, CurrencyDefinition]] = MappingProxyType({})

    # ─── Ceilings (inclusive) ───────────────────────────────────────
    max_magnitude: ClassVar[int]
    max_ordinal: ClassVar[int]
    max_fraction_digits: ClassVar[int] = 10

    # ─── Year reading ───────────────────────────────────────────────
    year_range: ClassVar[Optional[tuple[int, int]]] = None  # split "19|01" inside
    year_zero_filler: ClassVar[str] = ""  # "oh" in "nineteen oh-one"
    year_round_word: ClassVar[str] = ""  # "hundred" in "nineteen hundred"
    year_conjunction: ClassVar[str] = ""  # "and" in "two thousand and one"
    year_as_ordinal: ClassVar[bool] = False
    year_noun: ClassVar[str] = ""
    year_noun_gender: ClassVar[Gender] = Gender.MASCULINE

    def __init__(self, preferences: Iterable[str] = ()):
        # Order matters: when two preferences conflict, the later one wins.
        self.preferences: tuple[str, ...] = tuple(p.strip().lower() for p in preferences)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r})"

    def preferred(self, choices: Mapping[str, T], default: T) -> T:
        """Value of the last preference found in ``choices``, else ``default``."""
        for preference in reversed(self.preferences):
            if preference in choices:
                return choices[preference]
        return default

    # ─── The contract ───────────────────────────────────────────────

    @abstractmethod
    def render_group(self, digits: int, magnitude_index: int, is_leading: bool) -> list[Token]:
        """Words for one group of 0–999 (without its scale name).

        A zero group renders as the zero word only when it is the whole number
        (``is_leading`` and index 0); otherwise it contributes nothing.
        """

    @abstractmethod
    def magnitude_name(self, magnitude_index: int, group_value: int) -> Optional[Token]:
        """Scale word agreeing with ``group_value``; ``None`` for index 0."""

    @abstractmethod
    def ordinalize(self, tokens: list[Token], magnitude: int) -> list[Token]:
        """Turn cardinal tokens for ``magnitude`` into ordinal tokens."""

    @abstractmethod
    def ordinal_numeral(self, magnitude: int) -> str:
        """Digits plus ordinal suffix, e.g. ``42nd``."""

    # ─── Shared composition ─────────────────────────────────────────

    def cardinal_tokens(self, magnitude: int) -> list[Token]:
        """Render a non-negative integer, most significant group first."""
        groups = decompose(magnitude)
        tokens: list[Token] = []
        for group in reversed(groups):
            if group.digits == 0 and len(groups) > 1:
                continue
            is_leading = group.magnitude_index == len(groups) - 1
            tokens.extend(self.render_group(group.digits, group.magnitude_index, is_leading))
            scale = self.magnitude_name(group.magnitude_index, group.digits)
            if scale is not None:
                tokens.append(scale)
        return tokens

    def decimal_tokens(self, integer_part: int, fraction: str) -> list[Token]:
        """Default decimal reading: integer, point word, then digit by digit."""
        tokens = self.cardinal_tokens(integer_part)
        tokens.append(Token(self.point_word))
        tokens.extend(Token(self.digit_words[int(d)]) for d in fraction)
        return tokens

    def check_ordinal(self, magnitude: int) -> None:
        if magnitude > self.max_ordinal:
            raise UnsupportedOrdinalError(
                f"{self.name} ordinals are defined up to {self.max_ordinal}",
                {"lang": self.code, "magnitude": str(magnitude), "max_ordinal": str(self.max_ordinal)},
            )

    def agreeing_with(self, gender: Gender) -> Language:
        """Engine whose numerals agree with a noun of ``gender``."""
        return self

    def year_word(self) -> str:
        """Noun read after an ordinal year (``year_as_ordinal`` languages)."""
        return self.year_noun

    def unit_name(self, definition: CurrencyDefinition, count: int, minor: bool) -> str:
        """Currency unit name for ``count`` units: singular for 1, plural otherwise."""
        if minor:
            return definition.minor if count == 1 else definition.minor_plural
        return definition.major if count == 1 else definition.major_plural

    @property
    def hyphenate_all(self) -> bool:
        return False
