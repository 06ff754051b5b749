"""
English grammar engine.

    42            -> forty-two
    1_000_000     -> one million
    38123147081932 -> thirty-eight trillion one hundred twenty-three billion ...

No "and" inside cardinals (American usage); "and" only joins currency units
and X00Y years ("two thousand and one").
"""

from __future__ import annotations

from typing import Optional

from ..assembler import words
from ..models import Token
from .base import Language

# ─── Word Tables ─────────────────────────────────────────────────────

ONES: tuple[str, ...] = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)

TENS: tuple[str, ...] = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety",
)

# Index i names 1000^(i+1)
MEGAS: tuple[str, ...] = (
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
    "decillion",
    "undecillion",
    "duodecillion",
    "tredecillion",
    "quattuordecillion",
)

ORDINAL_IRREGULARS: dict[str, str] = {
    "one": "first",
    "two": "second",
    "three": "third",
    "five": "fifth",
    "eight": "eighth",
    "nine": "ninth",
    "twelve": "twelfth",
}

ORDINAL_SUFFIXES: dict[int, str] = {1: "st", 2: "nd", 3: "rd"}

ZERO_PREFERENCES: dict[str, str] = {"nil": "nil", "oh": "oh"}


class English(Language):
    code = "en"
    name = "English"

    zero_word = "zero"
    minus_word = "minus"
    point_word = "point"
    digit_words = ONES[:10]
    currency_conjunction = "and"
    era_suffix = "BC"

    max_magnitude = 1000 ** (len(MEGAS) + 1) - 1
    max_ordinal = max_magnitude

    year_range = (1000, 9999)
    year_zero_filler = "oh"
    year_round_word = "hundred"
    year_conjunction = "and"

    def __init__(self, preferences=()):
        super().__init__(preferences)
        # "oh" / "nil" replace "zero" (sports scores, phone-style reading)
        self.zero_word = self.preferred(ZERO_PREFERENCES, self.zero_word)
        self.digit_words = (self.zero_word,) + ONES[1:10]

    def render_group(self, digits: int, magnitude_index: int, is_leading: bool) -> list[Token]:
        if digits == 0:
            return [Token(self.zero_word)] if is_leading and magnitude_index == 0 else []

        hundreds, rest = divmod(digits, 100)
        tokens: list[Token] = []
        if hundreds:
            tokens += words(ONES[hundreds], "hundred")
        if rest:
            tokens += self._tens(rest)
        return tokens

    def _tens(self, value: int) -> list[Token]:
        if value < 20:
            return [Token(ONES[value])]
        tens, units = divmod(value, 10)
        tokens = [Token(TENS[tens])]
        if units:
            tokens.append(Token(ONES[units], hyphen=True))
        return tokens

    def magnitude_name(self, magnitude_index: int, group_value: int) -> Optional[Token]:
        if magnitude_index == 0:
            return None
        return Token(MEGAS[magnitude_index - 1])

    def ordinalize(self, tokens: list[Token], magnitude: int) -> list[Token]:
        self.check_ordinal(magnitude)
        last = tokens[-1]
        return tokens[:-1] + [Token(_ordinal_word(last.text), last.hyphen)]

    def ordinal_numeral(self, magnitude: int) -> str:
        if magnitude % 100 in (11, 12, 13):
            return f"{magnitude}th"
        return f"{magnitude}{ORDINAL_SUFFIXES.get(magnitude % 10, 'th')}"


def _ordinal_word(word: str) -> str:
    if word in ORDINAL_IRREGULARS:
        return ORDINAL_IRREGULARS[word]
    if word.endswith("y"):
        return word[:-1] + "ieth"
    return word + "th"
