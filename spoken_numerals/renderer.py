"""
Mode renderer: one assembly path per output mode.

    cardinal         [minus] numeral
    ordinal          ordinalized numeral
    ordinal_numeral  digits + suffix
    year             split / cardinal / ordinal + noun, [era suffix]
    currency         [minus] major-count major-unit [conj minor-count minor-unit]

Every path normalizes the input with its own limits first, so a number that
doesn't fit the mode fails before any word is produced. Engine errors
propagate unchanged; there is no fallback to another mode or language.
"""

from __future__ import annotations

from typing import Optional, Union

from .assembler import assemble, words
from .currency import lookup_currency
from .exceptions import UnsupportedOrdinalError
from .languages import Language
from .models import NumericValue, OutputMode, Token
from .normalizer import Number, describe, normalize

DEFAULT_CURRENCY = "DOLLAR"
CURRENCY_FRACTION_DIGITS = 2

Segment = Union[str, list[Token]]


def _join(lang: Language, *segments: Segment) -> str:
    """Assemble numeral segments in the language's style, then space-join all."""
    parts = []
    for segment in segments:
        text = segment if isinstance(segment, str) else assemble(segment, lang.hyphenate_all)
        if text:
            parts.append(text)
    return " ".join(parts)


def _minus(lang: Language, value: NumericValue) -> str:
    return lang.minus_word if value.negative else ""


# ─── Cardinal ────────────────────────────────────────────────────────


def render_cardinal(number: Number, lang: Language) -> str:
    value = normalize(number, lang.max_magnitude, lang.max_fraction_digits)
    if value.has_fraction:
        numeral = lang.decimal_tokens(value.integer_part, value.fraction)
    else:
        numeral = lang.cardinal_tokens(value.integer_part)
    return _join(lang, _minus(lang, value), numeral)


# ─── Ordinal ─────────────────────────────────────────────────────────


def _ordinal_value(number: Number, lang: Language) -> NumericValue:
    value = normalize(number, lang.max_magnitude)
    if value.negative:
        raise UnsupportedOrdinalError(
            f"Negative numbers have no ordinal form: {describe(number)}",
            {"lang": lang.code, "input": describe(number)},
        )
    lang.check_ordinal(value.integer_part)
    return value


def render_ordinal(number: Number, lang: Language) -> str:
    value = _ordinal_value(number, lang)
    n = value.integer_part
    return _join(lang, lang.ordinalize(lang.cardinal_tokens(n), n))


def render_ordinal_numeral(number: Number, lang: Language) -> str:
    value = _ordinal_value(number, lang)
    return lang.ordinal_numeral(value.integer_part)


# ─── Year ────────────────────────────────────────────────────────────


def render_year(number: Number, lang: Language) -> str:
    value = normalize(number, lang.max_magnitude)
    n = value.integer_part
    era = lang.era_suffix if value.negative else ""

    if lang.year_as_ordinal:
        agreeing = lang.agreeing_with(lang.year_noun_gender)
        ordinal = agreeing.ordinalize(agreeing.cardinal_tokens(n), n)
        return _join(lang, ordinal, agreeing.year_word(), era)

    if lang.year_range is None or not lang.year_range[0] <= n <= lang.year_range[1]:
        return _join(lang, lang.cardinal_tokens(n), era)

    high, low = divmod(n, 100)
    if high % 10 == 0 and low < 10:
        # 2000 -> two thousand, 2001 -> two thousand and one
        if not low:
            return _join(lang, lang.cardinal_tokens(n), era)
        return _join(
            lang,
            lang.cardinal_tokens(high * 100),
            lang.year_conjunction,
            lang.cardinal_tokens(low),
            era,
        )

    head = lang.cardinal_tokens(high)
    if low == 0:
        tail = words(lang.year_round_word)  # nineteen hundred
    elif low < 10:
        tail = [Token(lang.year_zero_filler)] + [
            Token(t.text, hyphen=True) if i == 0 else t
            for i, t in enumerate(lang.cardinal_tokens(low))
        ]  # nineteen oh-one
    else:
        tail = lang.cardinal_tokens(low)
    return _join(lang, head + tail, era)


# ─── Currency ────────────────────────────────────────────────────────


def render_currency(number: Number, lang: Language, currency: Optional[str] = None) -> str:
    code = DEFAULT_CURRENCY if currency is None else currency
    definition = lookup_currency(code, lang.currency_names)
    value = normalize(number, lang.max_magnitude, CURRENCY_FRACTION_DIGITS)
    major, minor = value.integer_part, value.minor_units

    segments: list[Segment] = [_minus(lang, value)]
    if major or not minor:
        major_lang = lang.agreeing_with(definition.major_gender)
        segments += [
            major_lang.cardinal_tokens(major),
            lang.unit_name(definition, major, minor=False),
        ]
    if minor:
        if major:
            segments.append(lang.currency_conjunction)
        minor_lang = lang.agreeing_with(definition.minor_gender)
        segments += [
            minor_lang.cardinal_tokens(minor),
            lang.unit_name(definition, minor, minor=True),
        ]
    return _join(lang, *segments)


# ─── Dispatch ────────────────────────────────────────────────────────


def render(
    number: Number, lang: Language, mode: OutputMode, currency: Optional[str] = None
) -> str:
    """Render ``number`` in ``mode``; ``currency`` is only read in currency mode."""
    if mode is OutputMode.CARDINAL:
        return render_cardinal(number, lang)
    if mode is OutputMode.ORDINAL:
        return render_ordinal(number, lang)
    if mode is OutputMode.ORDINAL_NUMERAL:
        return render_ordinal_numeral(number, lang)
    if mode is OutputMode.YEAR:
        return render_year(number, lang)
    return render_currency(number, lang, currency)
