"""
French grammar engine (France, Belgium, Switzerland).

Rules worth knowing before editing the tables:

  - 70–99 are vigesimal in France (soixante-dix, quatre-vingts,
    quatre-vingt-dix); Belgium says septante/nonante, Switzerland also
    huitante.
  - "et" joins 1 (and 11 in soixante et onze) to the tens word: vingt et un,
    but quatre-vingt-un.
  - "cent" and "quatre-vingt" take an "s" when multiplied and nothing
    follows them, except before "mille" (an adjective): deux cents,
    deux cent mille, deux cents millions.
  - "mille" is invariant and never preceded by "un"; million, milliard...
    are nouns and pluralize.
  - 1990 reformed spelling hyphenates every word of the numeral.
"""

from __future__ import annotations

from typing import Optional

from ..assembler import words
from ..models import CurrencyDefinition, Gender, Token
from .base import Language

# ─── Word Tables ─────────────────────────────────────────────────────

UNITS: tuple[str, ...] = (
    "zéro", "un", "deux", "trois", "quatre", "cinq", "six", "sept", "huit", "neuf",
    "dix", "onze", "douze", "treize", "quatorze", "quinze", "seize",
    "dix-sept", "dix-huit", "dix-neuf",
)

# None marks a vigesimal decade built from the previous one plus 10–19.
TENS_BY_REGION: dict[str, tuple[Optional[str], ...]] = {
    "FR": (None, None, "vingt", "trente", "quarante", "cinquante", "soixante",
           None, "quatre-vingt", None),
    "BE": (None, None, "vingt", "trente", "quarante", "cinquante", "soixante",
           "septante", "quatre-vingt", "nonante"),
    "CH": (None, None, "vingt", "trente", "quarante", "cinquante", "soixante",
           "septante", "huitante", "nonante"),
}

# Index i names 1000^(i+1)
MEGAS: tuple[str, ...] = (
    "mille",
    "million",
    "milliard",
    "billion",
    "billiard",
    "trillion",
    "trilliard",
    "quadrillion",
    "quadrilliard",
    "quintillion",
    "quintilliard",
    "sextillion",
    "sextilliard",
    "septillion",
    "septilliard",
    "octillion",
    "octilliard",
    "nonillion",
    "nonilliard",
    "décillion",
    "décilliard",
    "unodécillion",
    "unodécilliard",
    "duodécillion",
    "duodécilliard",
    "trédécillion",
    "trédécilliard",
    "quattuordécillion",
    "quattuordécilliard",
    "quindécillion",
    "quindécilliard",
    "sexdécillion",
    "sexdécilliard",
)

ORDINAL_IRREGULARS: dict[str, str] = {
    "un": "unième",
    "une": "unième",
    "cinq": "cinquième",
    "neuf": "neuvième",
}

# Words whose trailing "s" is plural agreement, dropped in ordinals.
_PLURALIZABLE: frozenset[str] = frozenset({"cent", "vingt", *MEGAS[1:]})

FEMININE_PREFERENCES: frozenset[str] = frozenset({"feminine", "feminin", "féminin", "f"})
REFORMED_PREFERENCES: frozenset[str] = frozenset({"reformed", "1990", "rectifié", "rectification"})


# ─── Currency Names ──────────────────────────────────────────────────


def _currency(
    code: str,
    major: str,
    major_plural: str,
    minor: str = "centime",
    minor_plural: str = "centimes",
    major_gender: Gender = Gender.MASCULINE,
) -> CurrencyDefinition:
    return CurrencyDefinition(
        code=code,
        major=major,
        major_plural=major_plural,
        minor=minor,
        minor_plural=minor_plural,
        major_gender=major_gender,
    )


_F = Gender.FEMININE

CURRENCIES: dict[str, CurrencyDefinition] = {
    c.code: c
    for c in (
        _currency("AED", "dirham", "dirhams", "fils", "fils"),
        _currency("ARS", "peso argentin", "pesos argentins", "centavo", "centavos"),
        _currency("AUD", "dollar australien", "dollars australiens"),
        _currency("BRL", "réal", "réaux", "centavo", "centavos"),
        _currency("CAD", "dollar canadien", "dollars canadiens"),
        _currency("CHF", "franc", "francs"),
        _currency("CLP", "peso chilien", "pesos chiliens", "centavo", "centavos"),
        _currency("CNY", "yuan", "yuans"),
        _currency("COP", "peso colombien", "pesos colombiens", "centavo", "centavos"),
        _currency("CRC", "colón", "colones", "céntimo", "céntimos"),
        _currency("DINAR", "dinar", "dinars"),
        _currency("DOLLAR", "dollar", "dollars"),
        _currency("DZD", "dinar algérien", "dinars algériens"),
        _currency("EUR", "euro", "euros"),
        _currency("GBP", "livre", "livres", major_gender=_F),
        _currency("HKD", "dollar de Hong Kong", "dollars de Hong Kong"),
        _currency("IDR", "roupie indonésienne", "roupies indonésiennes", "sen", "sen", _F),
        _currency("ILS", "shekel", "shekels"),
        _currency("INR", "roupie", "roupies", major_gender=_F),
        _currency("JPY", "yen", "yens"),
        _currency("KRW", "won", "wons", "jeon", "jeon"),
        _currency("KWD", "dinar koweïtien", "dinars koweïtiens", "fils", "fils"),
        _currency("KZT", "tenge", "tenges"),
        _currency("MXN", "peso mexicain", "pesos mexicains", "centavo", "centavos"),
        _currency("MYR", "ringgit", "ringgits", "sen", "sen"),
        _currency("NOK", "couronne norvégienne", "couronnes norvégiennes", major_gender=_F),
        _currency("NZD", "dollar néo-zélandais", "dollars néo-zélandais"),
        _currency("PEN", "sol", "soles"),
        _currency("PESO", "peso", "pesos"),
        _currency("PHP", "peso philippin", "pesos philippins"),
        _currency("PLN", "złoty", "złotys"),
        _currency("QAR", "riyal qatarien", "riyals qatariens"),
        _currency("RIYAL", "riyal", "riyals"),
        _currency("RUB", "rouble", "roubles"),
        _currency("SAR", "riyal saoudien", "riyals saoudiens", "halala", "halalas"),
        _currency("SGD", "dollar de Singapour", "dollars de Singapour"),
        _currency("THB", "baht", "bahts", "satang", "satang"),
        _currency("TRY", "livre turque", "livres turques", major_gender=_F),
        _currency("TWD", "dollar de Taïwan", "dollars de Taïwan"),
        _currency("UAH", "hryvnia", "hryvnias", "kopeck", "kopecks", _F),
        _currency("USD", "dollar américain", "dollars américains"),
        _currency("UYU", "peso uruguayen", "pesos uruguayens", "centésimo", "centésimos"),
        _currency("VND", "dong", "dongs", "xu", "xu"),
        _currency("ZAR", "rand", "rands"),
    )
}


# ─── Engine ──────────────────────────────────────────────────────────


class French(Language):
    code = "fr"
    name = "French"

    zero_word = "zéro"
    minus_word = "moins"
    point_word = "virgule"
    digit_words = UNITS[:10]
    currency_conjunction = "et"
    era_suffix = "avant JC"
    currency_names = CURRENCIES

    max_magnitude = 1000 ** (len(MEGAS) + 1) - 1
    max_ordinal = max_magnitude

    def __init__(self, preferences=(), region: str = "FR", feminine: Optional[bool] = None):
        super().__init__(preferences)
        if region not in TENS_BY_REGION:
            raise ValueError(f"Unknown French region: {region!r}")
        self.region = region
        self.code = "fr" if region == "FR" else f"fr_{region}"
        self.tens = TENS_BY_REGION[region]
        self.feminine = (
            not FEMININE_PREFERENCES.isdisjoint(self.preferences) if feminine is None else feminine
        )
        self.reformed = not REFORMED_PREFERENCES.isdisjoint(self.preferences)

    @property
    def hyphenate_all(self) -> bool:
        return self.reformed

    def agreeing_with(self, gender: Gender) -> Language:
        return French(self.preferences, self.region, feminine=gender is Gender.FEMININE)

    # ─── Cardinal ───────────────────────────────────────────────────

    def render_group(self, digits: int, magnitude_index: int, is_leading: bool) -> list[Token]:
        if digits == 0:
            return [Token(self.zero_word)] if is_leading and magnitude_index == 0 else []
        if digits == 1 and magnitude_index == 1:
            return []  # "mille", never "un mille"

        # Nothing numeric follows this group except before "mille".
        plural_ok = magnitude_index != 1
        feminine_one = self.feminine and magnitude_index == 0

        hundreds, rest = divmod(digits, 100)
        tokens: list[Token] = []
        if hundreds:
            if hundreds > 1:
                tokens.append(Token(UNITS[hundreds]))
            tokens.append(Token("cents" if hundreds > 1 and rest == 0 and plural_ok else "cent"))
        if rest:
            tokens += self._tens(rest, plural_ok, feminine_one)
        return tokens

    def _tens(self, value: int, plural_ok: bool, feminine_one: bool) -> list[Token]:
        if value < 20:
            word = "une" if value == 1 and feminine_one else UNITS[value]
            return _split(word)

        tens, units = divmod(value, 10)
        base = self.tens[tens]
        if base is None:
            # soixante-dix, quatre-vingt-douze: previous decade + 10–19
            base = self.tens[tens - 1]
            rest = 10 + units
            if rest == 11 and base == "soixante":
                return _split(base) + [Token("et")] + _split(UNITS[rest])
            return _split(base) + _split(UNITS[rest], hyphen=True)

        if units == 0:
            if base == "quatre-vingt" and plural_ok:
                return _split("quatre-vingts")
            return _split(base)

        unit = "une" if units == 1 and feminine_one else UNITS[units]
        if units == 1 and base != "quatre-vingt":
            return _split(base) + words("et", unit)
        return _split(base) + [Token(unit, hyphen=True)]

    def magnitude_name(self, magnitude_index: int, group_value: int) -> Optional[Token]:
        if magnitude_index == 0:
            return None
        word = MEGAS[magnitude_index - 1]
        if magnitude_index > 1 and group_value > 1:
            word += "s"
        return Token(word)

    # ─── Ordinal ────────────────────────────────────────────────────

    def ordinalize(self, tokens: list[Token], magnitude: int) -> list[Token]:
        self.check_ordinal(magnitude)
        if magnitude == 1:
            return [Token("première" if self.feminine else "premier")]
        last = tokens[-1]
        return tokens[:-1] + [Token(_ordinal_word(last.text), last.hyphen)]

    def ordinal_numeral(self, magnitude: int) -> str:
        if magnitude == 1:
            return "1re" if self.feminine else "1er"
        return f"{magnitude}ème"

    # ─── Currency ───────────────────────────────────────────────────

    def unit_name(self, definition: CurrencyDefinition, count: int, minor: bool) -> str:
        name = super().unit_name(definition, count, minor)
        # "un million de dollars", "deux milliards d'euros"
        if not minor and count >= 10**6 and count % 10**6 == 0:
            return ("d'" if name[0] in "aeiouyéh" else "de ") + name
        return name


def _split(text: str, hyphen: bool = False) -> list[Token]:
    """"quatre-vingt-dix" -> quatre, -vingt, -dix (first token keeps ``hyphen``)."""
    parts = text.split("-")
    return [Token(parts[0], hyphen)] + [Token(p, True) for p in parts[1:]]


def _ordinal_word(word: str) -> str:
    if word in ORDINAL_IRREGULARS:
        return ORDINAL_IRREGULARS[word]
    if word.endswith("s") and word[:-1] in _PLURALIZABLE:
        word = word[:-1]
    if word.endswith("e"):
        word = word[:-1]
    return word + "ième"
