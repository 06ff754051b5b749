"""
Ukrainian grammar engine.

Source: Ukrainian Orthography 2019, §38 (compound numerals) and §105–106.

Every numeral is declined through the six cases (називний, родовий,
давальний, знахідний, орудний, місцевий). In a cardinal every word takes the
requested case; in an ordinal only the last word does. The counted noun
(scale word, currency unit, "ціла") agrees with the last two digits:

    1 (not 11)        -> singular, same case         одна тисяча, одній тисячі
    2–4 (not 12–14)   -> plural, same case           дві тисячі,  двом тисячам
    everything else   -> plural; genitive when the   пʼять тисяч, пʼяти тисячам
                         numeral is nominative or
                         accusative

"тисяча" is feminine, larger scale words are masculine, and the last group
agrees with whatever noun is being counted (the gender preference, or the
currency unit). Accusative forms are the inanimate ones (equal to the
nominative), since numbers here count things.

Preferences (the last matching one wins within each group):

    gender   m / ч / чол / чоловічий, f / ж / жін / жіночий, n / с / сер / середній
    case     nom / н / називний, gen / р / родовий, dat / д / давальний,
             acc / з / знахідний, ins / о / орудний, loc / м / місцевий
    number   sing / од / однина, pl / мн / множина (ordinals and years only)
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

from ..decomposer import decompose
from ..models import CurrencyDefinition, Gender, Token
from .base import Language

M, F, N = Gender.MASCULINE, Gender.FEMININE, Gender.NEUTER


class Case(IntEnum):
    """Grammatical case; the value indexes every six-form table below."""

    NOMINATIVE = 0
    GENITIVE = 1
    DATIVE = 2
    ACCUSATIVE = 3
    INSTRUMENTAL = 4
    LOCATIVE = 5


class GrammaticalNumber(IntEnum):
    SINGULAR = 0
    PLURAL = 1


NOM, GEN, DAT, ACC, INS, LOC = Case
SINGULAR, PLURAL = GrammaticalNumber

# One row per grammatical number, six case forms per row.
Forms = tuple[tuple[str, ...], tuple[str, ...]]

# ─── Cardinal Tables ─────────────────────────────────────────────────

ZERO: tuple[str, ...] = ("нуль", "нуля", "нулю", "нуль", "нулем", "нулі")

GENDERED: dict[int, dict[Gender, tuple[str, ...]]] = {
    1: {
        M: ("один", "одного", "одному", "один", "одним", "одному"),
        F: ("одна", "одної", "одній", "одну", "одною", "одній"),
        N: ("одне", "одного", "одному", "одне", "одним", "одному"),
    },
    2: {
        M: ("два", "двох", "двом", "два", "двома", "двох"),
        F: ("дві", "двох", "двом", "дві", "двома", "двох"),
        N: ("два", "двох", "двом", "два", "двома", "двох"),
    },
}

UNITS: tuple[tuple[str, ...], ...] = (
    (), (), (),
    ("три", "трьох", "трьом", "три", "трьома", "трьох"),
    ("чотири", "чотирьох", "чотирьом", "чотири", "чотирма", "чотирьох"),
    ("пʼять", "пʼяти", "пʼяти", "пʼять", "пʼятьма", "пʼяти"),
    ("шість", "шести", "шести", "шість", "шістьма", "шести"),
    ("сім", "семи", "семи", "сім", "сімома", "семи"),
    ("вісім", "восьми", "восьми", "вісім", "вісьма", "восьми"),
    ("девʼять", "девʼяти", "девʼяти", "девʼять", "девʼятьма", "девʼяти"),
)

TEEN_BASES: tuple[str, ...] = (
    "десят", "одинадцят", "дванадцят", "тринадцят", "чотирнадцят",
    "пʼятнадцят", "шістнадцят", "сімнадцят", "вісімнадцят", "девʼятнадцят",
)
TEEN_FLEXIONS: tuple[str, ...] = ("ь", "и", "и", "ь", "ьма", "и")

TENS: tuple[tuple[str, ...], ...] = (
    (), (),
    ("двадцять", "двадцяти", "двадцяти", "двадцять", "двадцятьма", "двадцяти"),
    ("тридцять", "тридцяти", "тридцяти", "тридцять", "тридцятьма", "тридцяти"),
    ("сорок", "сорока", "сорока", "сорок", "сорока", "сорока"),
    ("пʼятдесят", "пʼятдесяти", "пʼятдесяти", "пʼятдесят", "пʼятдесятьма", "пʼятдесяти"),
    ("шістдесят", "шістдесяти", "шістдесяти", "шістдесят", "шістдесятьма", "шістдесяти"),
    ("сімдесят", "сімдесяти", "сімдесяти", "сімдесят", "сімдесятьма", "сімдесяти"),
    ("вісімдесят", "вісімдесяти", "вісімдесяти", "вісімдесят", "вісімдесятьма", "вісімдесяти"),
    ("девʼяносто", "девʼяноста", "девʼяноста", "девʼяносто", "девʼяноста", "девʼяноста"),
)

HUNDREDS: tuple[tuple[str, ...], ...] = (
    (),
    ("сто", "ста", "ста", "сто", "ста", "ста"),
    ("двісті", "двохсот", "двомстам", "двісті", "двомастами", "двохстах"),
    ("триста", "трьохсот", "трьомстам", "триста", "трьомастами", "трьохстах"),
    ("чотириста", "чотирьохсот", "чотирьомстам", "чотириста", "чотирмастами", "чотирьохстах"),
    ("пʼятсот", "пʼятисот", "пʼятистам", "пʼятсот", "пʼятьмастами", "пʼятистах"),
    ("шістсот", "шестисот", "шестистам", "шістсот", "шістьмастами", "шестистах"),
    ("сімсот", "семисот", "семистам", "сімсот", "сімомастами", "семистах"),
    ("вісімсот", "восьмисот", "восьмистам", "вісімсот", "восьмистами", "восьмистах"),
    ("девʼятсот", "девʼятисот", "девʼятистам", "девʼятсот", "девʼятьмастами", "девʼятистах"),
)

# Scale names by the "n-1" rule; index i names 1000^(i+1)
MEGA_BASES: tuple[str, ...] = (
    "тисяч",
    "мільйон",
    "мільярд",
    "трильйон",
    "квадрильйон",
    "квінтильйон",
    "секстильйон",
    "септильйон",
    "октильйон",
    "нонильйон",
    "децильйон",
    "ундецильйон",
    "додецильйон",
    "тредецильйон",
    "кваттуордецильйон",
    "квіндецильйон",
    "седецильйон",
    "септдецильйон",
    "дуодевігінтильйон",
    "ундевігінтильйон",
    "вігінтильйон",
)

THOUSAND_FLEXIONS: Forms = (
    ("а", "і", "і", "у", "ею", "і"),
    ("і", "", "ам", "і", "ами", "ах"),
)
MEGA_FLEXIONS: Forms = (
    ("", "а", "у", "", "ом", "і"),
    ("и", "ів", "ам", "и", "ами", "ах"),
)

# ─── Ordinal Tables ──────────────────────────────────────────────────

ORDINAL_ZERO_BASE = "нульов"

ORDINAL_UNIT_BASES: tuple[str, ...] = (
    "", "перш", "друг", "трет", "четверт", "пʼят", "шост", "сьом", "восьм", "девʼят",
)

ORDINAL_TENS_BASES: tuple[str, ...] = (
    "", "десят", "двадцят", "тридцят", "сороков", "пʼятдесят",
    "шістдесят", "сімдесят", "вісімдесят", "девʼяност",
)

ORDINAL_HUNDRED_BASES: tuple[str, ...] = (
    "", "сот", "двохсот", "трьохсот", "чотирьохсот", "пʼятисот",
    "шестисот", "семисот", "восьмисот", "девʼятисот",
)

# Genitive stems fused in front of a scale: двохтисячний, стотисячний
FUSED_UNITS: tuple[str, ...] = (
    "", "одно", "двох", "трьох", "чотирьох", "пʼяти", "шести", "семи", "восьми", "девʼяти",
)
FUSED_TENS: tuple[str, ...] = (
    "", "", "двадцяти", "тридцяти", "сорока", "пʼятдесяти",
    "шістдесяти", "сімдесяти", "вісімдесяти", "девʼяносто",
)
FUSED_HUNDREDS: tuple[str, ...] = (
    "", "сто", "двохсот", "трьохсот", "чотирьохсот", "пʼятисот",
    "шестисот", "семисот", "восьмисот", "девʼятисот",
)

ADJECTIVE_HARD: dict[Gender, tuple[str, ...]] = {
    M: ("ий", "ого", "ому", "ий", "им", "ому"),
    F: ("а", "ої", "ій", "у", "ою", "ій"),
    N: ("е", "ого", "ому", "е", "им", "ому"),
}
ADJECTIVE_HARD_PLURAL: tuple[str, ...] = ("і", "их", "им", "і", "ими", "их")

# третій is the only soft ordinal
ADJECTIVE_SOFT: dict[Gender, tuple[str, ...]] = {
    M: ("ій", "ього", "ьому", "ій", "ім", "ьому"),
    F: ("я", "ьої", "ій", "ю", "ьою", "ій"),
    N: ("є", "ього", "ьому", "є", "ім", "ьому"),
}
ADJECTIVE_SOFT_PLURAL: tuple[str, ...] = ("і", "іх", "ім", "і", "іми", "іх")

# Suffixes after digits: 1-й, 3-я, 23-ою, 1000-м
SHORT_HARD: dict[Gender, tuple[str, ...]] = {
    M: ("й", "го", "му", "й", "м", "му"),
    F: ("а", "ї", "й", "у", "ою", "й"),
    N: ("е", "го", "му", "е", "м", "му"),
}
SHORT_SOFT: dict[Gender, tuple[str, ...]] = {
    M: ("й", "го", "му", "й", "м", "му"),
    F: ("я", "ї", "й", "ю", "ою", "й"),
    N: ("є", "го", "му", "є", "м", "му"),
}
SHORT_PLURAL: tuple[str, ...] = ("і", "х", "м", "і", "ми", "х")

# ─── Fractions & Years ───────────────────────────────────────────────

# Denominator stems by number of fractional digits: десята, сота, тисячна...
DENOMINATOR_STEMS: tuple[str, ...] = (
    "", "десят", "сот", "тисячн", "десятитисячн", "стотисячн", "мільйонн",
)
WHOLE_STEM = "ціл"

YEAR: Forms = (
    ("рік", "року", "року", "рік", "роком", "році"),
    ("роки", "років", "рокам", "роки", "роками", "роках"),
)

# ─── Preferences ─────────────────────────────────────────────────────

GENDER_PREFERENCES: dict[str, Gender] = {
    **dict.fromkeys(("m", "masculine", "ч", "чол", "чоловічий"), M),
    **dict.fromkeys(("f", "feminine", "ж", "жін", "жіночий"), F),
    **dict.fromkeys(("n", "neuter", "с", "сер", "середній"), N),
}

CASE_PREFERENCES: dict[str, Case] = {
    **dict.fromkeys(("nom", "nominative", "н", "називний"), NOM),
    **dict.fromkeys(("gen", "genitive", "р", "родовий"), GEN),
    **dict.fromkeys(("dat", "dative", "д", "давальний"), DAT),
    **dict.fromkeys(("acc", "accusative", "з", "знахідний"), ACC),
    **dict.fromkeys(("ins", "instrumental", "о", "орудний"), INS),
    **dict.fromkeys(("loc", "locative", "м", "місцевий"), LOC),
}

NUMBER_PREFERENCES: dict[str, GrammaticalNumber] = {
    **dict.fromkeys(("sing", "singular", "од", "однина"), SINGULAR),
    **dict.fromkeys(("pl", "plural", "мн", "множина"), PLURAL),
}


def plural_form(count: int) -> str:
    """Agreement class of ``count``: "one", "few" or "many"."""
    tail = count % 100
    units = tail % 10
    if 11 <= tail <= 19:
        return "many"
    if units == 1:
        return "one"
    if 2 <= units <= 4:
        return "few"
    return "many"


def agreement(count: int, case: Case) -> tuple[GrammaticalNumber, Case]:
    """Number and case of a noun counted by ``count`` in ``case``.

    >>> agreement(5, Case.NOMINATIVE)
    (<GrammaticalNumber.PLURAL: 1>, <Case.GENITIVE: 1>)
    """
    form = plural_form(count)
    if form == "one":
        return SINGULAR, case
    if form == "few":
        return PLURAL, case
    return PLURAL, GEN if case in (NOM, ACC) else case


# ─── Currency Names ──────────────────────────────────────────────────

HARD_MASCULINE: Forms = (("", "а", "у", "", "ом", "і"), ("и", "ів", "ам", "и", "ами", "ах"))
SOFT_MASCULINE: Forms = (("ь", "я", "ю", "ь", "ем", "і"), ("і", "ів", "ям", "і", "ями", "ях"))
MIXED_MASCULINE: Forms = (("", "а", "у", "", "ем", "і"), ("і", "ів", "ам", "і", "ами", "ах"))
HARD_FEMININE: Forms = (("а", "и", "і", "у", "ою", "і"), ("и", "", "ам", "и", "ами", "ах"))
SOFT_FEMININE: Forms = (("я", "ї", "ї", "ю", "єю", "ї"), ("ї", "й", "ям", "ї", "ями", "ях"))
ADJECTIVE_MASCULINE: Forms = (ADJECTIVE_HARD[M], ADJECTIVE_HARD_PLURAL)


def _declined(stem: str, flexions: Forms) -> Forms:
    singular, plural = flexions
    return tuple(stem + f for f in singular), tuple(stem + f for f in plural)


def _invariant(word: str) -> Forms:
    return (word,) * 6, (word,) * 6


def _phrase(adjective: Forms, noun: Forms) -> Forms:
    """Adjective + noun declined together: новий шекель, нових шекелів."""
    singular, plural = (
        tuple(f"{a} {n}" for a, n in zip(adjective[i], noun[i])) for i in (SINGULAR, PLURAL)
    )
    return singular, plural


DOLLAR = _declined("долар", HARD_MASCULINE)
CENT = _declined("цент", HARD_MASCULINE)
PESO = _invariant("песо")
CENTAVO = _invariant("сентаво")
DINAR = _declined("динар", HARD_MASCULINE)
FILS = _declined("філс", HARD_MASCULINE)
RIAL = _declined("ріал", HARD_MASCULINE)
SEN = _declined("сен", HARD_MASCULINE)
RUPEE = _declined("рупі", SOFT_FEMININE)
HRYVNIA: Forms = (
    ("гривня", "гривні", "гривні", "гривню", "гривнею", "гривні"),
    ("гривні", "гривень", "гривням", "гривні", "гривнями", "гривнях"),
)
KOPIYKA: Forms = (
    ("копійка", "копійки", "копійці", "копійку", "копійкою", "копійці"),
    ("копійки", "копійок", "копійкам", "копійки", "копійками", "копійках"),
)

# code -> (major forms, minor forms, major gender, minor gender)
UNIT_FORMS: dict[str, tuple[Forms, Forms, Gender, Gender]] = {
    "AED": (_declined("дирхам", HARD_MASCULINE), FILS, M, M),
    "ARS": (PESO, CENTAVO, N, N),
    "AUD": (DOLLAR, CENT, M, M),
    "BRL": (_declined("реал", HARD_MASCULINE), CENTAVO, M, N),
    "CAD": (DOLLAR, CENT, M, M),
    "CHF": (_declined("франк", HARD_MASCULINE), _declined("сантим", HARD_MASCULINE), M, M),
    "CLP": (PESO, CENTAVO, N, N),
    "CNY": (_declined("юан", SOFT_MASCULINE), _declined("фен", SOFT_MASCULINE), M, M),
    "COP": (PESO, CENTAVO, N, N),
    "CRC": (_declined("колон", HARD_MASCULINE), _invariant("сантимо"), M, N),
    "DINAR": (DINAR, FILS, M, M),
    "DOLLAR": (DOLLAR, CENT, M, M),
    "DZD": (DINAR, FILS, M, M),
    "EUR": (_invariant("євро"), _declined("євроцент", HARD_MASCULINE), N, M),
    "GBP": (_declined("фунт", HARD_MASCULINE), _declined("пенс", HARD_MASCULINE), M, M),
    "HKD": (DOLLAR, CENT, M, M),
    "IDR": (RUPEE, SEN, F, M),
    "ILS": (
        _phrase(_declined("нов", ADJECTIVE_MASCULINE), _declined("шекел", SOFT_MASCULINE)),
        _declined("агор", HARD_FEMININE),
        M,
        F,
    ),
    "INR": (RUPEE, _declined("пайс", HARD_MASCULINE), F, M),
    "JPY": (_declined("єн", HARD_FEMININE), SEN, F, M),
    "KRW": (_declined("вон", HARD_FEMININE), _declined("чон", HARD_MASCULINE), F, M),
    "KWD": (DINAR, FILS, M, M),
    "KZT": (_invariant("теньге"), _declined("тиїн", HARD_MASCULINE), N, M),
    "MXN": (PESO, CENTAVO, N, N),
    "MYR": (_declined("рингіт", HARD_MASCULINE), SEN, M, M),
    "NOK": (_declined("крон", HARD_FEMININE), _invariant("оре"), F, N),
    "NZD": (DOLLAR, CENT, M, M),
    "PEN": (_declined("сол", SOFT_MASCULINE), _invariant("сентімо"), M, N),
    "PESO": (PESO, CENTAVO, N, N),
    "PHP": (PESO, CENTAVO, N, N),
    "PLN": (_declined("злот", ADJECTIVE_MASCULINE), _declined("грош", MIXED_MASCULINE), M, M),
    "QAR": (RIAL, FILS, M, M),
    "RIYAL": (RIAL, FILS, M, M),
    "RUB": (_declined("рубл", SOFT_MASCULINE), KOPIYKA, M, F),
    "SAR": (RIAL, FILS, M, M),
    "SGD": (DOLLAR, CENT, M, M),
    "THB": (_declined("бат", HARD_MASCULINE), _declined("сатанг", HARD_MASCULINE), M, M),
    "TRY": (_declined("лір", HARD_FEMININE), _declined("куруш", MIXED_MASCULINE), F, M),
    "TWD": (DOLLAR, CENT, M, M),
    "UAH": (HRYVNIA, KOPIYKA, F, F),
    "USD": (DOLLAR, CENT, M, M),
    "UYU": (PESO, CENTAVO, N, N),
    "VND": (_declined("донг", HARD_MASCULINE), _invariant("су"), M, N),
    "ZAR": (_declined("ранд", HARD_MASCULINE), CENT, M, M),
}


def _definition(
    code: str, major: Forms, minor: Forms, major_gender: Gender, minor_gender: Gender
) -> CurrencyDefinition:
    """Nominative singular, nominative plural and genitive plural as a ``CurrencyDefinition``."""
    return CurrencyDefinition(
        code=code,
        major=major[SINGULAR][NOM],
        major_paucal=major[PLURAL][NOM],
        major_plural=major[PLURAL][GEN],
        minor=minor[SINGULAR][NOM],
        minor_paucal=minor[PLURAL][NOM],
        minor_plural=minor[PLURAL][GEN],
        major_gender=major_gender,
        minor_gender=minor_gender,
    )


CURRENCIES: dict[str, CurrencyDefinition] = {
    code: _definition(code, *forms) for code, forms in UNIT_FORMS.items()
}


# ─── Engine ──────────────────────────────────────────────────────────


class Ukrainian(Language):
    code = "uk"
    name = "Ukrainian"

    zero_word = ZERO[NOM]
    minus_word = "мінус"
    point_word = "кома"
    digit_words = ("нуль", "один", "два") + tuple(forms[NOM] for forms in UNITS[3:])
    currency_conjunction = ""
    era_suffix = "до н.е."
    currency_names = CURRENCIES

    max_magnitude = 1000 ** (len(MEGA_BASES) + 1) - 1
    # Every scale has a fused ordinal stem (…тисячний … вігінтильйонний).
    max_ordinal = max_magnitude
    max_fraction_digits = len(DENOMINATOR_STEMS) - 1

    year_as_ordinal = True
    year_noun = YEAR[SINGULAR][NOM]
    year_noun_gender = M

    def __init__(
        self,
        preferences=(),
        gender: Optional[Gender] = None,
        case: Optional[Case] = None,
        grammatical_number: Optional[GrammaticalNumber] = None,
    ):
        super().__init__(preferences)
        self.gender = self.preferred(GENDER_PREFERENCES, M) if gender is None else gender
        self.case = self.preferred(CASE_PREFERENCES, NOM) if case is None else case
        if grammatical_number is None:
            grammatical_number = self.preferred(NUMBER_PREFERENCES, SINGULAR)
        self.grammatical_number = grammatical_number

    def _inflected(self, gender: Optional[Gender] = None, case: Optional[Case] = None) -> Ukrainian:
        return Ukrainian(
            self.preferences,
            gender=self.gender if gender is None else gender,
            case=self.case if case is None else case,
            grammatical_number=self.grammatical_number,
        )

    def agreeing_with(self, gender: Gender) -> Language:
        return self._inflected(gender=gender)

    # ─── Cardinal ───────────────────────────────────────────────────

    def _group_gender(self, magnitude_index: int) -> Gender:
        if magnitude_index == 0:
            return self.gender
        return F if magnitude_index == 1 else M

    def render_group(self, digits: int, magnitude_index: int, is_leading: bool) -> list[Token]:
        case = self.case
        if digits == 0:
            return [Token(ZERO[case])] if is_leading and magnitude_index == 0 else []

        gender = self._group_gender(magnitude_index)
        hundreds, rest = divmod(digits, 100)
        tokens: list[Token] = []
        if hundreds:
            tokens.append(Token(HUNDREDS[hundreds][case]))
        if 10 <= rest <= 19:
            tokens.append(Token(TEEN_BASES[rest - 10] + TEEN_FLEXIONS[case]))
        elif rest:
            tens, units = divmod(rest, 10)
            if tens:
                tokens.append(Token(TENS[tens][case]))
            if units in GENDERED:
                tokens.append(Token(GENDERED[units][gender][case]))
            elif units:
                tokens.append(Token(UNITS[units][case]))
        return tokens

    def magnitude_name(self, magnitude_index: int, group_value: int) -> Optional[Token]:
        if magnitude_index == 0:
            return None
        number, case = agreement(group_value, self.case)
        flexions = THOUSAND_FLEXIONS if magnitude_index == 1 else MEGA_FLEXIONS
        return Token(MEGA_BASES[magnitude_index - 1] + flexions[number][case])

    # ─── Ordinal ────────────────────────────────────────────────────

    def _flexion(self, last_digits: int) -> str:
        soft = last_digits % 10 == 3 and last_digits % 100 != 13
        if self.grammatical_number is PLURAL:
            return (ADJECTIVE_SOFT_PLURAL if soft else ADJECTIVE_HARD_PLURAL)[self.case]
        return (ADJECTIVE_SOFT if soft else ADJECTIVE_HARD)[self.gender][self.case]

    def ordinalize(self, tokens: list[Token], magnitude: int) -> list[Token]:
        """Only the last non-zero group changes; everything before stays nominative cardinal.

        A round number fuses its last group with the scale word:
        123 456 000 -> сто двадцять три мільйони чотирьохсотпʼятдесятишеститисячний
        """
        self.check_ordinal(magnitude)
        if magnitude == 0:
            return [Token(ORDINAL_ZERO_BASE + self._flexion(0))]

        groups = decompose(magnitude)
        last = next(g for g in groups if g.digits)
        higher = [g for g in groups if g.magnitude_index > last.magnitude_index and g.digits]

        cardinal = self._inflected(case=NOM)
        result: list[Token] = []
        for group in reversed(higher):
            result += cardinal.render_group(group.digits, group.magnitude_index, False)
            result.append(cardinal.magnitude_name(group.magnitude_index, group.digits))

        if last.magnitude_index == 0:
            return result + self._ordinal_group(last.digits)

        prefix = "" if last.digits == 1 and not higher else _fused_stem(last.digits)
        stem = prefix + MEGA_BASES[last.magnitude_index - 1] + "н"
        return result + [Token(stem + self._flexion(0))]

    def _ordinal_group(self, digits: int) -> list[Token]:
        hundreds, rest = divmod(digits, 100)
        if rest == 0:
            return [Token(ORDINAL_HUNDRED_BASES[hundreds] + self._flexion(0))]

        tokens = [Token(HUNDREDS[hundreds][NOM])] if hundreds else []
        tens, units = divmod(rest, 10)
        if tens == 1:
            tokens.append(Token(TEEN_BASES[units] + self._flexion(rest)))
        elif units == 0:
            tokens.append(Token(ORDINAL_TENS_BASES[tens] + self._flexion(0)))
        else:
            if tens:
                tokens.append(Token(TENS[tens][NOM]))
            tokens.append(Token(ORDINAL_UNIT_BASES[units] + self._flexion(units)))
        return tokens

    def ordinal_numeral(self, magnitude: int) -> str:
        if self.grammatical_number is PLURAL:
            flexion = SHORT_PLURAL[self.case]
        else:
            soft = magnitude % 10 == 3 and magnitude % 100 != 13
            flexion = (SHORT_SOFT if soft else SHORT_HARD)[self.gender][self.case]
        return f"{magnitude}-{flexion}"

    # ─── Decimals, Years & Currency ─────────────────────────────────

    def decimal_tokens(self, integer_part: int, fraction: str) -> list[Token]:
        """1.1 -> одна ціла одна десята; 2.05 -> дві цілі пʼять сотих.

        Both numerals are feminine (they count "частина"); "ціла" and the
        denominator agree with the numeral in front of them.
        """
        feminine = self.agreeing_with(F)
        numerator = int(fraction)
        tokens = feminine.cardinal_tokens(integer_part)
        tokens.append(Token(WHOLE_STEM + _counted_adjective(integer_part, self.case)))
        tokens += feminine.cardinal_tokens(numerator)
        denominator = DENOMINATOR_STEMS[len(fraction)]
        tokens.append(Token(denominator + _counted_adjective(numerator, self.case)))
        return tokens

    def year_word(self) -> str:
        return YEAR[self.grammatical_number][self.case]

    def unit_name(self, definition: CurrencyDefinition, count: int, minor: bool) -> str:
        number, case = agreement(count, self.case)
        major_forms, minor_forms, _, _ = UNIT_FORMS[definition.code]
        return (minor_forms if minor else major_forms)[number][case]


def _counted_adjective(count: int, case: Case) -> str:
    """Feminine adjective ending after ``count``: ціла, цілі, цілих."""
    number, case = agreement(count, case)
    if number is PLURAL:
        return ADJECTIVE_HARD_PLURAL[case]
    return ADJECTIVE_HARD[F][case]


def _fused_stem(digits: int) -> str:
    """Genitive prefix of a group fused into an ordinal: 456 -> чотирьохсотпʼятдесятишести."""
    hundreds, rest = divmod(digits, 100)
    stem = FUSED_HUNDREDS[hundreds]
    if 10 <= rest <= 19:
        return stem + TEEN_BASES[rest - 10] + "и"
    tens, units = divmod(rest, 10)
    return stem + FUSED_TENS[tens] + FUSED_UNITS[units]
