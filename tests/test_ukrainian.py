"""
Ukrainian conversions: gender, 1 / 2–4 / 5+ agreement, fused ordinals.

Run: pytest tests/ -v
"""

from __future__ import annotations

import pytest

from spoken_numerals import num2words
from spoken_numerals.exceptions import (
    OutOfRangeError,
    UnsupportedOrdinalError,
    UnsupportedPrecisionError,
)
from spoken_numerals.languages.uk import (
    CURRENCIES,
    UNIT_FORMS,
    Case,
    GrammaticalNumber,
    Ukrainian,
    agreement,
    plural_form,
)
from spoken_numerals.models import Gender


def uk(number, to="cardinal", **kwargs):
    return num2words(number, lang="uk", to=to, **kwargs)


class TestPluralForm:
    @pytest.mark.parametrize(
        "count, form",
        [(1, "one"), (21, "one"), (101, "one"), (2, "few"), (4, "few"), (34, "few"),
         (0, "many"), (5, "many"), (11, "many"), (12, "many"), (14, "many"),
         (111, "many"), (112, "many"), (1000, "many")],
    )
    def test_forms(self, count, form):
        assert plural_form(count) == form


# ═══════════════════════════════════════════════════════════════════════
# CARDINAL
# ═══════════════════════════════════════════════════════════════════════


class TestCardinal:
    @pytest.mark.parametrize(
        "number, expected",
        [
            (0, "нуль"),
            (1, "один"),
            (2, "два"),
            (5, "пʼять"),
            (11, "одинадцять"),
            (21, "двадцять один"),
            (40, "сорок"),
            (100, "сто"),
            (215, "двісті пʼятнадцять"),
            (1000, "одна тисяча"),
            (2000, "дві тисячі"),
            (5000, "пʼять тисяч"),
            (11_000, "одинадцять тисяч"),
            (21_000, "двадцять одна тисяча"),
            (1_000_000, "один мільйон"),
            (2_000_000, "два мільйони"),
            (5_000_000, "пʼять мільйонів"),
            (22_000_000, "двадцять два мільйони"),
            (1_000_001, "один мільйон один"),
        ],
    )
    def test_integers(self, number, expected):
        assert uk(number) == expected

    def test_negative(self):
        assert uk(-5) == "мінус пʼять"

    @pytest.mark.parametrize(
        "prefs, expected",
        [(["f"], "одна"), (["жін"], "одна"), (["n"], "одне"), (["середній"], "одне"), (["m"], "один")],
    )
    def test_gender_preferences(self, prefs, expected):
        assert uk(1, preferences=prefs) == expected

    def test_feminine_two(self):
        assert uk(2, preferences=["f"]) == "дві"
        assert uk(22, preferences=["f"]) == "двадцять дві"

    def test_ceiling(self):
        assert uk(10**66 - 1).split()[-1] == "девʼять"
        with pytest.raises(OutOfRangeError):
            uk(10**66)


class TestDecimals:
    @pytest.mark.parametrize(
        "number, expected",
        [
            ("1.1", "одна ціла одна десята"),
            ("2.05", "дві цілі пʼять сотих"),
            ("0.5", "нуль цілих пʼять десятих"),
            ("5.21", "пʼять цілих двадцять одна сота"),
            ("1.001", "одна ціла одна тисячна"),
        ],
    )
    def test_fractions(self, number, expected):
        assert uk(number) == expected

    def test_precision_limit(self):
        assert uk("0.000001") == "нуль цілих одна мільйонна"
        with pytest.raises(UnsupportedPrecisionError):
            uk("0.0000001")


# ═══════════════════════════════════════════════════════════════════════
# ORDINAL / ORDINAL NUMERAL
# ═══════════════════════════════════════════════════════════════════════


class TestOrdinal:
    @pytest.mark.parametrize(
        "number, expected",
        [
            (0, "нульовий"),
            (1, "перший"),
            (2, "другий"),
            (3, "третій"),
            (7, "сьомий"),
            (13, "тринадцятий"),
            (23, "двадцять третій"),
            (40, "сороковий"),
            (90, "девʼяностий"),
            (100, "сотий"),
            (101, "сто перший"),
            (200, "двохсотий"),
            (1000, "тисячний"),
            (2000, "двохтисячний"),
            (21_000, "двадцятиоднотисячний"),
            (100_000, "стотисячний"),
            (1_000_000, "мільйонний"),
            (1_002_000, "один мільйон двохтисячний"),
            (2023, "дві тисячі двадцять третій"),
        ],
    )
    def test_words(self, number, expected):
        assert uk(number, to="ordinal") == expected

    def test_feminine(self):
        assert uk(3, to="ordinal", preferences=["f"]) == "третя"
        assert uk(1, to="ordinal", preferences=["f"]) == "перша"

    def test_neuter(self):
        assert uk(3, to="ordinal", preferences=["n"]) == "третє"

    @pytest.mark.parametrize(
        "number, expected",
        [
            (10**12, "трильйонний"),
            (10**63, "вігінтильйонний"),
            (2 * 10**63, "двохвігінтильйонний"),
        ],
    )
    def test_every_scale_has_fused_ordinal(self, number, expected):
        assert uk(number, to="ordinal") == expected

    def test_ordinal_ceiling_matches_cardinal(self):
        assert uk(10**66 - 1, to="ordinal").endswith("девʼятсот девʼяносто девʼятий")
        with pytest.raises(OutOfRangeError) as exc_info:
            uk(10**66, to="ordinal")
        assert exc_info.value.details["max_magnitude"] == str(10**66 - 1)

    def test_numeral_shares_ordinal_ceiling(self):
        assert uk(10**66 - 1, to="ordinal_num") == f"{10**66 - 1}-й"
        with pytest.raises(OutOfRangeError):
            uk(10**66, to="ordinal_num")

    def test_negative_ordinal(self):
        with pytest.raises(UnsupportedOrdinalError):
            uk(-10_000, to="ordinal", preferences=["ж"])

    @pytest.mark.parametrize(
        "number, prefs, expected",
        [(23, [], "23-й"), (23, ["f"], "23-я"), (23, ["n"], "23-є"),
         (13, [], "13-й"), (13, ["f"], "13-а"), (2, ["f"], "2-а")],
    )
    def test_numerals(self, number, prefs, expected):
        assert uk(number, to="ordinal_num", preferences=prefs) == expected


# ═══════════════════════════════════════════════════════════════════════
# YEAR / CURRENCY
# ═══════════════════════════════════════════════════════════════════════


class TestYear:
    def test_year(self):
        assert uk(2023, to="year") == "дві тисячі двадцять третій рік"

    def test_round_year(self):
        assert uk(2000, to="year") == "двохтисячний рік"

    def test_year_is_masculine_regardless_of_preference(self):
        assert uk(2023, to="year", preferences=["f"]) == "дві тисячі двадцять третій рік"

    def test_before_common_era(self):
        assert uk(-44, to="year") == "сорок четвертий рік до н.е."


class TestCurrency:
    @pytest.mark.parametrize(
        "number, expected",
        [
            (1, "одна гривня"),
            (2, "дві гривні"),
            (5, "пʼять гривень"),
            (11, "одинадцять гривень"),
            (21, "двадцять одна гривня"),
            (1.01, "одна гривня одна копійка"),
            (0.02, "дві копійки"),
            (1_000_000, "один мільйон гривень"),
        ],
    )
    def test_hryvnia(self, number, expected):
        assert uk(number, to="UAH") == expected

    def test_dollars(self):
        assert uk(21.22, to="USD") == "двадцять один долар двадцять два центи"

    def test_neuter_invariant_unit(self):
        assert uk(1, to="EUR") == "одне євро"
        assert uk(5, to="EUR") == "пʼять євро"

    def test_negative_amount(self):
        assert uk(-2, to="UAH") == "мінус дві гривні"


# ═══════════════════════════════════════════════════════════════════════
# CASES / GRAMMATICAL NUMBER
# ═══════════════════════════════════════════════════════════════════════


class TestAgreement:
    @pytest.mark.parametrize(
        "count, case, expected",
        [
            (1, Case.NOMINATIVE, (GrammaticalNumber.SINGULAR, Case.NOMINATIVE)),
            (3, Case.NOMINATIVE, (GrammaticalNumber.PLURAL, Case.NOMINATIVE)),
            (5, Case.NOMINATIVE, (GrammaticalNumber.PLURAL, Case.GENITIVE)),
            (5, Case.ACCUSATIVE, (GrammaticalNumber.PLURAL, Case.GENITIVE)),
            (5, Case.DATIVE, (GrammaticalNumber.PLURAL, Case.DATIVE)),
            (12, Case.INSTRUMENTAL, (GrammaticalNumber.PLURAL, Case.INSTRUMENTAL)),
        ],
    )
    def test_noun_agreement(self, count, case, expected):
        assert agreement(count, case) == expected


class TestCardinalCases:
    @pytest.mark.parametrize(
        "number, prefs, expected",
        [
            (0, ["р"], "нуля"),
            (1, ["loc"], "одному"),
            (1, ["f", "ins"], "одною"),
            (2, ["f", "acc"], "дві"),
            (1, ["f", "acc"], "одну"),
            (5, ["gen"], "пʼяти"),
            (40, ["dat"], "сорока"),
            (15, ["ins"], "пʼятнадцятьма"),
            (200, ["loc"], "двохстах"),
            (1000, ["acc"], "одну тисячу"),
            (5000, ["acc"], "пʼять тисяч"),
            (5000, ["dat"], "пʼяти тисячам"),
            (2_000_000, ["ins"], "двома мільйонами"),
            (-1024, ["р"], "мінус одної тисячі двадцяти чотирьох"),
        ],
    )
    def test_declined(self, number, prefs, expected):
        assert uk(number, preferences=prefs) == expected

    def test_feminine_dative(self):
        assert uk(918654321, preferences=["f", "dat"]) == (
            "девʼятистам вісімнадцяти мільйонам шестистам пʼятдесяти "
            "чотирьом тисячам трьомстам двадцяти одній"
        )

    def test_masculine_instrumental(self):
        assert uk(918654321, preferences=["ч", "о"]) == (
            "девʼятьмастами вісімнадцятьма мільйонами шістьмастами пʼятдесятьма "
            "чотирма тисячами трьомастами двадцятьма одним"
        )

    @pytest.mark.parametrize(
        "number, prefs, expected",
        [
            ("1.1", ["орудний", "жіночий"], "одною цілою одною десятою"),
            ("-12.321", ["давальний", "множина"], "мінус дванадцяти цілим трьомстам двадцяти одній тисячній"),
            ("2.5", ["gen"], "двох цілих пʼяти десятих"),
            ("2.02", ["acc"], "дві цілі дві соті"),
        ],
    )
    def test_fractions_declined(self, number, prefs, expected):
        assert uk(number, preferences=prefs) == expected

    def test_plural_does_not_change_cardinals(self):
        assert uk(21, preferences=["pl"]) == "двадцять один"


class TestOrdinalCases:
    @pytest.mark.parametrize(
        "number, prefs, expected",
        [
            (0, ["р"], "нульового"),
            (1, ["loc"], "першому"),
            (1, ["f", "ins"], "першою"),
            (2, ["f", "acc"], "другу"),
            (3, ["gen"], "третього"),
            (3, ["f", "gen"], "третьої"),
            (1000, ["dat"], "тисячному"),
            (1, ["pl"], "перші"),
            (3, ["pl", "gen"], "третіх"),
            (20, ["множина", "орудний"], "двадцятими"),
        ],
    )
    def test_declined(self, number, prefs, expected):
        assert uk(number, to="ordinal", preferences=prefs) == expected

    def test_only_last_word_declines(self):
        assert uk(918654321, to="ordinal", preferences=["f", "dat"]) == (
            "девʼятсот вісімнадцять мільйонів шістсот пʼятдесят чотири тисячі "
            "триста двадцять першій"
        )
        assert uk(918654321, to="ordinal", preferences=["ч", "о"]).endswith(
            "триста двадцять першим"
        )

    @pytest.mark.parametrize(
        "number, prefs, expected",
        [
            (23, ["ж", "орудний"], "23-ою"),
            (1000, ["множина", "давальний"], "1000-м"),
            (13, ["множина", "давальний"], "13-м"),
            (321, ["жіночий"], "321-а"),
            (3, ["gen"], "3-го"),
            (2, ["pl"], "2-і"),
        ],
    )
    def test_numerals_declined(self, number, prefs, expected):
        assert uk(number, to="ordinal_num", preferences=prefs) == expected


class TestYearCases:
    @pytest.mark.parametrize(
        "prefs, expected",
        [
            (["loc"], "дві тисячі двадцять третьому році"),
            (["о"], "дві тисячі двадцять третім роком"),
            (["gen"], "дві тисячі двадцять третього року"),
            (["pl"], "дві тисячі двадцять треті роки"),
            (["pl", "gen"], "дві тисячі двадцять третіх років"),
        ],
    )
    def test_year_noun_follows_case_and_number(self, prefs, expected):
        assert uk(2023, to="year", preferences=prefs) == expected

    def test_round_year_genitive(self):
        assert uk(2000, to="year", preferences=["gen"]) == "двохтисячного року"

    def test_feminine_preference_ignored_in_any_case(self):
        assert uk(2023, to="year", preferences=["f", "loc"]) == "дві тисячі двадцять третьому році"


class TestCurrencyCases:
    @pytest.mark.parametrize(
        "number, code, prefs, expected",
        [
            (934.42, "UAH", ["орудний"], "девʼятьмастами тридцятьма чотирма гривнями сорока двома копійками"),
            (1, "UAH", ["acc"], "одну гривню"),
            (5, "UAH", ["acc"], "пʼять гривень"),
            (5, "UAH", ["dat"], "пʼяти гривням"),
            (1, "USD", ["loc"], "одному доларі"),
            (2, "USD", ["gen"], "двох доларів"),
            (21, "USD", ["ins"], "двадцятьма одним доларом"),
            (3, "ILS", ["dat"], "трьом новим шекелям"),
            (1, "PLN", ["gen"], "одного злотого"),
            (2, "EUR", ["ins"], "двома євро"),
            (1, "JPY", ["acc"], "одну єну"),
        ],
    )
    def test_unit_declined(self, number, code, prefs, expected):
        assert uk(number, to=code, preferences=prefs) == expected

    def test_shekels_and_agorot(self):
        assert uk(333.02, to="ILS") == "триста тридцять три нові шекелі дві агори"

    def test_thousand_dollars(self):
        assert uk(1000, to="DOLLAR") == "одна тисяча доларів"
        assert uk(0.01, to="DOLLAR") == "один цент"

    def test_nominative_names_match_listing(self):
        definition = CURRENCIES["UAH"]
        assert (definition.major, definition.major_paucal, definition.major_plural) == (
            "гривня", "гривні", "гривень",
        )
        assert set(UNIT_FORMS) == set(CURRENCIES)


class TestPreferenceOrder:
    @pytest.mark.parametrize(
        "prefs, expected",
        [
            (["f", "m"], "один"),
            (["m", "f"], "одна"),
            (["n", "жін", "середній"], "одне"),
        ],
    )
    def test_last_gender_wins(self, prefs, expected):
        assert uk(1, preferences=prefs) == expected

    def test_last_case_wins(self):
        assert uk(5, preferences=["gen", "dat"]) == "пʼяти"
        assert uk(1, preferences=["dat", "ins"]) == "одним"

    def test_last_number_wins(self):
        assert uk(1, to="ordinal", preferences=["pl", "sing"]) == "перший"
        assert uk(1, to="ordinal", preferences=["sing", "pl"]) == "перші"

    def test_groups_are_independent(self):
        assert uk(1, to="ordinal", preferences=["ins", "f", "dat"]) == "першій"

    def test_engine_keeps_preference_order(self):
        lang = Ukrainian(["F", " Dat "])
        assert lang.preferences == ("f", "dat")
        assert (lang.gender, lang.case) == (Gender.FEMININE, Case.DATIVE)
