"""
Tests for the language-independent layers: normalizer, decomposer, assembler.

Run: pytest tests/ -v
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from spoken_numerals.assembler import assemble, words
from spoken_numerals.decomposer import decompose, recompose
from spoken_numerals.exceptions import (
    InvalidNumberError,
    OutOfRangeError,
    UnsupportedPrecisionError,
)
from spoken_numerals.models import MagnitudeGroup, NumericValue, Token
from spoken_numerals.normalizer import describe, normalize, to_decimal


# ═══════════════════════════════════════════════════════════════════════
# NORMALIZER
# ═══════════════════════════════════════════════════════════════════════


class TestToDecimal:
    def test_int(self):
        assert to_decimal(42) == Decimal(42)

    def test_float_uses_shortest_repr(self):
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(42.01) == Decimal("42.01")

    def test_string_with_underscores_and_spaces(self):
        assert to_decimal("  1_000_000 ") == Decimal(1_000_000)

    def test_scientific_notation(self):
        assert to_decimal("1e3") == Decimal(1000)

    def test_garbage_string_rejected(self):
        with pytest.raises(InvalidNumberError):
            to_decimal("forty-two")

    def test_nan_rejected(self):
        with pytest.raises(InvalidNumberError):
            to_decimal("NaN")

    def test_bool_rejected(self):
        with pytest.raises(InvalidNumberError):
            to_decimal(True)

    def test_unsupported_type_rejected(self):
        with pytest.raises(InvalidNumberError):
            to_decimal(None)  # type: ignore[arg-type]


class TestNormalize:
    def test_positive_integer(self):
        assert normalize(42, 999) == NumericValue(False, 42, "")

    def test_negative_integer(self):
        assert normalize(-42, 999) == NumericValue(True, 42, "")

    def test_negative_zero_is_zero(self):
        value = normalize("-0", 999)
        assert value.negative is False
        assert value.is_zero

    def test_negative_zero_decimal_is_zero(self):
        assert normalize(Decimal("-0.00"), 999, 2).negative is False

    def test_fraction_digits_kept_as_written(self):
        value = normalize("42.01", 999, 2)
        assert value.fraction == "01"
        assert value.minor_units == 1

    def test_trailing_zeros_not_significant(self):
        value = normalize(Decimal("1.00"), 999)
        assert value == NumericValue(False, 1, "")
        assert not value.has_fraction

    def test_single_fraction_digit_scales_to_hundredths(self):
        assert normalize("0.2", 999, 2).minor_units == 20

    def test_exponent_is_expanded(self):
        assert normalize(Decimal("1.5E-1"), 999, 2).fraction == "15"
        assert normalize("2E+3", 9999).integer_part == 2000

    def test_ceiling_is_inclusive(self):
        assert normalize(999, 999).integer_part == 999

    def test_above_ceiling(self):
        with pytest.raises(OutOfRangeError):
            normalize(1000, 999)

    def test_below_negative_ceiling(self):
        with pytest.raises(OutOfRangeError):
            normalize(-1000, 999)

    def test_infinity_out_of_range(self):
        with pytest.raises(OutOfRangeError):
            normalize("inf", 999)

    def test_too_many_fraction_digits(self):
        with pytest.raises(UnsupportedPrecisionError) as exc_info:
            normalize("42.015", 999, 2)
        assert exc_info.value.code == "UNSUPPORTED_PRECISION"
        assert exc_info.value.details["fraction_digits"] == 3

    def test_integers_only_by_default(self):
        with pytest.raises(UnsupportedPrecisionError):
            normalize(1.5, 999)

    def test_huge_integer_is_exact(self):
        n = 10**40 + 7
        assert normalize(str(n), 10**48).integer_part == n

    def test_more_digits_than_context_precision(self):
        n = 10**30 + 1
        assert normalize(n, 10**48).integer_part == n

    @pytest.mark.parametrize("number", ["1e5000", 10**5000, -(10**5000), "1e999999999"])
    def test_far_above_ceiling(self, number):
        with pytest.raises(OutOfRangeError) as exc_info:
            normalize(number, 10**48 - 1)
        assert exc_info.value.code == "OUT_OF_RANGE"
        assert len(exc_info.value.details["input"]) <= 40

    def test_tiny_exponent_is_precision_error(self):
        with pytest.raises(UnsupportedPrecisionError) as exc_info:
            normalize("1e-999999999", 999, 10)
        assert exc_info.value.details["fraction_digits"] == 999999999

    @pytest.mark.parametrize("number", ["0E+999999999", "0E-999999999", "-0E-5"])
    def test_zero_with_any_exponent(self, number):
        assert normalize(number, 999) == NumericValue(False, 0, "")

    def test_fraction_just_below_next_integer(self):
        value = normalize("999.5", 999, 1)
        assert (value.integer_part, value.fraction) == (999, "5")
        with pytest.raises(OutOfRangeError):
            normalize("999.5", 998, 1)


class TestDescribe:
    def test_short_values_verbatim(self):
        assert describe(42) == "42"
        assert describe("1.50") == "1.50"

    def test_huge_int_uses_scientific_notation(self):
        assert describe(10**5000) == "1.000000E+5000"

    def test_long_string_is_cut(self):
        text = describe("9" * 100)
        assert len(text) == 40
        assert text.endswith("...")


# ═══════════════════════════════════════════════════════════════════════
# DECOMPOSER
# ═══════════════════════════════════════════════════════════════════════


class TestDecompose:
    def test_zero(self):
        assert decompose(0) == [MagnitudeGroup(0, 0)]

    def test_least_significant_first(self):
        assert decompose(1_234_567) == [
            MagnitudeGroup(567, 0),
            MagnitudeGroup(234, 1),
            MagnitudeGroup(1, 2),
        ]

    def test_interior_zero_groups_kept(self):
        assert decompose(1_000_001) == [
            MagnitudeGroup(1, 0),
            MagnitudeGroup(0, 1),
            MagnitudeGroup(1, 2),
        ]

    @pytest.mark.parametrize(
        "n", [0, 1, 999, 1000, 1001, 999_999, 1_000_000, 38123147081932, 10**48 - 1]
    )
    def test_recompose_round_trip(self, n):
        groups = decompose(n)
        assert recompose(groups) == n
        assert all(0 <= g.digits <= 999 for g in groups)
        assert [g.magnitude_index for g in groups] == list(range(len(groups)))

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            decompose(-1)


# ═══════════════════════════════════════════════════════════════════════
# ASSEMBLER
# ═══════════════════════════════════════════════════════════════════════


class TestAssemble:
    def test_space_join(self):
        assert assemble(words("one", "hundred")) == "one hundred"

    def test_hyphen_hint(self):
        assert assemble([Token("forty"), Token("two", hyphen=True)]) == "forty-two"

    def test_empty_tokens_dropped(self):
        tokens = [Token(""), Token("one"), Token("  "), Token("million")]
        assert assemble(tokens) == "one million"

    def test_leading_hyphen_never_emitted(self):
        assert assemble([Token("two", hyphen=True)]) == "two"

    def test_hyphenate_all(self):
        assert assemble(words("vingt", "et", "un"), hyphenate_all=True) == "vingt-et-un"

    def test_empty_input(self):
        assert assemble([]) == ""
