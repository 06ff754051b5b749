"""
Numeric input normalization.

Turns whatever the caller handed us (int, Decimal, float, numeric string)
into a ``NumericValue``: sign, integer magnitude and significant fraction
digits. Range and precision are checked here, once, so nothing downstream
has to.

Precision policy: trailing fractional zeros are not significant
(``1.00`` is ``1``), but any remaining digit beyond ``max_fraction_digits``
is an error. We never round or truncate.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Union

from .exceptions import InvalidNumberError, OutOfRangeError, UnsupportedPrecisionError
from .models import NumericValue

Number = Union[int, float, Decimal, str]

# Longest value echoed verbatim in error messages and details.
DESCRIBE_LIMIT = 40


def to_decimal(number: Number) -> Decimal:
    """Convert supported inputs to a Decimal without losing digits.

    Raises:
        InvalidNumberError: for non-numeric strings, NaN or unsupported types.
    """
    if isinstance(number, bool):
        raise InvalidNumberError(f"Not a number: {number!r}")
    if isinstance(number, Decimal):
        value = number
    elif isinstance(number, int):
        value = Decimal(number)
    elif isinstance(number, float):
        value = Decimal(repr(number))
    elif isinstance(number, str):
        cleaned = number.strip().replace("_", "")
        try:
            value = Decimal(cleaned)
        except InvalidOperation:
            raise InvalidNumberError(
                f"Cannot parse number: {number!r}", {"input": number}
            ) from None
    else:
        raise InvalidNumberError(
            f"Unsupported number type: {type(number).__name__}",
            {"input": repr(number)},
        )

    if value.is_nan():
        raise InvalidNumberError(f"Not a number: {number!r}", {"input": str(number)})
    return value


def describe(number: Number) -> str:
    """Short printable form of any input, for error messages and logs.

    ``str()`` of an int beyond 4300 digits raises, so ints go through Decimal.
    """
    if isinstance(number, int) and not isinstance(number, bool):
        number = Decimal(number)
    text = str(number)
    if len(text) <= DESCRIBE_LIMIT:
        return text
    if isinstance(number, Decimal):
        return f"{number:.6E}"
    return text[: DESCRIBE_LIMIT - 3] + "..."


def _fraction_digits(value: Decimal) -> int:
    """Significant digits after the point, read from the digit tuple."""
    _, digits, exponent = value.as_tuple()
    trailing = len(digits) - len("".join(map(str, digits)).rstrip("0"))
    return max(0, -(exponent + trailing))


def normalize(
    number: Number, max_magnitude: int, max_fraction_digits: int = 0
) -> NumericValue:
    """Validate and decompose a number into a ``NumericValue``.

    Range and precision are checked on the Decimal itself, before any digit
    string is built, so ``"1e999999999"`` or ``10**5000`` fail fast.

    Args:
        number: The raw input.
        max_magnitude: Largest integer part the caller can render (inclusive).
        max_fraction_digits: Significant fraction digits allowed
            (0 = integers only, 2 = currency cents).

    Raises:
        InvalidNumberError: input isn't a finite number.
        OutOfRangeError: integer part exceeds ``max_magnitude`` (either sign).
        UnsupportedPrecisionError: too many significant fraction digits.
    """
    value = to_decimal(number)

    if value.is_infinite():
        raise OutOfRangeError(
            f"Cannot convert {value} (infinite)", {"input": str(value)}
        )

    if not value:
        # 0, -0, 0E+9, 0E-9 all read as plain zero
        return NumericValue(negative=False, integer_part=0)

    # copy_abs() is exact; abs() would round to the context precision.
    magnitude = value.copy_abs()
    if magnitude >= max_magnitude + 1:
        raise OutOfRangeError(
            f"{describe(value)} exceeds the supported magnitude ({max_magnitude})",
            {"input": describe(value), "max_magnitude": str(max_magnitude)},
        )

    fraction_digits = _fraction_digits(value)
    if fraction_digits > max_fraction_digits:
        raise UnsupportedPrecisionError(
            f"{describe(value)} has {fraction_digits} fractional digit(s); "
            f"at most {max_fraction_digits} allowed",
            {
                "input": describe(value),
                "fraction_digits": fraction_digits,
                "max_fraction_digits": max_fraction_digits,
            },
        )

    # Both bounds hold, so the fixed-point text is short.
    whole, _, fraction = format(magnitude, "f").partition(".")
    fraction = fraction.rstrip("0")
    integer_part = int(whole)

    negative = value.is_signed()
    return NumericValue(negative=negative, integer_part=integer_part, fraction=fraction)
