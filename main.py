#!/usr/bin/env python3
"""
Spoken Numerals — Command Line
==============================

Usage:
    spoken-numerals 42                        # forty-two
    spoken-numerals 42 --to ordinal           # forty-second
    spoken-numerals 1901 --to year            # nineteen oh-one
    spoken-numerals 42.01 --to EUR            # forty-two euros and one cent
    spoken-numerals 21 --lang fr --prefer feminine
    spoken-numerals --help
"""

from __future__ import annotations

import argparse
import logging
import sys

from spoken_numerals import __version__
from spoken_numerals.config import get_settings
from spoken_numerals.currency import describe_currencies
from spoken_numerals.exceptions import NumeralError
from spoken_numerals.languages import available_languages
from spoken_numerals.models import ConversionRequest, ErrorKind, OutputMode
from spoken_numerals.pipeline import NumberSpeller, parse_target

# ─── Exit Codes ──────────────────────────────────────────────────────

EXIT_CODES: dict[ErrorKind, int] = {
    ErrorKind.INVALID_NUMBER: 2,
    ErrorKind.OUT_OF_RANGE: 3,
    ErrorKind.UNSUPPORTED_PRECISION: 4,
    ErrorKind.UNSUPPORTED_ORDINAL: 5,
    ErrorKind.UNKNOWN_LANGUAGE: 6,
    ErrorKind.UNKNOWN_CURRENCY: 7,
}

_OUTPUT_EXAMPLES = {
    OutputMode.CARDINAL: "forty-two (42)",
    OutputMode.ORDINAL: "forty-second (42)",
    OutputMode.ORDINAL_NUMERAL: "42nd (42)",
    OutputMode.YEAR: "nineteen oh-one (1901)",
    OutputMode.CURRENCY: "forty-two dollars and one cent (42.01)",
}


def _epilog() -> str:
    lines = ["available languages:", "  " + ", ".join(available_languages()), ""]
    lines.append("available outputs:")
    lines += [f"  {mode.value:<14} {example}" for mode, example in _OUTPUT_EXAMPLES.items()]
    lines += ["", "available currencies:"]
    lines += [f"  {code:<8} {name}" for code, name in describe_currencies().items()]
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spoken-numerals",
        description="Convert numbers into words.",
        epilog=_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("number", help="integer or decimal, e.g. 42, -7, 42.01")
    parser.add_argument("-l", "--lang", default=None, help="language code (default: en)")
    parser.add_argument(
        "-t", "--to", default=OutputMode.CARDINAL.value,
        help="output mode, or a currency code for currency mode (default: cardinal)",
    )
    parser.add_argument(
        "-p", "--prefer", action="append", default=[], metavar="PREFERENCE",
        help="language preference, repeatable (e.g. feminine, reformed, nil, f)",
    )
    parser.add_argument("--verbose", action="store_true", help="debug logging on stderr")
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, print the words, return the exit code."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    mode, currency = parse_target(args.to)
    request = ConversionRequest(
        number=args.number,
        lang=args.lang or settings.default_lang,
        mode=mode,
        currency=currency,
        preferences=tuple(args.prefer),
    )

    speller = NumberSpeller(settings)
    try:
        words = speller.to_words(request)
    except NumeralError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_CODES[ErrorKind(exc.code)]

    print(words)
    return 0


if __name__ == "__main__":
    sys.exit(main())
