"""
Phrase assembly: word tokens -> final string.

Tokens carry their own joining hint, so this layer knows nothing about any
language. Empty tokens (e.g. from suppressed zero groups) are dropped.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import Token


def assemble(tokens: Iterable[Token], hyphenate_all: bool = False) -> str:
    """Join tokens with "-" or " " according to each token's hint.

    Args:
        tokens: Words in reading order.
        hyphenate_all: Join every word with a hyphen (French 1990 spelling).
    """
    parts: list[str] = []
    for token in tokens:
        text = token.text.strip()
        if not text:
            continue
        if parts:
            parts.append("-" if token.hyphen or hyphenate_all else " ")
        parts.append(text)
    return "".join(parts)


def words(*texts: str) -> list[Token]:
    """Space-joined tokens, e.g. ``words("two", "thousand")``."""
    return [Token(t) for t in texts]
