"""
Language registry.

Flat mapping of language code -> engine factory. Codes are matched after
normalization (``fr-be``, ``FR_be`` and ``fr_BE`` are the same key).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from functools import partial

from ..exceptions import UnknownLanguageError
from .base import Language
from .en import English
from .fr import French
from .uk import Ukrainian

logger = logging.getLogger(__name__)

LANGUAGES: dict[str, Callable[..., Language]] = {
    "en": English,
    "fr": French,
    "fr_BE": partial(French, region="BE"),
    "fr_CH": partial(French, region="CH"),
    "uk": Ukrainian,
}


def normalize_code(code: str) -> str:
    """``"FR-be"`` -> ``"fr_BE"``; language lowercased, region uppercased."""
    lang, _, region = code.strip().replace("-", "_").partition("_")
    return f"{lang.lower()}_{region.upper()}" if region else lang.lower()


def lookup_language(code: str, preferences: Iterable[str] = ()) -> Language:
    """Build the grammar engine for ``code``.

    Raises:
        UnknownLanguageError: no engine is registered for the code.
    """
    key = normalize_code(code)
    factory = LANGUAGES.get(key)
    if factory is None:
        raise UnknownLanguageError(
            f"Language '{code}' is not supported",
            {"lang": code, "supported": sorted(LANGUAGES)},
        )
    logger.debug("Resolved language %r -> %s", code, key)
    return factory(tuple(preferences))


def available_languages() -> list[str]:
    return sorted(LANGUAGES)


__all__ = ["Language", "LANGUAGES", "available_languages", "lookup_language", "normalize_code"]
