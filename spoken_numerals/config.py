"""
Process-wide settings, read from the environment (and a ``.env`` file).

    SPOKEN_NUMERALS_DEFAULT_LANG      language when none is given   (en)
    SPOKEN_NUMERALS_DEFAULT_CURRENCY  currency mode without a code  (DOLLAR)
    SPOKEN_NUMERALS_LOG_LEVEL         CLI / server log level        (WARNING)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

ENV_PREFIX = "SPOKEN_NUMERALS_"


@dataclass(frozen=True)
class Settings:
    default_lang: str = "en"
    default_currency: str = "DOLLAR"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            default_lang=os.getenv(f"{ENV_PREFIX}DEFAULT_LANG", cls.default_lang),
            default_currency=os.getenv(f"{ENV_PREFIX}DEFAULT_CURRENCY", cls.default_currency),
            log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", cls.log_level).upper(),
        )


def get_settings() -> Settings:
    """Load ``.env`` (without overriding real env vars) and build ``Settings``."""
    load_dotenv()
    return Settings.from_env()
