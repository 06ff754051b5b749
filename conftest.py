"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep a developer's .env / shell settings out of the suite."""
    for name in (
        "SPOKEN_NUMERALS_DEFAULT_LANG",
        "SPOKEN_NUMERALS_DEFAULT_CURRENCY",
        "SPOKEN_NUMERALS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("spoken_numerals.config.load_dotenv", lambda *a, **k: False)


def pytest_make_parametrize_id(config, val, argname):
    """Give huge ints a short id; str() on them exceeds Python's digit limit."""
    if isinstance(val, int) and not isinstance(val, bool) and abs(val).bit_length() > 10000:
        return f"{'-' if val < 0 else ''}int{abs(val).bit_length()}bits"
    return None
