import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import accessibility
from colors import Palette


@pytest.fixture
def flag(monkeypatch):
    """Fresh process-wide accessibility flag for one test."""
    fresh = accessibility.AccessibilityFlag()
    monkeypatch.setattr(accessibility, "ACCESSIBLE", fresh)
    return fresh


@pytest.fixture
def palette():
    return Palette(enabled=True)


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so teardown also removes values written by load_dotenv
    for name in ("ACCESSIBLE", "NO_COLOR", "TERM"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def dotenv_file(tmp_path):
    """Write a .env file into tmp_path and return its path."""
    def write(**values):
        path = tmp_path / ".env"
        path.write_text("".join(f"{k}={v}\n" for k, v in values.items()))
        return path
    return write
