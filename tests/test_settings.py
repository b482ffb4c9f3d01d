"""Tests for settings resolution from env vars and Streamlit secrets."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import streamlit as st

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import get_settings


@pytest.fixture(autouse=True)
def clear_streamlit_secrets(monkeypatch):
    """Provide an empty secrets mapping so tests don't rely on Streamlit runtime."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = get_settings()

    assert settings.default_currency == "USD"
    assert settings.seed_count == 12
    assert settings.upcoming_limit == 5


def test_env_vars_override_defaults(monkeypatch):
    monkeypatch.setenv("SUBTRACK_SEED_COUNT", "4")
    monkeypatch.setenv("SUBTRACK_LOAD_DELAY_SECONDS", "0")

    settings = get_settings()

    assert settings.seed_count == 4
    assert settings.load_delay_seconds == 0


def test_streamlit_secrets_section(monkeypatch):
    monkeypatch.setattr(st, "secrets", {"subtrack": {"default_currency": "EUR", "seed": 9}}, raising=False)

    settings = get_settings()

    assert settings.default_currency == "EUR"
    assert settings.seed == 9
