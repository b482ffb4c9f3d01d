"""Centralised configuration handling for SubTrack."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping

import streamlit as st
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CURRENCY = "USD"
SECRETS_SECTION = "subtrack"


def _streamlit_section(name: str) -> Mapping[str, Any] | None:
    """Return a mapping from Streamlit secrets for the given section."""

    try:
        if hasattr(st, "secrets") and name in st.secrets:
            section = st.secrets[name]
            if isinstance(section, Mapping):
                return section
            return dict(section)
    except Exception:  # pragma: no cover - accessing secrets may fail in tests
        return None
    return None


class Settings(BaseSettings):
    """Application settings sourced from env vars and Streamlit secrets."""

    default_currency: str = DEFAULT_CURRENCY
    seed_count: int = Field(default=12, ge=0)
    seed: int | None = None
    upcoming_limit: int = Field(default=5, ge=0)
    load_delay_seconds: float = Field(default=0.8, ge=0)
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="SUBTRACK_", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""

    overrides: dict[str, Any] = {}
    secrets_section = _streamlit_section(SECRETS_SECTION)
    if secrets_section:
        overrides = {key: secrets_section.get(key) for key in Settings.model_fields}

    return Settings(**{k: v for k, v in overrides.items() if v is not None})
