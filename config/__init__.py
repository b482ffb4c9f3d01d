"""Application configuration utilities."""

from .settings import DEFAULT_CURRENCY, Settings, get_settings

__all__ = [
    "DEFAULT_CURRENCY",
    "Settings",
    "get_settings",
]
