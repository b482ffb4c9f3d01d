"""Streamlit application package for SubTrack."""

from .main import main

__all__ = ["main"]
