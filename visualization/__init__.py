"""Visualization utilities for SubTrack dashboards."""

from .charts import build_category_chart, build_upcoming_chart
from .theme import theme_tokens

__all__ = [
    "build_category_chart",
    "build_upcoming_chart",
    "theme_tokens",
]
