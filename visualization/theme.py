"""Shared Plotly theme tokens for SubTrack visualizations."""

from __future__ import annotations

from dataclasses import dataclass, field


def _default_category_colors() -> dict[str, str]:
    return {
        "entertainment": "#3B82F6",
        "productivity": "#10B981",
        "utilities": "#6366F1",
        "health": "#F59E0B",
        "finance": "#EC4899",
        "food": "#8B5CF6",
        "shopping": "#F97316",
        "other": "#14B8A6",
    }


@dataclass(frozen=True)
class ThemeTokens:
    time_format: str = "%b %d"
    label_color: str = "#475569"
    label_font: str = "Inter"
    label_size: int = 12
    grid_color: str = "#EEF2FF"
    brand_blue: str = "#2563EB"
    brand_blue_soft: str = "rgba(37, 99, 235, 0.12)"
    neutral_grey: str = "#94A3B8"
    neutral_white: str = "#FFFFFF"
    neutral_background: str = "rgba(148, 163, 184, 0.25)"
    fallback_category_color: str = "#64748B"
    subscription_palette: tuple[str, ...] = (
        "#3B82F6",
        "#10B981",
        "#6366F1",
        "#F59E0B",
        "#EC4899",
        "#8B5CF6",
        "#F97316",
        "#14B8A6",
    )
    category_colors: dict[str, str] = field(default_factory=_default_category_colors)

    def category_color(self, category: str) -> str:
        return self.category_colors.get(category.lower(), self.fallback_category_color)


_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared visualization tokens.

    The tokens are frozen to keep styling consistent between charts and the
    subscription cards.
    """

    return _TOKENS
