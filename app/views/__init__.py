"""Page views for the SubTrack Streamlit application."""

from .overview import render_page as render_overview_page
from .subscriptions import render_page as render_subscriptions_page

__all__ = [
    "render_overview_page",
    "render_subscriptions_page",
]
