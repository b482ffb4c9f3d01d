"""SubTrack subscription dashboard with responsive card layout."""

from __future__ import annotations

import streamlit as st

from app.layout import NAV_LINKS, determine_active_page, inject_css, render_navbar
from app.views import render_overview_page, render_subscriptions_page
from app.state import flush_toasts, get_store
from config import get_settings
from utils.logger import configure_logging


def main() -> None:
    """Application entrypoint for the SubTrack dashboard."""

    st.set_page_config(
        page_title="SubTrack | Dashboard",
        page_icon="💳",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    settings = get_settings()
    configure_logging(settings.log_level)

    inject_css()
    valid_pages = [link.slug for link in NAV_LINKS if link.enabled]
    active_page = determine_active_page(valid_pages)
    render_navbar(active_page)

    store = get_store(settings)
    flush_toasts()

    if active_page == "subscriptions":
        render_subscriptions_page(store, settings)
    else:
        render_overview_page(store, settings)


if __name__ == "__main__":
    main()
