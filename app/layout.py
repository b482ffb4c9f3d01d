"""Shared layout primitives for the SubTrack Streamlit app."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from html import escape
from typing import Iterable

import streamlit as st


@dataclass(frozen=True)
class NavigationLink:
    slug: str
    label: str
    enabled: bool = True


NAV_LINKS: tuple[NavigationLink, ...] = (
    NavigationLink("overview", "Dashboard", True),
    NavigationLink("subscriptions", "Subscriptions", True),
)


def inject_css() -> None:
    """Inject global CSS tokens and component styling into the Streamlit app."""

    st.markdown(
        """
        <style>
          :root {
            --gap: 16px;
            --radius: 16px;
            --card-bg: #FFFFFF;
            --border: #E6EAF2;
            --shadow: 0 1px 2px rgba(16, 24, 40, 0.05), 0 1px 3px rgba(16, 24, 40, 0.06);
          }

          body, [data-testid="stAppViewContainer"] > .main {
            background: #F4F6FB;
          }

          .block-container {
            max-width: 1200px;
            padding-top: 2.5rem;
            padding-bottom: 4rem;
          }

          .st-nav {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 2rem;
            padding: 0.9rem 0;
          }

          .st-nav__brand {
            font-size: 1.5rem;
            font-weight: 700;
            color: #0B3FD6;
          }

          .st-nav__links {
            display: flex;
            align-items: center;
            gap: 1.8rem;
          }

          .st-nav__link,
          .st-nav__link:visited {
            font-weight: 600;
            color: #5C6478;
            text-decoration: none;
          }

          .st-nav__link.is-active {
            color: #1D4ED8;
            border-bottom: 3px solid #1D4ED8;
          }

          .st-nav__link.is-disabled {
            color: #B7C1D9;
            pointer-events: none;
          }

          .st-card-anchor {
            display: none;
          }

          [data-testid="stVerticalBlock"]:has(> .st-card-anchor) {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-radius: var(--radius);
            box-shadow: var(--shadow);
            padding: 16px;
            margin-bottom: var(--gap);
          }

          .st-card__head {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 12px;
            font-weight: 600;
            color: #111827;
          }

          .st-chip {
            font-size: 12px;
            padding: 2px 8px;
            border-radius: 999px;
            border: 1px solid #D6DEFF;
            background: #F0F4FF;
            color: #3346FF;
            white-space: nowrap;
          }

          .st-sub {
            display: flex;
            align-items: center;
            gap: 12px;
          }

          .st-sub.is-inactive {
            opacity: 0.55;
          }

          .st-sub__logo {
            width: 40px;
            height: 40px;
            border-radius: 10px;
            display: flex;
            align-items: center;
            justify-content: center;
            color: #FFFFFF;
            font-weight: 700;
            overflow: hidden;
          }

          .st-sub__logo img {
            width: 100%;
            height: 100%;
            object-fit: contain;
            background: #FFFFFF;
          }

          .st-sub__meta {
            color: #6B7280;
            font-size: 0.85rem;
          }

          .st-upcoming {
            margin: 0;
            padding-left: 0;
            list-style: none;
            display: flex;
            flex-direction: column;
            gap: 0.6rem;
          }

          .st-upcoming li {
            display: flex;
            justify-content: space-between;
            color: #374151;
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, suffix: str | None = None):
    """Render content inside a reusable SubTrack card."""

    chip_html = f'<span class="st-chip">{escape(suffix)}</span>' if suffix else ""
    container = st.container()
    with container:
        st.markdown('<div class="st-card-anchor"></div>', unsafe_allow_html=True)
        st.markdown(
            f'<div class="st-card__head"><span>{escape(title)}</span>{chip_html}</div>',
            unsafe_allow_html=True,
        )
        yield


def render_navbar(active_page: str) -> None:
    """Render the dashboard navigation bar with active state."""

    link_markup: list[str] = []
    for link in NAV_LINKS:
        css_class = "st-nav__link"
        aria_current = ""
        if link.slug == active_page:
            css_class += " is-active"
            aria_current = ' aria-current="page"'

        if link.enabled:
            link_markup.append(
                f'<a class="{css_class}" href="?page={link.slug}"{aria_current} target="_self">{link.label}</a>'
            )
        else:
            link_markup.append(f'<span class="{css_class} is-disabled">{link.label}</span>')

    st.markdown(
        f"""
        <nav class="st-nav">
            <div class="st-nav__brand">SubTrack</div>
            <div class="st-nav__links">{''.join(link_markup)}</div>
        </nav>
        """,
        unsafe_allow_html=True,
    )


def determine_active_page(valid_pages: Iterable[str]) -> str:
    """Determine the active page from the query params or session state."""

    params = st.query_params
    default_page = st.session_state.get("active_page", "overview")
    raw_page = params.get("page", default_page)
    if isinstance(raw_page, list):
        raw_page = raw_page[0]

    page = raw_page if raw_page in set(valid_pages) else "overview"

    if st.session_state.get("active_page") != page:
        st.session_state["active_page"] = page

    if params.get("page") != page:
        st.query_params["page"] = page

    return page


__all__ = [
    "NavigationLink",
    "NAV_LINKS",
    "card",
    "determine_active_page",
    "inject_css",
    "render_navbar",
]
