"""Overview dashboard page layout."""

from __future__ import annotations

from html import escape

import streamlit as st

from analytics import build_category_frame, compute_stats
from app.layout import card
from config import Settings
from core import Subscription, SubscriptionStats, SubscriptionStore
from core.formatting import format_billing_date, format_currency
from visualization import build_category_chart, build_upcoming_chart


def _render_totals(stats: SubscriptionStats, active_count: int, currency: str) -> None:
    metric_cols = st.columns((1, 1, 1))
    metric_cols[0].metric("Monthly spend", format_currency(stats.total_monthly, currency, max_decimals=0))
    metric_cols[1].metric("Yearly spend", format_currency(stats.total_yearly, currency, max_decimals=0))
    metric_cols[2].metric("Active subscriptions", f"{active_count}")
    st.caption("Totals use monthly equivalents and add amounts as entered, without currency conversion.")


def _render_upcoming_list(upcoming: list[Subscription]) -> None:
    if not upcoming:
        st.info("No upcoming payments.")
        return

    items = "".join(
        f"<li><span><strong>{escape(subscription.name)}</strong> · "
        f"{format_billing_date(subscription.next_billing_date)}</span>"
        f"<span>{format_currency(subscription.amount, subscription.currency)}</span></li>"
        for subscription in upcoming
    )
    st.markdown(f"<ul class='st-upcoming'>{items}</ul>", unsafe_allow_html=True)


def render_page(store: SubscriptionStore, settings: Settings) -> None:
    """Render the overview dashboard page."""

    st.title("Subscription Dashboard")
    st.caption("Track and manage all your subscriptions.")

    subscriptions = store.list()
    stats = compute_stats(subscriptions, upcoming_limit=settings.upcoming_limit)
    active_count = sum(1 for subscription in subscriptions if subscription.active)
    currency = settings.default_currency

    with card("Subscription Overview", suffix="Active only"):
        _render_totals(stats, active_count, currency)

    left, right = st.columns([3, 2], gap="medium")
    with left:
        with card("Spend by category", suffix="Per month"):
            chart = build_category_chart(build_category_frame(stats), currency=currency)
            st.plotly_chart(chart, use_container_width=True, key="category-donut")
    with right:
        with card("Upcoming payments", suffix=f"Next {settings.upcoming_limit}"):
            _render_upcoming_list(stats.upcoming)
            if stats.upcoming:
                st.plotly_chart(build_upcoming_chart(stats.upcoming), use_container_width=True)


__all__ = ["render_page"]
