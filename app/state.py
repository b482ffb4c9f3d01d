"""Session-scoped state for the SubTrack Streamlit app."""

from __future__ import annotations

import time

import streamlit as st

from config import Settings
from core import SubscriptionStore
from data.synth import generate_mock_subscriptions
from utils.logger import get_logger

logger = get_logger(__name__)

STORE_KEY = "subscription_store"
TOAST_KEY = "pending_toasts"
EDITING_KEY = "editing_subscription_id"

__all__ = [
    "EDITING_KEY",
    "STORE_KEY",
    "flush_toasts",
    "get_store",
    "queue_toast",
]


def get_store(settings: Settings) -> SubscriptionStore:
    """Return the session's store, seeding it with mock subscriptions on first use."""

    store = st.session_state.get(STORE_KEY)
    if store is None:
        with st.spinner("Loading subscriptions…"):
            if settings.load_delay_seconds:
                time.sleep(settings.load_delay_seconds)
            seed_data = generate_mock_subscriptions(settings.seed_count, seed=settings.seed)
            store = SubscriptionStore(seed_data)
        logger.info("Seeded subscription store with %d records", len(store))
        st.session_state[STORE_KEY] = store
    return store


def queue_toast(message: str, icon: str | None = None) -> None:
    """Queue a toast to be shown after the next rerun."""

    st.session_state.setdefault(TOAST_KEY, []).append((message, icon))


def flush_toasts() -> None:
    for message, icon in st.session_state.pop(TOAST_KEY, []):
        st.toast(message, icon=icon)
