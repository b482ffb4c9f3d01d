"""Tests for shared Streamlit layout primitives."""

from __future__ import annotations

import contextlib
import sys
from pathlib import Path

import pytest
import streamlit as st

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.layout import NAV_LINKS, card, render_navbar
from app.views.subscriptions import _form_defaults
from config import Settings
from visualization import theme_tokens


@pytest.fixture()
def captured_markdown(monkeypatch) -> list[str]:
    """Record markup sent to ``st.markdown`` instead of rendering it."""

    captured: list[str] = []
    monkeypatch.setattr(st, "markdown", lambda body, **_: captured.append(body))
    monkeypatch.setattr(st, "container", lambda: contextlib.nullcontext())
    return captured


def test_card_escapes_title_and_suffix(captured_markdown):
    with card("Edit <b>me</b>", suffix='<img src=x onerror="alert(1)">'):
        pass

    head = captured_markdown[-1]
    assert "<img" not in head
    assert "&lt;img src=x onerror=&quot;alert(1)&quot;&gt;" in head
    assert "&lt;b&gt;me&lt;/b&gt;" in head


def test_card_without_suffix_has_no_chip(captured_markdown):
    with card("Your subscriptions"):
        pass

    assert "st-chip" not in captured_markdown[-1]


def test_navigation_only_lists_available_pages(captured_markdown):
    assert [link.slug for link in NAV_LINKS] == ["overview", "subscriptions"]

    render_navbar("subscriptions")

    nav = captured_markdown[-1]
    assert 'href="?page=subscriptions" aria-current="page"' in nav
    assert "Settings" not in nav


def test_new_subscription_form_defaults_to_palette_colour():
    defaults = _form_defaults(None, Settings(default_currency="EUR"))

    assert defaults["color"] == theme_tokens().subscription_palette[0]
    assert defaults["currency"] == "EUR"
