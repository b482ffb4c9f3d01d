"""Tests for currency, date and label formatting helpers."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.formatting import cycle_suffix, format_billing_date, format_currency, monogram
from core.models import BillingCycle


@pytest.mark.parametrize(
    ("amount", "currency", "expected"),
    [
        (15.99, "USD", "$15.99"),
        (15.5, "usd", "$15.5"),
        (12.0, "EUR", "€12"),
        (1234.5, "GBP", "£1,234.5"),
        (1500.4, "JPY", "¥1,500"),
        (9.99, "CHF", "CHF 9.99"),
        (-3.25, "USD", "-$3.25"),
    ],
)
def test_format_currency(amount, currency, expected):
    assert format_currency(amount, currency) == expected


def test_format_currency_whole_units():
    assert format_currency(1049.6, "USD", max_decimals=0) == "$1,050"


def test_format_billing_date_short_month_day():
    assert format_billing_date(date(2024, 10, 6)) == "Oct 6"


@pytest.mark.parametrize(
    ("cycle", "suffix"),
    [
        (BillingCycle.WEEKLY, "/wk"),
        (BillingCycle.MONTHLY, "/mo"),
        ("quarterly", "/qtr"),
        (BillingCycle.YEARLY, "/yr"),
    ],
)
def test_cycle_suffix(cycle, suffix):
    assert cycle_suffix(cycle) == suffix


def test_monogram_uses_first_character():
    assert monogram("netflix") == "N"
    assert monogram("  ") == "?"
