"""Tests for the synthetic subscription generator."""

from __future__ import annotations

import sys
from datetime import date, timedelta
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.models import BillingCycle
from data.synth import generate_mock_subscriptions

TODAY = date(2024, 5, 1)


def test_featured_services_come_first():
    subscriptions = generate_mock_subscriptions(3, today=TODAY)

    assert [item.name for item in subscriptions] == ["Netflix", "Spotify", "Adobe Creative Cloud"]
    assert subscriptions[0].next_billing_date == TODAY + timedelta(days=7)


def test_count_and_sequential_ids():
    subscriptions = generate_mock_subscriptions(12, today=TODAY, seed=1)

    assert [item.id for item in subscriptions] == [str(i) for i in range(1, 13)]
    assert subscriptions[3].name == "Microsoft 365"


def test_generated_fields_within_bounds():
    subscriptions = generate_mock_subscriptions(30, today=TODAY, seed=3)

    for item in subscriptions[3:]:
        assert item.cycle in (BillingCycle.MONTHLY, BillingCycle.YEARLY)
        assert TODAY <= item.next_billing_date <= TODAY + timedelta(days=60)
        assert date(2022, 1, 1) <= item.start_date <= TODAY
        assert item.amount >= 0


def test_seed_makes_output_reproducible():
    first = generate_mock_subscriptions(15, today=TODAY, seed=42)
    second = generate_mock_subscriptions(15, today=TODAY, seed=42)

    assert first == second
