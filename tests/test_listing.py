"""Tests for the list view filter and sort helpers."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from analytics.listing import (
    build_subscription_frame,
    filter_subscriptions,
    list_categories,
    sort_subscriptions,
)
from core.models import BillingCycle, Subscription


def _subscription(sub_id, name, amount, due, *, category="Entertainment", active=True, cycle=BillingCycle.MONTHLY):
    return Subscription(
        id=sub_id,
        name=name,
        amount=amount,
        cycle=cycle,
        category=category,
        start_date=date(2023, 6, 1),
        next_billing_date=due,
        active=active,
    )


@pytest.fixture()
def subscriptions() -> list[Subscription]:
    return [
        _subscription("1", "spotify", 9.99, date(2024, 1, 20)),
        _subscription("2", "Adobe", 52.99, date(2024, 1, 12), category="Productivity", active=False),
        _subscription("3", "Notion", 48.0, date(2024, 1, 5), category="productivity", cycle=BillingCycle.YEARLY),
        _subscription("4", "Élan Gym", 30.0, date(2024, 1, 12), category="Health", active=False),
        _subscription("5", "apple Music", 10.99, date(2024, 1, 2)),
    ]


def _ids(items):
    return [item.id for item in items]


def test_filter_all_returns_everything(subscriptions):
    assert _ids(filter_subscriptions(subscriptions, "all")) == ["1", "2", "3", "4", "5"]


def test_filter_inactive_preserves_order(subscriptions):
    result = filter_subscriptions(subscriptions, "inactive")

    assert _ids(result) == ["2", "4"]
    assert not any(item.active for item in result)


def test_filter_active(subscriptions):
    assert _ids(filter_subscriptions(subscriptions, "active")) == ["1", "3", "5"]


def test_filter_by_category_is_case_insensitive(subscriptions):
    assert _ids(filter_subscriptions(subscriptions, "PRODUCTIVITY")) == ["2", "3"]
    assert filter_subscriptions(subscriptions, "Finance") == []


def test_sort_by_name_ignores_case_and_accents(subscriptions):
    result = sort_subscriptions(subscriptions, "name")

    assert [item.name for item in result] == ["Adobe", "apple Music", "Élan Gym", "Notion", "spotify"]


def test_sort_by_name_is_idempotent(subscriptions):
    once = sort_subscriptions(subscriptions, "name")

    assert sort_subscriptions(once, "name") == once


def test_sort_by_name_puts_lowercase_first_on_ties():
    items = [
        _subscription("1", "Apple", 1.0, date(2024, 1, 1)),
        _subscription("2", "apple", 1.0, date(2024, 1, 1)),
    ]

    assert _ids(sort_subscriptions(items, "name")) == ["2", "1"]


def test_sort_by_amount_uses_raw_amount(subscriptions):
    result = sort_subscriptions(subscriptions, "amount")

    assert _ids(result) == ["1", "5", "4", "3", "2"]


def test_sort_by_date_is_stable(subscriptions):
    assert _ids(sort_subscriptions(subscriptions, "date")) == ["5", "3", "2", "4", "1"]


def test_sort_unknown_key_keeps_order_and_copies(subscriptions):
    result = sort_subscriptions(subscriptions, "popularity")

    assert result == subscriptions
    assert result is not subscriptions


def test_sort_does_not_mutate_input(subscriptions):
    original = list(subscriptions)

    sort_subscriptions(subscriptions, "amount")

    assert subscriptions == original


def test_helpers_handle_empty_input():
    assert filter_subscriptions([], "active") == []
    assert sort_subscriptions([], "name") == []
    assert list_categories([]) == []
    assert build_subscription_frame([]).empty


def test_list_categories_first_seen_order(subscriptions):
    assert list_categories(subscriptions) == ["Entertainment", "Productivity", "productivity", "Health"]


def test_build_subscription_frame_includes_monthly_equivalent(subscriptions):
    frame = build_subscription_frame(subscriptions)

    assert len(frame) == 5
    notion = frame.loc[frame["Id"] == "3"].iloc[0]
    assert notion["Cycle"] == "yearly"
    assert notion["MonthlyEquivalent"] == pytest.approx(4.0)


def test_subscription_frame_follows_filtered_sorted_order(subscriptions):
    visible = sort_subscriptions(filter_subscriptions(subscriptions, "active"), "date")

    frame = build_subscription_frame(visible)

    assert frame["Id"].tolist() == ["5", "3", "1"]
    assert frame["Active"].all()
