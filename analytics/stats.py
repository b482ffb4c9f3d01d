"""Spending statistics derived from a subscription snapshot."""

from __future__ import annotations

from typing import Final, Iterable

import pandas as pd

from core.models import BillingCycle, Subscription, SubscriptionStats

__all__ = [
    "UPCOMING_LIMIT",
    "WEEKS_PER_MONTH",
    "build_category_frame",
    "compute_stats",
    "monthly_equivalent",
]

WEEKS_PER_MONTH: Final[float] = 4.33
UPCOMING_LIMIT: Final[int] = 5


def monthly_equivalent(amount: float, cycle: BillingCycle | str) -> float:
    """Normalise a per-cycle charge to its monthly cost."""

    cycle = BillingCycle(cycle)
    if cycle is BillingCycle.MONTHLY:
        return amount
    if cycle is BillingCycle.YEARLY:
        return amount / 12
    if cycle is BillingCycle.WEEKLY:
        return amount * WEEKS_PER_MONTH
    return amount / 3


def compute_stats(
    subscriptions: Iterable[Subscription],
    *,
    upcoming_limit: int = UPCOMING_LIMIT,
) -> SubscriptionStats:
    """Aggregate monthly/yearly totals, category totals and upcoming charges.

    Only active subscriptions are counted. Amounts are summed as-is across
    currencies. ``total_yearly`` is always ``total_monthly * 12``.
    """

    active = [subscription for subscription in subscriptions if subscription.active]

    total_monthly = 0.0
    by_category: dict[str, float] = {}
    for subscription in active:
        monthly_amount = monthly_equivalent(subscription.amount, subscription.cycle)
        total_monthly += monthly_amount
        by_category[subscription.category] = by_category.get(subscription.category, 0.0) + monthly_amount

    upcoming = sorted(active, key=lambda subscription: subscription.next_billing_date)

    return SubscriptionStats(
        total_monthly=total_monthly,
        total_yearly=total_monthly * 12,
        by_category=by_category,
        upcoming=upcoming[:upcoming_limit],
    )


def build_category_frame(stats: SubscriptionStats) -> pd.DataFrame:
    """Return category totals ordered by monthly value for chart rendering."""

    if not stats.by_category:
        return pd.DataFrame(columns=["Category", "MonthlyValue", "Share"])

    frame = pd.DataFrame(
        {
            "Category": list(stats.by_category.keys()),
            "MonthlyValue": [float(value) for value in stats.by_category.values()],
        }
    )
    total_value = float(frame["MonthlyValue"].sum())
    if total_value > 0:
        frame["Share"] = frame["MonthlyValue"] / total_value
    else:
        frame["Share"] = 0.0

    return frame.sort_values("MonthlyValue", ascending=False, kind="stable").reset_index(drop=True)
