"""Shared data model definitions for the SubTrack dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date
from enum import Enum


class BillingCycle(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class SubscriptionCategory(str, Enum):
    """Default category options offered by the subscription form.

    ``Subscription.category`` stays an open string; these are suggestions only.
    """

    ENTERTAINMENT = "Entertainment"
    PRODUCTIVITY = "Productivity"
    UTILITIES = "Utilities"
    HEALTH = "Health"
    FINANCE = "Finance"
    FOOD = "Food"
    SHOPPING = "Shopping"
    OTHER = "Other"


@dataclass(frozen=True, kw_only=True)
class SubscriptionDraft:
    """Every subscription field except the store-assigned ``id``."""

    name: str
    amount: float
    cycle: BillingCycle
    category: str
    next_billing_date: date
    currency: str = "USD"
    start_date: date = field(default_factory=date.today)
    active: bool = True
    description: str | None = None
    logo: str | None = None
    color: str | None = None
    url: str | None = None

    def with_id(self, subscription_id: str) -> "Subscription":
        values = {f.name: getattr(self, f.name) for f in fields(SubscriptionDraft)}
        return Subscription(id=subscription_id, **values)


@dataclass(frozen=True, kw_only=True)
class Subscription(SubscriptionDraft):
    id: str

    def to_draft(self) -> SubscriptionDraft:
        values = {f.name: getattr(self, f.name) for f in fields(SubscriptionDraft)}
        return SubscriptionDraft(**values)


@dataclass(frozen=True)
class SubscriptionStats:
    total_monthly: float
    total_yearly: float
    by_category: dict[str, float]
    upcoming: list[Subscription]


__all__ = [
    "BillingCycle",
    "SubscriptionCategory",
    "SubscriptionDraft",
    "Subscription",
    "SubscriptionStats",
]
