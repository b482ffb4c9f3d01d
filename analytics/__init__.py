"""Analytics helpers shared across SubTrack pages."""

from analytics.listing import (
    FILTER_ACTIVE,
    FILTER_ALL,
    FILTER_INACTIVE,
    SORT_KEYS,
    build_subscription_frame,
    filter_subscriptions,
    list_categories,
    sort_subscriptions,
)
from analytics.stats import (
    UPCOMING_LIMIT,
    WEEKS_PER_MONTH,
    build_category_frame,
    compute_stats,
    monthly_equivalent,
)

__all__ = [
    "FILTER_ACTIVE",
    "FILTER_ALL",
    "FILTER_INACTIVE",
    "SORT_KEYS",
    "build_subscription_frame",
    "filter_subscriptions",
    "list_categories",
    "sort_subscriptions",
    "UPCOMING_LIMIT",
    "WEEKS_PER_MONTH",
    "build_category_frame",
    "compute_stats",
    "monthly_equivalent",
]
