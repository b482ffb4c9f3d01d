"""Filter and sort helpers for the subscription list view."""

from __future__ import annotations

import unicodedata
from typing import Callable, Final, Iterable, Sequence

import pandas as pd

from analytics.stats import monthly_equivalent
from core.models import BillingCycle, Subscription

__all__ = [
    "FILTER_ALL",
    "FILTER_ACTIVE",
    "FILTER_INACTIVE",
    "SORT_KEYS",
    "build_subscription_frame",
    "filter_subscriptions",
    "list_categories",
    "sort_subscriptions",
]

FILTER_ALL: Final[str] = "all"
FILTER_ACTIVE: Final[str] = "active"
FILTER_INACTIVE: Final[str] = "inactive"

SORT_KEYS: Final[dict[str, str]] = {
    "name": "Sort by Name",
    "amount": "Sort by Amount",
    "date": "Sort by Next Payment",
}


def filter_subscriptions(subscriptions: Iterable[Subscription], filter_value: str) -> list[Subscription]:
    """Keep subscriptions matching a status filter or a category label.

    ``"all"``, ``"active"`` and ``"inactive"`` are reserved; any other value is
    compared case-insensitively against ``category``. Order is preserved.
    """

    if filter_value == FILTER_ALL:
        return list(subscriptions)
    if filter_value == FILTER_ACTIVE:
        return [subscription for subscription in subscriptions if subscription.active]
    if filter_value == FILTER_INACTIVE:
        return [subscription for subscription in subscriptions if not subscription.active]

    target = filter_value.lower()
    return [subscription for subscription in subscriptions if subscription.category.lower() == target]


def _name_sort_key(subscription: Subscription) -> tuple[str, str]:
    # Accents and case are ignored first; on a tie lowercase sorts before uppercase.
    decomposed = unicodedata.normalize("NFKD", subscription.name)
    base = "".join(char for char in decomposed if not unicodedata.combining(char))
    return base.casefold(), subscription.name.swapcase()


_SORTERS: Final[dict[str, Callable[[Subscription], object]]] = {
    "name": _name_sort_key,
    "amount": lambda subscription: subscription.amount,
    "date": lambda subscription: subscription.next_billing_date,
}


def sort_subscriptions(subscriptions: Iterable[Subscription], key: str) -> list[Subscription]:
    """Return a new list ordered by ``name``, raw ``amount`` or next billing ``date``.

    Unknown keys leave the input order untouched.
    """

    sorter = _SORTERS.get(key)
    if sorter is None:
        return list(subscriptions)
    return sorted(subscriptions, key=sorter)


def list_categories(subscriptions: Iterable[Subscription]) -> list[str]:
    """Unique categories in first-seen order."""

    return list(dict.fromkeys(subscription.category for subscription in subscriptions))


def build_subscription_frame(subscriptions: Sequence[Subscription]) -> pd.DataFrame:
    columns = [
        "Id",
        "Name",
        "Category",
        "Amount",
        "Currency",
        "Cycle",
        "MonthlyEquivalent",
        "NextBillingDate",
        "Active",
    ]
    if not subscriptions:
        return pd.DataFrame(columns=columns)

    records = [
        {
            "Id": subscription.id,
            "Name": subscription.name,
            "Category": subscription.category,
            "Amount": float(subscription.amount),
            "Currency": subscription.currency,
            "Cycle": BillingCycle(subscription.cycle).value,
            "MonthlyEquivalent": float(monthly_equivalent(subscription.amount, subscription.cycle)),
            "NextBillingDate": pd.Timestamp(subscription.next_billing_date),
            "Active": subscription.active,
        }
        for subscription in subscriptions
    ]
    return pd.DataFrame.from_records(records, columns=columns)
