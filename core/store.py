"""In-memory subscription store backing the SubTrack dashboard."""

from __future__ import annotations

import itertools
from typing import Iterable, Iterator

from core.errors import SubscriptionNotFoundError
from core.models import Subscription, SubscriptionDraft
from utils.logger import get_logger

logger = get_logger(__name__)

__all__ = ["SubscriptionStore"]


class SubscriptionStore:
    """Owns the ordered subscription collection and its mutations.

    Records are frozen dataclasses; ``update`` swaps in a new record at the
    same position so insertion order survives edits.
    """

    def __init__(self, subscriptions: Iterable[Subscription] = ()) -> None:
        self._items: dict[str, Subscription] = {}
        for subscription in subscriptions:
            if subscription.id in self._items:
                raise ValueError(f"Duplicate subscription id: {subscription.id}")
            self._items[subscription.id] = subscription
        self._counter = itertools.count(self._next_numeric_id())

    def _next_numeric_id(self) -> int:
        numeric_ids = [int(key) for key in self._items if key.isdigit()]
        return max(numeric_ids, default=0) + 1

    def _new_id(self) -> str:
        for candidate in self._counter:
            key = str(candidate)
            if key not in self._items:
                return key
        raise RuntimeError("id counter exhausted")  # pragma: no cover - count() is infinite

    def add(self, draft: SubscriptionDraft) -> Subscription:
        subscription = draft.with_id(self._new_id())
        self._items[subscription.id] = subscription
        logger.info("Added subscription %s (%s)", subscription.id, subscription.name)
        return subscription

    def update(self, subscription_id: str, draft: SubscriptionDraft) -> Subscription:
        if subscription_id not in self._items:
            logger.warning("Update requested for unknown subscription %s", subscription_id)
            raise SubscriptionNotFoundError(subscription_id)
        subscription = draft.with_id(subscription_id)
        self._items[subscription_id] = subscription
        logger.info("Updated subscription %s (%s)", subscription_id, subscription.name)
        return subscription

    def remove(self, subscription_id: str) -> Subscription:
        try:
            removed = self._items.pop(subscription_id)
        except KeyError:
            logger.warning("Removal requested for unknown subscription %s", subscription_id)
            raise SubscriptionNotFoundError(subscription_id) from None
        logger.info("Removed subscription %s (%s)", subscription_id, removed.name)
        return removed

    def get(self, subscription_id: str) -> Subscription:
        try:
            return self._items[subscription_id]
        except KeyError:
            raise SubscriptionNotFoundError(subscription_id) from None

    def list(self) -> list[Subscription]:
        """Return a snapshot of every subscription in insertion order."""

        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, subscription_id: object) -> bool:
        return subscription_id in self._items

    def __iter__(self) -> Iterator[Subscription]:
        return iter(self.list())
