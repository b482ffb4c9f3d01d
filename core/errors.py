"""Error types raised by the SubTrack core."""

from __future__ import annotations

from typing import Iterable

__all__ = [
    "SubscriptionError",
    "SubscriptionNotFoundError",
    "SubscriptionValidationError",
]


class SubscriptionError(Exception):
    """Base class for subscription store and validation failures."""


class SubscriptionNotFoundError(SubscriptionError, KeyError):
    """Raised when no subscription matches the requested id."""

    def __init__(self, subscription_id: str) -> None:
        super().__init__(subscription_id)
        self.subscription_id = subscription_id

    def __str__(self) -> str:
        return f"Subscription not found: {self.subscription_id}"


class SubscriptionValidationError(SubscriptionError, ValueError):
    """Raised when subscription input fails validation before reaching the store."""

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid subscription")
