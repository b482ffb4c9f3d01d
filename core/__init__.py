"""Core domain package for the SubTrack application."""

from .errors import SubscriptionError, SubscriptionNotFoundError, SubscriptionValidationError
from .models import BillingCycle, Subscription, SubscriptionCategory, SubscriptionDraft, SubscriptionStats
from .store import SubscriptionStore
from .validation import SubscriptionForm, validate_subscription

__all__ = [
    "BillingCycle",
    "Subscription",
    "SubscriptionCategory",
    "SubscriptionDraft",
    "SubscriptionStats",
    "SubscriptionError",
    "SubscriptionNotFoundError",
    "SubscriptionValidationError",
    "SubscriptionStore",
    "SubscriptionForm",
    "validate_subscription",
]
