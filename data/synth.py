"""Synthetic subscription generator for the SubTrack dashboard.

Produces a realistic mix of streaming, productivity and utility subscriptions
for development and testing. Three well-known services are always present;
the remainder rotate through a fixed catalogue with randomised cycles,
billing dates and active flags.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional, Sequence

import numpy as np

from core.models import BillingCycle, Subscription, SubscriptionCategory

__all__ = ["ServiceProfile", "SERVICE_CATALOGUE", "generate_mock_subscriptions"]


@dataclass(frozen=True)
class ServiceProfile:
    """Metadata describing a service used in synthetic subscription lists."""

    name: str
    category: SubscriptionCategory
    amount: float
    color: str


SERVICE_CATALOGUE: Sequence[ServiceProfile] = (
    ServiceProfile("Disney+", SubscriptionCategory.ENTERTAINMENT, 7.99, "#0063E5"),
    ServiceProfile("Amazon Prime", SubscriptionCategory.SHOPPING, 14.99, "#00A8E1"),
    ServiceProfile("YouTube Premium", SubscriptionCategory.ENTERTAINMENT, 11.99, "#FF0000"),
    ServiceProfile("Microsoft 365", SubscriptionCategory.PRODUCTIVITY, 6.99, "#0078D4"),
    ServiceProfile("HBO Max", SubscriptionCategory.ENTERTAINMENT, 14.99, "#5822B4"),
    ServiceProfile("iCloud+", SubscriptionCategory.UTILITIES, 2.99, "#007AFF"),
    ServiceProfile("Notion", SubscriptionCategory.PRODUCTIVITY, 5.0, "#000000"),
    ServiceProfile("Grammarly", SubscriptionCategory.PRODUCTIVITY, 11.66, "#15C39A"),
    ServiceProfile("Dropbox", SubscriptionCategory.UTILITIES, 9.99, "#0061FF"),
    ServiceProfile("Hulu", SubscriptionCategory.ENTERTAINMENT, 7.99, "#1CE783"),
    ServiceProfile("Canva Pro", SubscriptionCategory.PRODUCTIVITY, 12.99, "#00C4CC"),
    ServiceProfile("New York Times", SubscriptionCategory.OTHER, 4.99, "#000000"),
)

_HISTORY_START = date(2022, 1, 1)
_BILLING_WINDOW_DAYS = 61
_YEARLY_PROBABILITY = 0.3
_ACTIVE_PROBABILITY = 0.9


def _featured_subscriptions(today: date) -> List[Subscription]:
    return [
        Subscription(
            id="1",
            name="Netflix",
            description="Streaming service for movies and TV shows",
            amount=15.99,
            currency="USD",
            cycle=BillingCycle.MONTHLY,
            category=SubscriptionCategory.ENTERTAINMENT.value,
            color="#E50914",
            start_date=date(2023, 1, 15),
            next_billing_date=today + timedelta(days=7),
            active=True,
            url="https://netflix.com",
            logo="https://cdn.iconscout.com/icon/free/png-256/free-netflix-3521600-2945044.png",
        ),
        Subscription(
            id="2",
            name="Spotify",
            description="Music streaming service",
            amount=9.99,
            currency="USD",
            cycle=BillingCycle.MONTHLY,
            category=SubscriptionCategory.ENTERTAINMENT.value,
            color="#1DB954",
            start_date=date(2023, 2, 10),
            next_billing_date=today + timedelta(days=15),
            active=True,
            url="https://spotify.com",
            logo="https://cdn.iconscout.com/icon/free/png-256/free-spotify-36-721973.png",
        ),
        Subscription(
            id="3",
            name="Adobe Creative Cloud",
            description="Suite of design software",
            amount=52.99,
            currency="USD",
            cycle=BillingCycle.MONTHLY,
            category=SubscriptionCategory.PRODUCTIVITY.value,
            color="#FF0000",
            start_date=date(2023, 3, 5),
            next_billing_date=today + timedelta(days=10),
            active=True,
            url="https://adobe.com",
            logo="https://cdn.iconscout.com/icon/free/png-256/free-adobe-1869025-1583149.png",
        ),
    ]


def generate_mock_subscriptions(
    count: int = 10,
    *,
    today: Optional[date] = None,
    seed: Optional[int] = None,
) -> List[Subscription]:
    """Generate a list of synthetic subscriptions.

    The three featured services are always returned, so ``count`` below three
    still yields three records. Ids run ``"1"`` to ``str(count)``.
    """

    rng = np.random.default_rng(seed)
    today = today or date.today()
    subscriptions = _featured_subscriptions(today)

    history_days = max((today - _HISTORY_START).days, 0)
    for index in range(len(subscriptions), count):
        service = SERVICE_CATALOGUE[index % len(SERVICE_CATALOGUE)]
        cycle = BillingCycle.YEARLY if rng.random() > 1 - _YEARLY_PROBABILITY else BillingCycle.MONTHLY
        start_offset = int(rng.integers(0, history_days + 1))
        billing_offset = int(rng.integers(0, _BILLING_WINDOW_DAYS))
        subscriptions.append(
            Subscription(
                id=str(index + 1),
                name=service.name,
                description=f"Subscription for {service.name}",
                amount=service.amount,
                currency="USD",
                cycle=cycle,
                category=service.category.value,
                color=service.color,
                start_date=_HISTORY_START + timedelta(days=start_offset),
                next_billing_date=today + timedelta(days=billing_offset),
                active=bool(rng.random() < _ACTIVE_PROBABILITY),
                url=f"https://{service.name.lower().replace(' ', '')}.com",
            )
        )

    return subscriptions
