"""Synthetic seed data for SubTrack."""

from .synth import SERVICE_CATALOGUE, ServiceProfile, generate_mock_subscriptions

__all__ = ["SERVICE_CATALOGUE", "ServiceProfile", "generate_mock_subscriptions"]
