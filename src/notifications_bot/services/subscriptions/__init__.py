"""Subscription services."""

from notifications_bot.services.subscriptions.subscription_service import (
    SUBSCRIPTION_UPDATED,
    SubscriptionService,
    format_subscriptions,
)

__all__ = [
    "SUBSCRIPTION_UPDATED",
    "SubscriptionService",
    "format_subscriptions",
]
