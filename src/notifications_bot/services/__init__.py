# -*- coding: utf-8 -*-
"""Application services."""

from notifications_bot.services.commands import CommandRouter
from notifications_bot.services.subscriptions import (
    SUBSCRIPTION_UPDATED,
    SubscriptionService,
    format_subscriptions,
)

__all__ = [
    "CommandRouter",
    "SUBSCRIPTION_UPDATED",
    "SubscriptionService",
    "format_subscriptions",
]
