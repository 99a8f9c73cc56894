"""Notifications bot: manage notification subscriptions stored in Argo CD resource annotations."""

from notifications_bot.config import get_settings
from notifications_bot.models import (
    Command,
    Destination,
    ListSubscriptions,
    Subscribe,
    Unsubscribe,
    UpdateTarget,
)
from notifications_bot.services import CommandRouter, SubscriptionService

__version__ = "0.1.0"
__all__ = [
    "Command",
    "CommandRouter",
    "Destination",
    "ListSubscriptions",
    "Subscribe",
    "SubscriptionService",
    "Unsubscribe",
    "UpdateTarget",
    "get_settings",
]
