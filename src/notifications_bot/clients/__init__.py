"""API clients."""

from notifications_bot.clients.kubernetes import AsyncCustomObjectsClient

__all__ = ["AsyncCustomObjectsClient"]
