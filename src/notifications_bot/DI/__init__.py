"""Dependency injection."""

from notifications_bot.DI.container import Container

__all__ = ["Container"]
