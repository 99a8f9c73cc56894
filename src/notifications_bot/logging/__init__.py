"""Logging subpackage."""

from notifications_bot.logging.config import configure_logging

__all__ = ["configure_logging"]
