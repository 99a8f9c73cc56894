"""Command dispatch services."""

from notifications_bot.services.commands.command_router import CommandRouter

__all__ = ["CommandRouter"]
