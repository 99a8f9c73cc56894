"""Bot transport: adapters and HTTP server."""

from notifications_bot.bot.adapters import BaseAdapter, JsonCommandAdapter
from notifications_bot.bot.server import BotServer

__all__ = ["BaseAdapter", "BotServer", "JsonCommandAdapter"]
