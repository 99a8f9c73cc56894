"""Transport adapters."""

from notifications_bot.bot.adapters.base import BaseAdapter
from notifications_bot.bot.adapters.json_adapter import JsonCommandAdapter

__all__ = ["BaseAdapter", "JsonCommandAdapter"]
