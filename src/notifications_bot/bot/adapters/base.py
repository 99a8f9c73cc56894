# -*- coding: utf-8 -*-
"""Base transport adapter."""

from __future__ import annotations

from abc import ABC, abstractmethod

from aiohttp import web

from notifications_bot.models.command import Command


class BaseAdapter(ABC):
    """Abstract base for transport adapters.

    An adapter turns an inbound HTTP request into a Command and renders the
    plain-text result back in its transport's response format.
    """

    @abstractmethod
    async def parse(self, request: web.Request) -> Command:
        """
        Decode the request into a command.

        Args:
            request: Inbound aiohttp request.

        Raises:
            NotificationsBotError: If the request does not describe exactly one command.
        """
        pass

    @abstractmethod
    def send_response(self, text: str) -> web.Response:
        """
        Build the response carrying text.

        Args:
            text: Command result or error message.
        """
        pass
