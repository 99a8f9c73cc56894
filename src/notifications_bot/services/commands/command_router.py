"""Command router: dispatches a Command variant to the subscription service."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog
from structlog.contextvars import bound_contextvars

from notifications_bot.exceptions import UnknownCommandError
from notifications_bot.models.command import Command, ListSubscriptions, Subscribe, Unsubscribe
from notifications_bot.services.subscriptions.subscription_service import SubscriptionService


class CommandRouter:
    """Runs one command and returns the plain-text result."""

    def __init__(
        self,
        subscription_service: SubscriptionService,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        self._subscriptions = subscription_service
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def execute(self, command: Command) -> str:
        """Execute command.

        Raises:
            UnknownCommandError: If command is not a known variant.
            NotificationsBotError: Propagated from the subscription service.
        """
        with bound_contextvars(command=type(command).__name__, recipient=getattr(command, "recipient", None)):
            self._logger.info("command_received")
            if isinstance(command, ListSubscriptions):
                return await self._subscriptions.list_subscriptions(command.recipient)
            if isinstance(command, Subscribe):
                return await self._subscriptions.update_subscription(command.recipient, True, command.target)
            if isinstance(command, Unsubscribe):
                return await self._subscriptions.update_subscription(command.recipient, False, command.target)
            raise UnknownCommandError()
