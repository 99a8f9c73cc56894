# -*- coding: utf-8 -*-
"""Bot HTTP server: routes adapter requests to the command router (aiohttp.web)."""

from __future__ import annotations

import uuid
import structlog
from typing import Any, Callable, Optional

from aiohttp import web
from structlog.contextvars import bound_contextvars

from notifications_bot.bot.adapters.base import BaseAdapter
from notifications_bot.exceptions import NotificationsBotError
from notifications_bot.services.commands import CommandRouter

Handler = Callable[[web.Request], Any]


class BotServer:
    """HTTP server exposing one POST route per registered adapter.

    Parse errors are returned to the caller verbatim; execution errors as
    "cannot execute command: <error>". Both use the adapter's response format.
    """

    def __init__(
        self,
        router: CommandRouter,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the server.

        Args:
            router: Command router (injected).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._router = router
        self._app = web.Application()
        self._runner: Optional[web.AppRunner] = None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def app(self) -> web.Application:
        return self._app

    def add_adapter(self, pattern: str, adapter: BaseAdapter) -> None:
        """Register adapter on the given route pattern."""
        self._app.router.add_post(pattern, self._handler(adapter))
        self._logger.info("adapter_registered", pattern=pattern, adapter=type(adapter).__name__)

    def _handler(self, adapter: BaseAdapter) -> Handler:
        async def handle(request: web.Request) -> web.Response:
            with bound_contextvars(request_id=uuid.uuid4().hex[:12], path=request.path):
                try:
                    command = await adapter.parse(request)
                except NotificationsBotError as exc:
                    self._logger.info("command_parse_failed", error_type=type(exc).__name__, error_message=str(exc))
                    return adapter.send_response(str(exc))

                try:
                    result = await self._router.execute(command)
                except NotificationsBotError as exc:
                    self._logger.warning(
                        "command_execution_failed",
                        error_type=type(exc).__name__,
                        error_message=str(exc),
                    )
                    return adapter.send_response(f"cannot execute command: {exc}")
                return adapter.send_response(result)

        return handle

    async def start(self, host: str, port: int) -> None:
        """Start listening on host:port (non-blocking)."""
        if self._runner is not None:
            self._logger.warning("server_already_running")
            return
        self._runner = web.AppRunner(self._app)
        await self._runner.setup()
        site = web.TCPSite(self._runner, host, port)
        await site.start()
        self._logger.info("server_started", host=host, port=port)

    async def stop(self) -> None:
        """Stop the server. Safe to call when not started."""
        if self._runner is None:
            return
        await self._runner.cleanup()
        self._runner = None
        self._logger.info("server_stopped")
