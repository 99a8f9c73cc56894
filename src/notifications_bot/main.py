# -*- coding: utf-8 -*-
"""
Entry point for the notifications bot.

Orchestrates: logging, settings, container, adapter registration, HTTP server, shutdown (SIGINT/SIGTERM or CancelledError).
Requests flow: adapter.parse -> CommandRouter -> SubscriptionService -> Kubernetes collections -> adapter.send_response.

Run with: python -m notifications_bot.main
"""
from __future__ import annotations

import asyncio
import signal
import structlog

from notifications_bot.DI import Container
from notifications_bot.config import get_settings
from notifications_bot.exceptions import MissingRequiredConfigError
from notifications_bot.logging.config import configure_logging


def _setup_signals(shutdown_event: asyncio.Event) -> None:
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, shutdown_event.set)
        except NotImplementedError:
            pass  # Windows has no add_signal_handler


async def run() -> None:
    configure_logging()
    logger = structlog.get_logger("main")
    settings = get_settings()
    if not settings.kubernetes.namespace.strip():
        logger.error("main_missing_namespace", message="KUBERNETES__NAMESPACE is not set")
        raise MissingRequiredConfigError("KUBERNETES__NAMESPACE")

    container = Container()
    server = container.bot_server()
    server.add_adapter(settings.server.json_adapter_path, container.json_adapter())

    shutdown_event = asyncio.Event()
    _setup_signals(shutdown_event)

    await server.start(settings.server.host, settings.server.port)
    logger.info(
        "main_bot_started",
        namespace=settings.kubernetes.namespace,
        annotation_key=settings.subscriptions.annotation_key,
    )
    try:
        await shutdown_event.wait()
    finally:
        await server.stop()
        logger.info("main_shutdown_complete")


def main() -> None:
    asyncio.run(run())


__all__ = ["run", "main"]

if __name__ == "__main__":
    main()
