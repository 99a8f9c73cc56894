# -*- coding: utf-8 -*-
"""structlog setup for the bot: stdlib handlers, processor chain, optional Logfire export.

Every event carries the logger name, service identity and the Argo CD namespace the
bot manages, so log lines from the collections and the service can be correlated
with the cluster they touched.
"""

from __future__ import annotations

import logging
import logfire
import structlog
from typing import Any, Optional
from structlog.types import EventDict, Processor
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from notifications_bot.config import LoggingSettings, Settings, get_settings

LOGFIRE_LEVELS: dict[str, str] = {
    "DEBUG": "debug",
    "INFO": "info",
    "WARNING": "warn",
    "ERROR": "error",
    "CRITICAL": "fatal",
}

_PLAIN_FORMAT = logging.Formatter("%(message)s")


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


class ServiceContext:
    """structlog processor stamping service identity and managed namespace on each event."""

    def __init__(self, settings: Settings) -> None:
        app = settings.app
        self._static: dict[str, Any] = {
            "app_name": app.app_name,
            "environment": app.environment,
            "namespace": settings.kubernetes.namespace,
        }
        if app.service_name:
            self._static["service_name"] = app.service_name
        if app.service_version:
            self._static["service_version"] = app.service_version

    def __call__(self, logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        stdlib_logger = getattr(logger, "_logger", None)
        event_dict["logger"] = getattr(stdlib_logger, "name", None) or getattr(logger, "name", "") or ""
        for key, value in self._static.items():
            # bound context (e.g. a resource's own namespace) wins
            event_dict.setdefault(key, value)
        return event_dict


def _rotating_file_handler(cfg: LoggingSettings) -> logging.Handler:
    path = Path(cfg.log_file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return TimedRotatingFileHandler(
        path,
        when=cfg.log_file_when,
        interval=cfg.log_file_interval,
        backupCount=cfg.log_file_backup_count,
        encoding="utf-8",
        utc=cfg.log_file_utc,
    )


def build_handlers(cfg: LoggingSettings) -> list[logging.Handler]:
    """Stdlib handlers for the enabled local outputs, each with its own level."""
    targets: list[tuple[logging.Handler, str]] = []
    if cfg.log_to_console:
        targets.append((logging.StreamHandler(), cfg.console_level))
    if cfg.log_to_file:
        targets.append((_rotating_file_handler(cfg), cfg.file_level))

    for handler, level in targets:
        handler.setLevel(_level(level))
        handler.setFormatter(_PLAIN_FORMAT)
    return [handler for handler, _ in targets]


def _renderer(cfg: LoggingSettings) -> Optional[Processor]:
    """JSON when writing to a file or asked for; console rendering otherwise; None without outputs."""
    if not (cfg.log_to_console or cfg.log_to_file):
        return None
    if cfg.log_to_file or cfg.json_format:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _configure_logfire(settings: Settings) -> None:
    app = settings.app
    logfire.configure(
        token=settings.logging.logfire_token,
        service_name=app.service_name or app.app_name,
        service_version=app.service_version,
        min_level=LOGFIRE_LEVELS.get(settings.logging.logfire_level, "info"),  # type: ignore[arg-type]
        environment=app.environment,
    )


def build_processors(settings: Settings) -> list[Processor]:
    """Processor chain: level filter, bound context, metadata, Logfire, renderer."""
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        ServiceContext(settings),
    ]
    if settings.logging.logfire_enabled:
        processors.append(logfire.StructlogProcessor())  # type: ignore[arg-type]
    renderer = _renderer(settings.logging)
    if renderer is not None:
        processors.append(renderer)
    return processors


def configure_logging(settings: Settings | None = None) -> None:
    """Configure stdlib logging, Logfire and structlog from settings (defaults to get_settings())."""
    settings = settings or get_settings()

    handlers = build_handlers(settings.logging)
    if handlers:
        logging.basicConfig(
            level=min(handler.level for handler in handlers),
            handlers=handlers,
            force=True,
        )

    if settings.logging.logfire_enabled:
        _configure_logfire(settings)

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
