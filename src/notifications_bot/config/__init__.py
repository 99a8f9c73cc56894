"""Configuration subpackage."""

from notifications_bot.config.config import (
    DEFAULT_ANNOTATION_KEY,
    AppSettings,
    KubernetesSettings,
    LoggingSettings,
    ServerSettings,
    Settings,
    SubscriptionSettings,
    get_settings,
)

__all__ = [
    "DEFAULT_ANNOTATION_KEY",
    "AppSettings",
    "KubernetesSettings",
    "LoggingSettings",
    "ServerSettings",
    "Settings",
    "SubscriptionSettings",
    "get_settings",
]
