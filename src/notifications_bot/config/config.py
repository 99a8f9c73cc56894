# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, KUBERNETES__NAMESPACE.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ANNOTATION_KEY = "recipients.argocd-notifications.argoproj.io"


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "notifications-bot"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Local outputs
    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/notifications_bot.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    # Logfire integration via structlog
    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class KubernetesSettings(BaseSettings):
    """Kubernetes API access and Argo CD resource coordinates (from env KUBERNETES__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    namespace: str = Field(
        default="argocd",
        description="Namespace holding the Application and AppProject resources.",
    )
    in_cluster: bool = Field(
        default=False,
        description="Load the service account config instead of a kubeconfig file.",
    )
    kubeconfig: Optional[str] = Field(
        default=None,
        description="Path to a kubeconfig file. Defaults to ~/.kube/config.",
    )
    context: Optional[str] = Field(default=None, description="Kubeconfig context name.")
    group: str = Field(default="argoproj.io", description="Argo CD API group.")
    version: str = Field(default="v1alpha1", description="Argo CD API version.")
    application_plural: str = "applications"
    project_plural: str = "appprojects"


class SubscriptionSettings(BaseSettings):
    """Subscription annotation behaviour (from env SUBSCRIPTIONS__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    annotation_key: str = Field(
        default=DEFAULT_ANNOTATION_KEY,
        description="Base annotation key; trigger-scoped keys are '<trigger>.<annotation_key>'.",
    )
    empty_trigger_scope: Literal["all_triggers", "default_only"] = Field(
        default="all_triggers",
        description=(
            "Keys touched by an unsubscribe without a trigger: every subscription key, "
            "or only the default key."
        ),
    )
    max_conflict_retries: int = Field(
        default=3,
        ge=0,
        le=20,
        description="Re-fetch and reapply attempts after a resourceVersion conflict.",
    )


class ServerSettings(BaseSettings):
    """HTTP server configuration (from env SERVER__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    json_adapter_path: str = Field(
        default="/api/commands",
        description="Route the JSON command adapter is registered on.",
    )


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, SUBSCRIPTIONS__ANNOTATION_KEY.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    kubernetes: KubernetesSettings = Field(default_factory=KubernetesSettings)
    subscriptions: SubscriptionSettings = Field(default_factory=SubscriptionSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as flat keys or nested dicts, e.g.:
        - from_env(server={"port": 9000})
        - from_env(subscriptions={"empty_trigger_scope": "default_only"})

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from notifications_bot.config import get_settings

        settings = get_settings()
        namespace = settings.kubernetes.namespace
        base_key = settings.subscriptions.annotation_key
    """
    return Settings()
