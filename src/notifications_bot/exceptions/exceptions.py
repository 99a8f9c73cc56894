"""Custom exceptions for subscription commands and resource access."""

from __future__ import annotations


class NotificationsBotError(Exception):
    """Base exception for notifications bot errors."""

    pass


class MissingRequiredConfigError(NotificationsBotError):
    """Raised when a required configuration value is missing."""

    pass


class InvalidRequestError(NotificationsBotError):
    """Raised by an adapter when an inbound request cannot be decoded into a command."""

    pass


class InvalidRecipientError(NotificationsBotError):
    """Raised when a recipient string cannot be split into service and address."""

    def __init__(self, recipient: str) -> None:
        super().__init__(
            f"{recipient} is not valid recipient. Expected recipient format is <type>:<name>"
        )
        self.recipient = recipient


class MissingTargetError(NotificationsBotError):
    """Raised when an update names neither an application nor a project."""

    def __init__(self, message: str = "either application or project name must be specified") -> None:
        super().__init__(message)


class ResourceNotFoundError(NotificationsBotError):
    """Raised when the targeted application or project does not exist."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind} '{name}' not found")
        self.kind = kind
        self.name = name


class UnknownCommandError(NotificationsBotError):
    """Raised when a command carries no known variant."""

    def __init__(self, message: str = "unknown command") -> None:
        super().__init__(message)


class AmbiguousCommandError(UnknownCommandError):
    """Raised when a command sets more than one variant."""

    def __init__(self, variants: list[str]) -> None:
        super().__init__(f"only one command expected, got: {', '.join(variants)}")
        self.variants = variants


class RemoteFailureError(NotificationsBotError):
    """Raised when a get/list/patch call against the resource API fails."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.cause = cause


class ConflictError(RemoteFailureError):
    """Raised when a patch is rejected because the resourceVersion changed (HTTP 409)."""

    def __init__(
        self,
        message: str = "resource was modified concurrently (409)",
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, status_code=409, cause=cause)
