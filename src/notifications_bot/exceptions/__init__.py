"""Exceptions subpackage."""

from notifications_bot.exceptions.exceptions import (
    AmbiguousCommandError,
    ConflictError,
    InvalidRecipientError,
    InvalidRequestError,
    MissingRequiredConfigError,
    MissingTargetError,
    NotificationsBotError,
    RemoteFailureError,
    ResourceNotFoundError,
    UnknownCommandError,
)

__all__ = [
    "AmbiguousCommandError",
    "ConflictError",
    "InvalidRecipientError",
    "InvalidRequestError",
    "MissingRequiredConfigError",
    "MissingTargetError",
    "NotificationsBotError",
    "RemoteFailureError",
    "ResourceNotFoundError",
    "UnknownCommandError",
]
