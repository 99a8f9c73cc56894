# -*- coding: utf-8 -*-
"""Domain models."""

from notifications_bot.models.command import (
    Command,
    ListSubscriptions,
    Subscribe,
    Unsubscribe,
    UpdateTarget,
    command_from_fields,
)
from notifications_bot.models.recipient import (
    Destination,
    parse_destination,
    parse_destination_and_template,
)
from notifications_bot.models.resource import ManagedResource, ResourceKind

__all__ = [
    "Command",
    "Destination",
    "ListSubscriptions",
    "ManagedResource",
    "ResourceKind",
    "Subscribe",
    "Unsubscribe",
    "UpdateTarget",
    "command_from_fields",
    "parse_destination",
    "parse_destination_and_template",
]
