"""Destination matcher: every destination subscribed on a resource, across triggers."""

from __future__ import annotations

from collections.abc import Mapping

from notifications_bot.config import DEFAULT_ANNOTATION_KEY
from notifications_bot.models.recipient import Destination, parse_destination_and_template
from notifications_bot.subscriptions.annotations import decode_recipients, is_subscription_key


def matched_destinations(
    annotations: Mapping[str, str],
    base: str = DEFAULT_ANNOTATION_KEY,
) -> set[Destination]:
    """Union of destinations listed under any subscription key.

    Raises:
        InvalidRecipientError: If any listed recipient is malformed. The whole scan fails
            so that listings never under-report.
    """
    destinations: set[Destination] = set()
    for key, value in annotations.items():
        if not is_subscription_key(key, base):
            continue
        for recipient in decode_recipients(value):
            destination, _ = parse_destination_and_template(recipient)
            destinations.add(destination)
    return destinations
