"""Recipient parsing: 'service:address' with an optional '?template' override.

A recipient such as ``slack:ops?on-sync-failed`` resolves to the destination
(service='slack', recipient='ops') and the template 'on-sync-failed'. Subscription
matching only looks at the destination, so the same address with different
templates counts as one destination.
"""

from __future__ import annotations

from dataclasses import dataclass

from notifications_bot.exceptions import InvalidRecipientError

SERVICE_SEPARATOR = ":"
TEMPLATE_SEPARATOR = "?"


@dataclass(frozen=True, slots=True)
class Destination:
    """Notification destination: service name plus service-specific address."""

    service: str
    recipient: str

    def __str__(self) -> str:
        return f"{self.service}{SERVICE_SEPARATOR}{self.recipient}"


def parse_destination(value: str) -> Destination:
    """Split 'service:address' into a Destination.

    Raises:
        InvalidRecipientError: If the separator is missing or either side is empty.
    """
    service, sep, address = value.partition(SERVICE_SEPARATOR)
    service = service.strip()
    address = address.strip()
    if not sep or not service or not address:
        raise InvalidRecipientError(value)
    return Destination(service=service, recipient=address)


def parse_destination_and_template(recipient: str) -> tuple[Destination, str]:
    """Return (destination, template) for a recipient string.

    The template is everything after the first '?', or '' when absent.

    Raises:
        InvalidRecipientError: If the destination part is malformed.
    """
    destination_part, _, template = recipient.partition(TEMPLATE_SEPARATOR)
    try:
        destination = parse_destination(destination_part)
    except InvalidRecipientError:
        raise InvalidRecipientError(recipient) from None
    return destination, template.strip()
