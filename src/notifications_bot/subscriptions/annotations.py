"""Annotation codec: key derivation and recipient list encoding.

Subscription state lives in resource annotations. The default subscription list
is stored under the base key; trigger-scoped lists under '<trigger>.<base>'.
Each value is a comma-joined recipient list. An empty list is never stored:
encode_recipients() returns None and callers delete the key.

No I/O.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Literal

from notifications_bot.config import DEFAULT_ANNOTATION_KEY
from notifications_bot.exceptions import InvalidRecipientError

RECIPIENT_SEPARATOR = ","

EmptyTriggerScope = Literal["all_triggers", "default_only"]


def annotation_key(trigger: str = "", base: str = DEFAULT_ANNOTATION_KEY) -> str:
    """Return the annotation key holding subscriptions for a trigger ('' = default key)."""
    if not trigger:
        return base
    return f"{trigger}.{base}"


def is_subscription_key(key: str, base: str = DEFAULT_ANNOTATION_KEY) -> bool:
    """True for the default key and any trigger-scoped key built on base."""
    return key == base or key.endswith(f".{base}")


def decode_recipients(value: str | None) -> list[str]:
    """Split an annotation value into recipients, trimming blanks and dropping empties."""
    if not value:
        return []
    return [r.strip() for r in value.split(RECIPIENT_SEPARATOR) if r.strip()]


def normalize_recipient(recipient: str) -> str:
    """Trim a recipient for storage; reject values the list encoding cannot hold."""
    value = recipient.strip()
    if not value or RECIPIENT_SEPARATOR in value:
        raise InvalidRecipientError(recipient)
    return value


def encode_recipients(recipients: Iterable[str]) -> str | None:
    """Join recipients for storage. Returns None for an empty list (key must be deleted)."""
    items = list(recipients)
    if not items:
        return None
    return RECIPIENT_SEPARATOR.join(items)


@dataclass(frozen=True)
class AnnotationKeySelector:
    """Which subscription keys an unsubscribe touches.

    With a trigger, only '<trigger>.<base>' is selected. Without one, the scope decides:
    'all_triggers' selects every subscription key (default and trigger-scoped),
    'default_only' selects just the base key.
    """

    base: str = DEFAULT_ANNOTATION_KEY
    empty_trigger_scope: EmptyTriggerScope = "all_triggers"

    def select(self, annotations: Mapping[str, str], trigger: str = "") -> list[str]:
        """Return the matching keys present in annotations, sorted."""
        if trigger:
            wanted = annotation_key(trigger, self.base)
            return [wanted] if wanted in annotations else []
        if self.empty_trigger_scope == "default_only":
            return [self.base] if self.base in annotations else []
        return sorted(k for k in annotations if is_subscription_key(k, self.base))
