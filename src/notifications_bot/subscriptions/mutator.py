"""Subscription mutator: add/remove a recipient on a copy of an annotation map."""

from __future__ import annotations

from collections.abc import Mapping

from notifications_bot.config import DEFAULT_ANNOTATION_KEY
from notifications_bot.subscriptions.annotations import (
    RECIPIENT_SEPARATOR,
    AnnotationKeySelector,
    annotation_key,
    decode_recipients,
    encode_recipients,
    normalize_recipient,
)


def add_subscription(
    annotations: Mapping[str, str],
    recipient: str,
    trigger: str = "",
    *,
    base: str = DEFAULT_ANNOTATION_KEY,
) -> dict[str, str]:
    """Return a copy of annotations with recipient appended to the trigger's list.

    Idempotent: an already-present recipient leaves the copy unchanged. The recipient
    is trimmed first; an empty one or one containing a comma raises InvalidRecipientError.
    """
    recipient = normalize_recipient(recipient)
    result = dict(annotations)
    key = annotation_key(trigger, base)
    existing = decode_recipients(result.get(key))
    if recipient not in existing:
        result[key] = RECIPIENT_SEPARATOR.join([*existing, recipient])
    return result


def remove_subscription(
    annotations: Mapping[str, str],
    recipient: str,
    trigger: str = "",
    *,
    selector: AnnotationKeySelector | None = None,
) -> dict[str, str]:
    """Return a copy of annotations with recipient removed from every selected key.

    Only the first occurrence per key is removed. A key whose list becomes empty is
    deleted rather than set to ''. Keys not holding the recipient are left alone.
    """
    selector = selector or AnnotationKeySelector()
    recipient = normalize_recipient(recipient)
    result = dict(annotations)
    for key in selector.select(result, trigger):
        existing = decode_recipients(result[key])
        if recipient not in existing:
            continue
        existing.remove(recipient)
        encoded = encode_recipients(existing)
        if encoded is None:
            del result[key]
        else:
            result[key] = encoded
    return result
