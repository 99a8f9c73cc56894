# -*- coding: utf-8 -*-
"""Subscription state algebra over resource annotations (pure, no I/O)."""

from notifications_bot.subscriptions.annotations import (
    AnnotationKeySelector,
    annotation_key,
    decode_recipients,
    encode_recipients,
    is_subscription_key,
    normalize_recipient,
)
from notifications_bot.subscriptions.diff import PatchDiff, annotations_patch, build_merge_patch
from notifications_bot.subscriptions.matcher import matched_destinations
from notifications_bot.subscriptions.mutator import add_subscription, remove_subscription

__all__ = [
    "AnnotationKeySelector",
    "PatchDiff",
    "add_subscription",
    "annotation_key",
    "annotations_patch",
    "build_merge_patch",
    "decode_recipients",
    "encode_recipients",
    "is_subscription_key",
    "matched_destinations",
    "normalize_recipient",
    "remove_subscription",
]
