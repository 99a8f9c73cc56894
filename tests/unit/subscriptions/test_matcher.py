# -*- coding: utf-8 -*-
"""Unit tests for matched_destinations."""

from __future__ import annotations

import pytest

from notifications_bot.exceptions import InvalidRecipientError
from notifications_bot.models.recipient import Destination
from notifications_bot.subscriptions.matcher import matched_destinations


def test_no_subscription_keys_yields_empty_set(base_key: str) -> None:
    assert matched_destinations({"other": "slack:a"}, base_key) == set()


def test_union_across_triggers_counts_destination_once(base_key: str) -> None:
    annotations = {
        base_key: "slack:ops,email:dev@example.com",
        f"on-sync-failed.{base_key}": "slack:ops?alert",
    }

    result = matched_destinations(annotations, base_key)

    assert result == {
        Destination(service="slack", recipient="ops"),
        Destination(service="email", recipient="dev@example.com"),
    }


def test_malformed_recipient_fails_whole_scan(base_key: str) -> None:
    annotations = {base_key: "slack:ops,broken"}

    with pytest.raises(InvalidRecipientError):
        matched_destinations(annotations, base_key)


def test_malformed_value_under_unrelated_key_is_ignored(base_key: str) -> None:
    annotations = {base_key: "slack:ops", "description": "not,a,recipient"}

    assert matched_destinations(annotations, base_key) == {Destination("slack", "ops")}
