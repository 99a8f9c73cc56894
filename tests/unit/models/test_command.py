# -*- coding: utf-8 -*-
"""Unit tests for command construction."""

from __future__ import annotations

import pytest

from notifications_bot.exceptions import AmbiguousCommandError, UnknownCommandError
from notifications_bot.models.command import (
    ListSubscriptions,
    Subscribe,
    Unsubscribe,
    UpdateTarget,
    command_from_fields,
)


def test_list_subscriptions_variant() -> None:
    cmd = command_from_fields("slack:ops", list_subscriptions=True)
    assert cmd == ListSubscriptions(recipient="slack:ops")


def test_subscribe_variant_carries_target() -> None:
    target = UpdateTarget(app="guestbook", trigger="on-sync-failed")
    cmd = command_from_fields("slack:ops", subscribe=target)
    assert cmd == Subscribe(recipient="slack:ops", target=target)


def test_unsubscribe_variant_carries_target() -> None:
    target = UpdateTarget(project="default")
    cmd = command_from_fields("slack:ops", unsubscribe=target)
    assert isinstance(cmd, Unsubscribe)
    assert cmd.target.project == "default"


def test_no_variant_is_unknown_command() -> None:
    with pytest.raises(UnknownCommandError, match="unknown command"):
        command_from_fields("slack:ops")


def test_several_variants_are_rejected() -> None:
    with pytest.raises(AmbiguousCommandError) as exc_info:
        command_from_fields(
            "slack:ops",
            list_subscriptions=True,
            subscribe=UpdateTarget(app="guestbook"),
        )
    assert exc_info.value.variants == ["list_subscriptions", "subscribe"]


def test_update_target_from_dict_strips_and_defaults() -> None:
    target = UpdateTarget.from_dict({"app": " guestbook ", "trigger": None})
    assert target == UpdateTarget(app="guestbook", project="", trigger="")
