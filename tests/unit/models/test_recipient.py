# -*- coding: utf-8 -*-
"""Unit tests for recipient parsing."""

from __future__ import annotations

import pytest

from notifications_bot.exceptions import InvalidRecipientError
from notifications_bot.models.recipient import (
    Destination,
    parse_destination,
    parse_destination_and_template,
)


def test_parse_destination_splits_service_and_address() -> None:
    assert parse_destination("slack:ops") == Destination(service="slack", recipient="ops")


def test_parse_destination_keeps_colons_in_address() -> None:
    dest = parse_destination("webhook:http://example.com")
    assert dest.service == "webhook"
    assert dest.recipient == "http://example.com"


def test_parse_destination_and_template_without_template() -> None:
    dest, template = parse_destination_and_template("email:dev@example.com")
    assert dest == Destination(service="email", recipient="dev@example.com")
    assert template == ""


def test_parse_destination_and_template_with_template() -> None:
    dest, template = parse_destination_and_template("slack:ops?on-sync-failed")
    assert dest == Destination(service="slack", recipient="ops")
    assert template == "on-sync-failed"


def test_destinations_with_different_templates_are_equal() -> None:
    a, _ = parse_destination_and_template("slack:ops?a")
    b, _ = parse_destination_and_template("slack:ops")
    assert a == b
    assert str(a) == "slack:ops"


@pytest.mark.parametrize("value", ["ops", ":ops", "slack:", "", "slack?tpl", " : "])
def test_malformed_recipient_raises(value: str) -> None:
    with pytest.raises(InvalidRecipientError) as exc_info:
        parse_destination_and_template(value)
    assert exc_info.value.recipient == value
