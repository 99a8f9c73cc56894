# -*- coding: utf-8 -*-
"""Unit tests for the annotation codec and key selector."""

from __future__ import annotations

from notifications_bot.subscriptions.annotations import (
    AnnotationKeySelector,
    annotation_key,
    decode_recipients,
    encode_recipients,
    is_subscription_key,
)


def test_annotation_key_without_trigger_is_base(base_key: str) -> None:
    assert annotation_key("", base_key) == base_key


def test_annotation_key_with_trigger_is_prefixed(base_key: str) -> None:
    assert annotation_key("on-sync-failed", base_key) == f"on-sync-failed.{base_key}"


def test_annotation_key_custom_base() -> None:
    assert annotation_key("", "notified.argoproj.io") == "notified.argoproj.io"
    assert annotation_key("t", "notified.argoproj.io") == "t.notified.argoproj.io"


def test_decode_empty_value_yields_empty_list() -> None:
    assert decode_recipients("") == []
    assert decode_recipients(None) == []


def test_decode_preserves_order_and_trims_blanks() -> None:
    assert decode_recipients("slack:b, slack:a,,email:c ") == ["slack:b", "slack:a", "email:c"]


def test_encode_joins_with_comma() -> None:
    assert encode_recipients(["slack:a", "slack:b"]) == "slack:a,slack:b"


def test_encode_empty_means_absent_key() -> None:
    assert encode_recipients([]) is None


def test_is_subscription_key(base_key: str) -> None:
    assert is_subscription_key(base_key, base_key)
    assert is_subscription_key(f"on-deployed.{base_key}", base_key)
    assert not is_subscription_key("other.argoproj.io", base_key)
    assert not is_subscription_key(f"x{base_key}", base_key)


def test_selector_with_trigger_selects_only_that_key(base_key: str) -> None:
    annotations = {
        base_key: "slack:a",
        f"t1.{base_key}": "slack:a",
        f"t2.{base_key}": "slack:a",
    }
    selector = AnnotationKeySelector(base=base_key)

    assert selector.select(annotations, "t1") == [f"t1.{base_key}"]
    assert selector.select(annotations, "missing") == []


def test_selector_empty_trigger_all_triggers_scope(base_key: str) -> None:
    annotations = {
        f"t2.{base_key}": "slack:a",
        base_key: "slack:a",
        "unrelated": "x",
        f"t1.{base_key}": "slack:a",
    }
    selector = AnnotationKeySelector(base=base_key, empty_trigger_scope="all_triggers")

    assert selector.select(annotations) == sorted([base_key, f"t1.{base_key}", f"t2.{base_key}"])


def test_selector_empty_trigger_default_only_scope(base_key: str) -> None:
    annotations = {base_key: "slack:a", f"t1.{base_key}": "slack:a"}
    selector = AnnotationKeySelector(base=base_key, empty_trigger_scope="default_only")

    assert selector.select(annotations) == [base_key]
    assert selector.select({f"t1.{base_key}": "slack:a"}) == []
