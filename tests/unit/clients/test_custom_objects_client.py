# -*- coding: utf-8 -*-
"""Unit tests for AsyncCustomObjectsClient (sync API double)."""

from __future__ import annotations

from unittest.mock import MagicMock

from notifications_bot.clients.kubernetes.custom_objects import (
    MERGE_PATCH_CONTENT_TYPE,
    AsyncCustomObjectsClient,
)
from notifications_bot.config import Settings


def _client(api: MagicMock) -> AsyncCustomObjectsClient:
    settings = Settings.from_env(
        kubernetes={"namespace": "team-a", "group": "argoproj.io", "version": "v1alpha1"},
    )
    return AsyncCustomObjectsClient(settings, api=api)


async def test_get_passes_coordinates() -> None:
    api = MagicMock()
    api.get_namespaced_custom_object.return_value = {"metadata": {"name": "guestbook"}}

    result = await _client(api).get("applications", "guestbook")

    assert result == {"metadata": {"name": "guestbook"}}
    api.get_namespaced_custom_object.assert_called_once_with(
        name="guestbook",
        group="argoproj.io",
        version="v1alpha1",
        namespace="team-a",
        plural="applications",
    )


async def test_list_returns_items() -> None:
    api = MagicMock()
    api.list_namespaced_custom_object.return_value = {"items": [{"a": 1}, {"b": 2}]}

    assert await _client(api).list("appprojects") == [{"a": 1}, {"b": 2}]


async def test_list_without_items_returns_empty() -> None:
    api = MagicMock()
    api.list_namespaced_custom_object.return_value = {}

    assert await _client(api).list("appprojects") == []


async def test_merge_patch_uses_merge_patch_content_type() -> None:
    api = MagicMock()
    body = {"metadata": {"annotations": {"a": None}}}

    await _client(api).merge_patch("applications", "guestbook", body)

    api.patch_namespaced_custom_object.assert_called_once_with(
        name="guestbook",
        body=body,
        _content_type=MERGE_PATCH_CONTENT_TYPE,
        group="argoproj.io",
        version="v1alpha1",
        namespace="team-a",
        plural="applications",
    )
