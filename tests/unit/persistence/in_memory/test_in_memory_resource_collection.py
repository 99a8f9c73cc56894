# -*- coding: utf-8 -*-
"""Unit tests for InMemoryResourceCollection."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from notifications_bot.exceptions import ConflictError, RemoteFailureError
from notifications_bot.models.resource import ManagedResource, ResourceKind
from notifications_bot.persistence.repositories.in_memory.resource_collection import (
    InMemoryResourceCollection,
)


async def test_get_returns_none_for_unknown_name(applications: InMemoryResourceCollection) -> None:
    assert await applications.get("missing") is None


async def test_seeded_resource_gets_default_namespace_and_version() -> None:
    collection = InMemoryResourceCollection(
        ResourceKind.PROJECT,
        [ManagedResource(name="default")],
        namespace="argocd",
    )

    loaded = await collection.get("default")

    assert loaded is not None
    assert loaded.identity == "argocd/default"
    assert loaded.resource_version == "1"
    assert collection.kind is ResourceKind.PROJECT


async def test_returned_snapshot_is_isolated_from_store(
    applications: InMemoryResourceCollection,
    resource_factory: Callable[..., ManagedResource],
) -> None:
    applications.add(resource_factory(annotations={"a": "1"}))

    loaded = await applications.get("guestbook")
    assert loaded is not None
    loaded.annotations["a"] = "changed"

    again = await applications.get("guestbook")
    assert again is not None
    assert again.annotations == {"a": "1"}


async def test_patch_sets_and_deletes_keys_and_bumps_version(
    applications: InMemoryResourceCollection,
    resource_factory: Callable[..., ManagedResource],
) -> None:
    applications.add(resource_factory(annotations={"keep": "k", "drop": "d", "edit": "1"}))

    await applications.patch_annotations("guestbook", {"drop": None, "edit": "2", "new": "n"})

    loaded = await applications.get("guestbook")
    assert loaded is not None
    assert loaded.annotations == {"keep": "k", "edit": "2", "new": "n"}
    assert loaded.resource_version == "2"
    assert applications.patch_count == 1


async def test_patch_with_stale_version_conflicts(
    applications: InMemoryResourceCollection,
    resource_factory: Callable[..., ManagedResource],
) -> None:
    applications.add(resource_factory(resource_version="5"))

    with pytest.raises(ConflictError):
        await applications.patch_annotations("guestbook", {"a": "1"}, resource_version="4")
    assert applications.patch_count == 0


async def test_patch_unknown_resource_is_remote_failure(applications: InMemoryResourceCollection) -> None:
    with pytest.raises(RemoteFailureError) as exc_info:
        await applications.patch_annotations("missing", {"a": "1"})
    assert exc_info.value.status_code == 404


async def test_list_returns_all_resources(
    projects: InMemoryResourceCollection,
    resource_factory: Callable[..., ManagedResource],
) -> None:
    projects.add(resource_factory("default"))
    projects.add(resource_factory("platform"))

    listed = await projects.list()

    assert sorted(r.name for r in listed) == ["default", "platform"]
