# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from notifications_bot.config import DEFAULT_ANNOTATION_KEY
from notifications_bot.models.resource import ManagedResource, ResourceKind
from notifications_bot.persistence.repositories.in_memory.resource_collection import (
    InMemoryResourceCollection,
)
from notifications_bot.services.subscriptions.subscription_service import SubscriptionService
from notifications_bot.subscriptions.annotations import AnnotationKeySelector


@pytest.fixture
def base_key() -> str:
    """Default subscription annotation key."""
    return DEFAULT_ANNOTATION_KEY


@pytest.fixture
def namespace() -> str:
    """Namespace used for seeded resources."""
    return "argocd"


@pytest.fixture
def resource_factory(namespace: str) -> Callable[..., ManagedResource]:
    """Build ManagedResource with sensible defaults and easy overrides."""

    def _build(name: str = "guestbook", **overrides: Any) -> ManagedResource:
        return ManagedResource(
            name=name,
            namespace=overrides.pop("namespace", namespace),
            annotations=dict(overrides.pop("annotations", {})),
            resource_version=overrides.pop("resource_version", "1"),
        )

    return _build


@pytest.fixture
def selector(base_key: str) -> AnnotationKeySelector:
    """Key selector with the default (all_triggers) empty-trigger scope."""
    return AnnotationKeySelector(base=base_key)


@pytest.fixture
def applications(namespace: str) -> InMemoryResourceCollection:
    """Fresh in-memory application collection per test."""
    return InMemoryResourceCollection(ResourceKind.APPLICATION, namespace=namespace)


@pytest.fixture
def projects(namespace: str) -> InMemoryResourceCollection:
    """Fresh in-memory project collection per test."""
    return InMemoryResourceCollection(ResourceKind.PROJECT, namespace=namespace)


@pytest.fixture
def subscription_service(
    applications: InMemoryResourceCollection,
    projects: InMemoryResourceCollection,
    selector: AnnotationKeySelector,
) -> SubscriptionService:
    """SubscriptionService over the in-memory collections."""
    return SubscriptionService(
        applications=applications,
        projects=projects,
        selector=selector,
    )
