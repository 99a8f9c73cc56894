"""In-memory resource collection (keyed by name).

Mirrors the API server's behaviour that matters to subscriptions: each patch bumps
resource_version, and a patch carrying a stale resource_version raises ConflictError.
"""

from __future__ import annotations

from dataclasses import replace

from notifications_bot.exceptions import ConflictError, RemoteFailureError
from notifications_bot.models.resource import ManagedResource, ResourceKind
from notifications_bot.persistence.repositories.interfaces.resource_collection import (
    IResourceCollection,
)
from notifications_bot.subscriptions.diff import PatchDiff


class InMemoryResourceCollection(IResourceCollection):
    """In-memory implementation of IResourceCollection."""

    def __init__(
        self,
        kind: ResourceKind,
        resources: list[ManagedResource] | None = None,
        *,
        namespace: str = "argocd",
    ) -> None:
        """Initialize the store with optional seed resources.

        Seed resources without a namespace get `namespace`; without a version get "1".
        """
        self._kind = kind
        self._namespace = namespace
        self._store: dict[str, ManagedResource] = {}
        self.patch_count = 0
        for resource in resources or []:
            self.add(resource)

    @property
    def kind(self) -> ResourceKind:
        return self._kind

    def add(self, resource: ManagedResource) -> None:
        """Insert or replace a resource (test/dev seeding)."""
        self._store[resource.name] = replace(
            resource,
            namespace=resource.namespace or self._namespace,
            annotations=dict(resource.annotations),
            resource_version=resource.resource_version or "1",
        )

    async def get(self, name: str) -> ManagedResource | None:
        resource = self._store.get(name)
        if resource is None:
            return None
        return replace(resource, annotations=dict(resource.annotations))

    async def list(self) -> list[ManagedResource]:
        return [replace(r, annotations=dict(r.annotations)) for r in self._store.values()]

    async def patch_annotations(
        self,
        name: str,
        diff: PatchDiff,
        *,
        resource_version: str | None = None,
    ) -> None:
        current = self._store.get(name)
        if current is None:
            raise RemoteFailureError(f"{self._kind.value} '{name}' not found", status_code=404)
        if resource_version is not None and resource_version != current.resource_version:
            raise ConflictError(
                f"{self._kind.value} '{name}' changed: expected version "
                f"{resource_version}, found {current.resource_version}"
            )
        annotations = dict(current.annotations)
        for key, value in diff.items():
            if value is None:
                annotations.pop(key, None)
            else:
                annotations[key] = value
        self._store[name] = replace(
            current,
            annotations=annotations,
            resource_version=str(int(current.resource_version or "0") + 1),
        )
        self.patch_count += 1
