# -*- coding: utf-8 -*-
"""Abstract interface for an annotation-bearing resource collection (Kubernetes, in-memory, etc.)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from notifications_bot.models.resource import ManagedResource, ResourceKind
from notifications_bot.subscriptions.diff import PatchDiff


class IResourceCollection(ABC):
    """Interface for one collection of managed resources (applications or projects).

    The collection never creates or deletes resources; it only reads them and
    patches their annotations.
    """

    @property
    @abstractmethod
    def kind(self) -> ResourceKind:
        """Which resource kind this collection holds."""
        ...

    @abstractmethod
    async def get(self, name: str) -> Optional[ManagedResource]:
        """Return the resource by name, or None if missing.

        Raises:
            RemoteFailureError: If the backend call fails for any other reason.
        """
        ...

    @abstractmethod
    async def list(self) -> list[ManagedResource]:
        """Return every resource in the collection."""
        ...

    @abstractmethod
    async def patch_annotations(
        self,
        name: str,
        diff: PatchDiff,
        *,
        resource_version: str | None = None,
    ) -> None:
        """Apply diff to the resource annotations (None values delete keys).

        Raises:
            ConflictError: If resource_version is given and no longer current.
            RemoteFailureError: If the patch fails.
        """
        ...
