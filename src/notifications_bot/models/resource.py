"""ManagedResource: annotation-bearing Argo CD object (Application or AppProject)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ResourceKind(str, Enum):
    """Collection a subscription targets."""

    APPLICATION = "application"
    PROJECT = "project"

    @property
    def label(self) -> str:
        """Human-readable name used in messages."""
        return "Application" if self is ResourceKind.APPLICATION else "Project"


@dataclass(frozen=True, slots=True)
class ManagedResource:
    """Read-only snapshot of a resource's identity and annotations.

    Identity: (namespace, name). resource_version is the server-side version at
    fetch time, used as the precondition for annotation patches.
    """

    name: str
    namespace: str = ""
    annotations: dict[str, str] = field(default_factory=dict)
    resource_version: str | None = None

    @property
    def identity(self) -> str:
        """'namespace/name' as shown in listings."""
        return f"{self.namespace}/{self.name}"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ManagedResource:
        """Build from a Kubernetes object dict (as returned by CustomObjectsApi)."""
        metadata = data.get("metadata") or {}
        return cls(
            name=metadata.get("name") or "",
            namespace=metadata.get("namespace") or "",
            annotations=dict(metadata.get("annotations") or {}),
            resource_version=metadata.get("resourceVersion"),
        )
