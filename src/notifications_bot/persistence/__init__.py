"""Persistence layer (resource collections)."""

from notifications_bot.persistence.repositories import (
    IResourceCollection,
    InMemoryResourceCollection,
    KubernetesResourceCollection,
)

__all__ = [
    "IResourceCollection",
    "InMemoryResourceCollection",
    "KubernetesResourceCollection",
]
