"""Kubernetes repository implementations."""

from notifications_bot.persistence.repositories.kubernetes.resource_collection import (
    KubernetesResourceCollection,
)

__all__ = ["KubernetesResourceCollection"]
