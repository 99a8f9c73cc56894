# -*- coding: utf-8 -*-
"""Repositories: interfaces (abstractions) and implementations (in_memory, kubernetes)."""

from notifications_bot.persistence.repositories.interfaces import IResourceCollection
from notifications_bot.persistence.repositories.in_memory import InMemoryResourceCollection
from notifications_bot.persistence.repositories.kubernetes import KubernetesResourceCollection

__all__ = [
    "IResourceCollection",
    "InMemoryResourceCollection",
    "KubernetesResourceCollection",
]
