# -*- coding: utf-8 -*-
"""Repository interfaces (abstractions). Implementations live in in_memory/, kubernetes/."""

from notifications_bot.persistence.repositories.interfaces.resource_collection import (
    IResourceCollection,
)

__all__ = ["IResourceCollection"]
