"""In-memory repository implementations."""

from notifications_bot.persistence.repositories.in_memory.resource_collection import (
    InMemoryResourceCollection,
)

__all__ = ["InMemoryResourceCollection"]
