"""Repository implementations for infrastructure layer."""

from .activity_repository import ActivityRepository, InMemoryActivityRepository

__all__ = ["ActivityRepository", "InMemoryActivityRepository"]
