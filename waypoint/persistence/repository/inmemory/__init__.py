"""In-memory repository implementations."""

from waypoint.persistence.repository.inmemory.credential import (
    InMemoryCredentialRepository,
)
from waypoint.persistence.repository.inmemory.invite_cache import InMemoryInviteCache
from waypoint.persistence.repository.inmemory.key import InMemoryKeyRepository

__all__ = [
    "InMemoryCredentialRepository",
    "InMemoryInviteCache",
    "InMemoryKeyRepository",
]
