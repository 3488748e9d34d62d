"""Repository implementations."""

from waypoint.persistence.repository.credential import JsonCredentialRepository
from waypoint.persistence.repository.key import JsonKeyRepository

__all__ = [
    "JsonCredentialRepository",
    "JsonKeyRepository",
]
