"""Repository interfaces."""

from waypoint.domain.repository.credential import CredentialRepository
from waypoint.domain.repository.invite_cache import InviteCacheRepository
from waypoint.domain.repository.key import KeyRepository

__all__ = [
    "CredentialRepository",
    "InviteCacheRepository",
    "KeyRepository",
]
