"""Domain models."""

from waypoint.domain.model.invite import InviteCacheEntry
from waypoint.domain.model.key import PgpKey

__all__ = [
    "InviteCacheEntry",
    "PgpKey",
]
