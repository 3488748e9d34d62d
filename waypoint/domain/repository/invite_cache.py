"""Invite cache repository interface."""

from abc import ABC, abstractmethod

from waypoint.domain.model.invite import InviteCacheEntry


class InviteCacheRepository(ABC):
    """Storage for resolved invites, keyed by link id.

    Holds at most one entry per link id. Entries are only ever replaced,
    never removed.
    """

    @abstractmethod
    async def get(self, link_id: str) -> InviteCacheEntry | None:
        """Find the cached invite for a link id.

        Args:
            link_id: The short link identifier

        Returns:
            The cached entry (possibly expired) if present, None otherwise
        """
        pass

    @abstractmethod
    async def put(self, link_id: str, entry: InviteCacheEntry) -> None:
        """Store an entry, replacing any existing one for the link id.

        Args:
            link_id: The short link identifier
            entry: The freshly resolved invite
        """
        pass
