"""In-memory invite cache."""

from waypoint.domain.model.invite import InviteCacheEntry
from waypoint.domain.repository.invite_cache import InviteCacheRepository


class InMemoryInviteCache(InviteCacheRepository):
    """Process-local invite cache.

    Unbounded and never evicted; contents are lost on restart.
    """

    def __init__(self) -> None:
        self._entries: dict[str, InviteCacheEntry] = {}

    async def get(self, link_id: str) -> InviteCacheEntry | None:
        """Find the cached invite for a link id."""
        return self._entries.get(link_id)

    async def put(self, link_id: str, entry: InviteCacheEntry) -> None:
        """Replace the cached invite for a link id."""
        self._entries[link_id] = entry
