"""Invite cache entry.

A cached Discord invite for one link id. Entries are replaced wholesale on
every successful upstream refresh and are never deleted, so an expired entry
can still be served when the upstream is unavailable.
"""

import math
from datetime import datetime

from waypoint.domain.model.common import DomainModel


class InviteCacheEntry(DomainModel):
    """Resolved invite for a link id.

    ``max_uses`` and ``uses`` mirror the upstream counters and are advisory
    only; nothing enforces them locally.
    """

    url: str
    code: str
    expires_at: datetime
    max_uses: int | None = None
    uses: int = 0

    def is_expired(self, now: datetime) -> bool:
        """Whether the entry is no longer fresh at ``now``."""
        return self.expires_at <= now

    def seconds_remaining(self, now: datetime) -> int:
        """Whole seconds until expiry, floored at zero."""
        return max(0, math.floor((self.expires_at - now).total_seconds()))
