"""Domain value objects for Waypoint.

Value objects are immutable and defined by their values, not identity.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field

from waypoint.domain.value.common import ValueObject


class GateDecision(str, Enum):
    """Outcome of running a request through the terms gate."""

    PASS = "pass"
    INTERCEPT = "intercept"


class InviteSource(str, Enum):
    """Where a resolved invite URL came from.

    Only used for logging; callers get the same redirect either way.
    """

    CACHE = "cache"
    REFRESHED = "refreshed"
    STALE_FALLBACK = "stale_fallback"


class UpstreamInvite(ValueObject):
    """Invite payload returned by the upstream invite-creation endpoint.

    Only ``code`` is required. Extra fields in the upstream JSON are ignored.
    """

    code: str = Field(min_length=1)
    max_age: int | None = None
    max_uses: int | None = None
    uses: int = 0


class InviteSnapshot(ValueObject):
    """Point-in-time view of a cached invite, for diagnostics."""

    link_id: str
    url: str
    code: str
    expires_at: datetime
    expires_in_seconds: int
    max_uses: int | None = None
    uses: int = 0
    is_expired: bool
