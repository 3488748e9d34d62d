"""Domain value objects for Waypoint."""

from waypoint.domain.value.types import (
    GateDecision,
    InviteSnapshot,
    InviteSource,
    UpstreamInvite,
)

__all__ = [
    "GateDecision",
    "InviteSnapshot",
    "InviteSource",
    "UpstreamInvite",
]
