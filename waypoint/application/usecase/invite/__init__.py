"""Invite use cases."""

from waypoint.application.usecase.invite.inspect_invite import (
    InspectInviteRequest,
    InspectInviteResponse,
    InspectInviteUseCase,
)
from waypoint.application.usecase.invite.resolve_invite import (
    ResolveInviteRequest,
    ResolveInviteResponse,
    ResolveInviteUseCase,
)

__all__ = [
    "InspectInviteRequest",
    "InspectInviteResponse",
    "InspectInviteUseCase",
    "ResolveInviteRequest",
    "ResolveInviteResponse",
    "ResolveInviteUseCase",
]
