"""Inspect invite use case."""

from datetime import datetime

from pydantic import BaseModel

from waypoint.application.usecase.base import BaseUseCase
from waypoint.domain.service import InviteBroker


class InspectInviteRequest(BaseModel):
    """Inspect invite request."""

    link_id: str


class InspectInviteResponse(BaseModel):
    """Diagnostic view of a cached invite."""

    link_id: str
    url: str
    code: str
    expires_at: datetime
    expires_in_seconds: int
    max_uses: int | None = None
    uses: int
    is_expired: bool


class InspectInviteUseCase(BaseUseCase):
    """Use case for reading the cache entry behind a link id.

    Read-only; never contacts upstream.
    """

    def __init__(self, invite_broker: InviteBroker) -> None:
        """Initialize inspect invite use case.

        Args:
            invite_broker: Invite broker domain service
        """
        self.invite_broker = invite_broker

    async def execute(self, request: InspectInviteRequest) -> InspectInviteResponse:
        """Describe the cached invite.

        Raises:
            NotFoundError: If nothing is cached for the link id
        """
        snapshot = await self.invite_broker.inspect(request.link_id)
        return InspectInviteResponse(**snapshot.model_dump())
