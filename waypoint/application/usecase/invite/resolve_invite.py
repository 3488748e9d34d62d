"""Resolve invite use case."""

from pydantic import BaseModel

from waypoint.domain.service import InviteBroker

from waypoint.application.usecase.base import BaseUseCase


class ResolveInviteRequest(BaseModel):
    """Resolve invite request."""

    link_id: str


class ResolveInviteResponse(BaseModel):
    """Resolve invite response."""

    url: str


class ResolveInviteUseCase(BaseUseCase):
    """Use case for turning a link id into an invite URL to redirect to."""

    def __init__(self, invite_broker: InviteBroker) -> None:
        """Initialize resolve invite use case.

        Args:
            invite_broker: Invite broker domain service
        """
        self.invite_broker = invite_broker

    async def execute(self, request: ResolveInviteRequest) -> ResolveInviteResponse:
        """Resolve the invite.

        Raises:
            NotFoundError: If the link id is not registered
            UpstreamError: If no invite could be produced
        """
        url = await self.invite_broker.resolve(request.link_id)
        return ResolveInviteResponse(url=url)
