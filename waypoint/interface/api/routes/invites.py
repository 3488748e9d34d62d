"""Invite routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

from waypoint.application.usecase.invite import (
    InspectInviteRequest,
    InspectInviteResponse,
    InspectInviteUseCase,
    ResolveInviteRequest,
    ResolveInviteUseCase,
)
from waypoint.domain.error import NotFoundError, UpstreamError
from waypoint.interface.error import to_http_exception

router = APIRouter(prefix="/discord", tags=["invites"], route_class=DishkaRoute)


@router.get("/{link_id}")
async def resolve_invite(
    link_id: str,
    resolve_invite_use_case: FromDishka[ResolveInviteUseCase],
) -> RedirectResponse:
    """Redirect to a Discord invite for the link.

    Args:
        link_id: Short link identifier
        resolve_invite_use_case: Resolve invite use case from DI

    Returns:
        302 redirect to the invite URL

    Raises:
        HTTPException: 404 for unknown links, upstream status (or 500) when
            no invite could be produced
    """
    try:
        response = await resolve_invite_use_case.execute(
            ResolveInviteRequest(link_id=link_id)
        )
    except (NotFoundError, UpstreamError) as e:
        raise to_http_exception(e)

    return RedirectResponse(url=response.url, status_code=status.HTTP_302_FOUND)


@router.get("/{link_id}/cache", response_model=InspectInviteResponse)
async def inspect_invite(
    link_id: str,
    inspect_invite_use_case: FromDishka[InspectInviteUseCase],
) -> InspectInviteResponse:
    """Show the cached invite for a link without refreshing it.

    Raises:
        HTTPException: 404 if nothing is cached for the link
    """
    try:
        return await inspect_invite_use_case.execute(
            InspectInviteRequest(link_id=link_id)
        )
    except NotFoundError as e:
        raise to_http_exception(e)
