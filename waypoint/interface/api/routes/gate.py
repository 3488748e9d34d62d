"""Terms gate routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Form, status
from fastapi.responses import RedirectResponse

from waypoint.application.usecase.gate import (
    AcceptTermsRequest,
    AcceptTermsUseCase,
)
from waypoint.config import GateSettings


def create_router(settings: GateSettings) -> APIRouter:
    """Build the gate router.

    The accept endpoint path is configurable, so the route is registered
    at app construction time.

    Args:
        settings: Gate configuration

    Returns:
        Router with the accept-terms endpoint
    """
    router = APIRouter(tags=["gate"], route_class=DishkaRoute)

    @router.post(settings.accept_path)
    async def accept_terms(
        accept_terms_use_case: FromDishka[AcceptTermsUseCase],
        return_to: str | None = Form(default=None, alias="returnTo"),
    ) -> RedirectResponse:
        """Record terms acceptance and send the visitor back.

        Args:
            accept_terms_use_case: Accept terms use case from DI
            return_to: Percent-encoded path the visitor was trying to reach

        Returns:
            302 redirect carrying the acceptance cookie
        """
        result = await accept_terms_use_case.execute(
            AcceptTermsRequest(return_to=return_to)
        )

        response = RedirectResponse(
            url=result.redirect_to, status_code=status.HTTP_302_FOUND
        )
        response.set_cookie(
            key=result.cookie_name,
            value=result.cookie_value,
            max_age=result.cookie_max_age,
            path="/",
            secure=True,
            httponly=True,
            samesite="lax",
        )
        return response

    return router
