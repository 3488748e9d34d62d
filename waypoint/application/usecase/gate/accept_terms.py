"""Accept terms use case."""

import logfire
from pydantic import BaseModel

from waypoint.config import GateSettings
from waypoint.domain.service import GateService

from waypoint.application.usecase.base import BaseUseCase


class AcceptTermsRequest(BaseModel):
    """Accept terms request."""

    return_to: str | None = None  # Percent-encoded, as posted by the interstitial


class AcceptTermsResponse(BaseModel):
    """Accept terms response: where to go and which cookie to set."""

    redirect_to: str
    cookie_name: str
    cookie_value: str
    cookie_max_age: int


class AcceptTermsUseCase(BaseUseCase):
    """Use case for recording terms acceptance.

    Acceptance lives entirely in the client's cookie; nothing is stored.
    """

    def __init__(self, gate_service: GateService, settings: GateSettings) -> None:
        """Initialize accept terms use case.

        Args:
            gate_service: Gate domain service
            settings: Gate configuration
        """
        self.gate_service = gate_service
        self.settings = settings

    async def execute(self, request: AcceptTermsRequest) -> AcceptTermsResponse:
        """Validate the return target and describe the acceptance cookie.

        Args:
            request: Accept request with optional encoded return target

        Returns:
            Redirect target and cookie parameters
        """
        redirect_to = self.gate_service.resolve_return_to(request.return_to)
        logfire.info("Terms accepted", redirect_to=redirect_to)
        return AcceptTermsResponse(
            redirect_to=redirect_to,
            cookie_name=self.settings.cookie_name,
            cookie_value=self.settings.cookie_value,
            cookie_max_age=self.settings.cookie_max_age_seconds,
        )
