"""Gate use cases."""

from waypoint.application.usecase.gate.accept_terms import (
    AcceptTermsRequest,
    AcceptTermsResponse,
    AcceptTermsUseCase,
)

__all__ = [
    "AcceptTermsRequest",
    "AcceptTermsResponse",
    "AcceptTermsUseCase",
]
