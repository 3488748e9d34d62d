"""Interface layer errors.

Maps domain errors onto HTTP errors with JSON bodies.
"""

from fastapi import HTTPException, status

from waypoint.domain.error import DomainError, NotFoundError, UpstreamError


def to_http_exception(error: DomainError) -> HTTPException:
    """Translate a domain error into an HTTPException.

    Upstream failures mirror the upstream status when it is an error status;
    transport and payload failures (no status) become 500.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException whose detail is a JSON object
    """
    if isinstance(error, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": f"{error.resource} not found"},
        )

    if isinstance(error, UpstreamError):
        upstream_status = error.status_code
        if upstream_status is None or upstream_status < 400:
            http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
        else:
            http_status = upstream_status
        return HTTPException(
            status_code=http_status,
            detail={
                "error": "Failed to create invite",
                "status": upstream_status,
                "details": error.detail,
            },
        )

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"error": str(error)},
    )
