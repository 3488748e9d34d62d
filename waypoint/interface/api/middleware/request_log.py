"""Access log middleware."""

import logfire
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


def client_ip(request: Request) -> str | None:
    """Client address, preferring the first ``X-Forwarded-For`` hop."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client:
        return request.client.host
    return None


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Logs every request with client IP, URL and user-agent."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)

        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"

        logfire.info(
            "{ip} - {url}",
            ip=client_ip(request),
            url=url,
            method=request.method,
            status_code=response.status_code,
            user_agent=request.headers.get("user-agent"),
        )
        return response
