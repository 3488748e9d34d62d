"""Terms gate middleware.

Serves the terms interstitial in place of guarded pages until the visitor
accepts. The visible URL never changes: the interstitial is the response
body for the original request.
"""

import logfire
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import HTMLResponse, PlainTextResponse, Response
from starlette.types import ASGIApp

from waypoint.domain.service import GateService
from waypoint.domain.value import GateDecision

MISSING_DOCUMENT_NOTICE = "ToS page not found. Please add public/tos.html"


class TermsGateMiddleware(BaseHTTPMiddleware):
    """Intercepts guarded requests from visitors who have not accepted.

    Without an explicit ``gate_service`` the app-scoped one is taken from the
    app's DI container, so the gate and the accept endpoint share settings.
    """

    def __init__(self, app: ASGIApp, gate_service: GateService | None = None) -> None:
        super().__init__(app)
        self.gate_service = gate_service

    async def _get_gate_service(self, request: Request) -> GateService:
        if self.gate_service is None:
            self.gate_service = await request.app.state.dishka_container.get(
                GateService
            )
        return self.gate_service

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        gate_service = await self._get_gate_service(request)
        settings = gate_service.settings
        decision = gate_service.decide(
            path=request.url.path,
            user_agent=request.headers.get("user-agent"),
            cookie=request.cookies.get(settings.cookie_name),
        )
        if decision is GateDecision.PASS:
            return await call_next(request)

        # Keep the path as sent, escapes included
        raw_path = request.scope.get("raw_path")
        original_url = raw_path.decode("latin-1") if raw_path else request.url.path
        if request.url.query:
            original_url = f"{original_url}?{request.url.query}"

        try:
            document = await run_in_threadpool(
                settings.document_path.read_text, encoding="utf-8"
            )
        except OSError as e:
            logfire.warn(
                "Terms document unavailable",
                path=str(settings.document_path),
                error=str(e),
            )
            return PlainTextResponse(MISSING_DOCUMENT_NOTICE, status_code=200)

        logfire.info("Serving terms interstitial", original_url=original_url)
        return HTMLResponse(
            gate_service.render_interstitial(document, original_url),
            status_code=200,
        )
