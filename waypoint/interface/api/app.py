"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from waypoint.config import Settings
from waypoint.interface.api.middleware import RequestLogMiddleware, TermsGateMiddleware
from waypoint.interface.api.routes import gate, health, invites, keys
from waypoint.util.di.container import create_container, setup_di
from waypoint.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Settings to build the app with (loaded from env if omitted)
        container: DI container built from the same settings (production
            container if omitted)
    """
    settings = settings or Settings()

    # Instrument httpx for outbound invite requests
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title="Waypoint",
        description="Personal site server: terms gate, Discord invite links and PGP key directory",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Last added runs first: every request is logged, then gated, then routed
    # The gate takes its GateService from the container
    app_instance.add_middleware(TermsGateMiddleware)
    app_instance.add_middleware(RequestLogMiddleware)

    setup_di(app_instance, container or create_container(settings))

    app_instance.include_router(health.router)
    app_instance.include_router(gate.create_router(settings.gate))
    app_instance.include_router(invites.router)
    app_instance.include_router(keys.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
