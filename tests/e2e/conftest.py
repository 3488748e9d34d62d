"""E2E fixtures: the full app wired to the test container."""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from waypoint.config import GateSettings, Settings
from waypoint.interface.api.app import create_app
from tests.di import build_test_container

TOS_HTML = (
    "<h1>Terms of Service</h1>"
    '<form method="post" action="/__accept-terms">'
    '<input type="hidden" name="returnTo" value="%%RETURN_TO%%">'
    '<button type="submit">I accept</button>'
    "</form>"
)


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing the interstitial at a temporary document."""
    document = tmp_path / "tos.html"
    document.write_text(TOS_HTML)
    return Settings(gate=GateSettings(document_path=document))


@pytest.fixture
def container(settings):
    """Fresh all-mock container sharing the app's settings."""
    return build_test_container(settings=settings)


@pytest.fixture
def client(settings, container):
    """Create test client."""
    return TestClient(create_app(settings=settings, container=container))


@pytest_asyncio.fixture
async def async_client(settings, container):
    """Async client sharing the event loop with the container."""
    app = create_app(settings=settings, container=container)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as client:
        yield client
    await container.close()
