"""Unit tests for the terms gate middleware."""

import pytest
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from fastapi.testclient import TestClient

from waypoint.config import GateSettings
from waypoint.domain.service import GateService
from waypoint.interface.api.middleware import TermsGateMiddleware
from waypoint.interface.api.middleware.gate import MISSING_DOCUMENT_NOTICE

HUMAN_UA = "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_5) AppleWebKit/605.1.15 Safari/605.1.15"
TOS_HTML = (
    '<form method="post" action="/__accept-terms">'
    '<input type="hidden" name="returnTo" value="%%RETURN_TO%%">'
    "</form>"
)


def build_app(settings: GateSettings) -> FastAPI:
    app = FastAPI()
    app.add_middleware(TermsGateMiddleware, gate_service=GateService(settings))

    @app.get("/bot")
    async def bot_page() -> PlainTextResponse:
        return PlainTextResponse("bot page")

    @app.get("/about")
    async def about_page() -> PlainTextResponse:
        return PlainTextResponse("about page")

    return app


@pytest.fixture
def tos_path(tmp_path):
    path = tmp_path / "tos.html"
    path.write_text(TOS_HTML)
    return path


@pytest.fixture
def client(tos_path):
    return TestClient(build_app(GateSettings(document_path=tos_path)))


class TestTermsGateMiddleware:
    """Tests for TermsGateMiddleware."""

    def test_human_without_cookie_gets_interstitial(self, client):
        response = client.get(
            "/bot?code=abc", headers={"User-Agent": HUMAN_UA}, follow_redirects=False
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'value="%2Fbot%3Fcode%3Dabc"' in response.text
        assert "bot page" not in response.text

    def test_return_url_keeps_escapes_from_request_path(self, client):
        response = client.get(
            "/bot/a%2Fb?q=caf%C3%A9", headers={"User-Agent": HUMAN_UA}
        )

        assert 'value="%2Fbot%2Fa%252Fb%3Fq%3Dcaf%25C3%25A9"' in response.text

    def test_interstitial_without_query(self, client):
        response = client.get("/bot", headers={"User-Agent": HUMAN_UA})

        assert 'value="%2Fbot"' in response.text

    def test_accepted_cookie_reaches_route(self, client):
        response = client.get(
            "/bot?code=abc",
            headers={"User-Agent": HUMAN_UA, "Cookie": "t3_terms_accepted=true"},
        )

        assert response.status_code == 200
        assert response.text == "bot page"

    def test_wrong_cookie_value_is_gated(self, client):
        response = client.get(
            "/bot",
            headers={"User-Agent": HUMAN_UA, "Cookie": "t3_terms_accepted=false"},
        )

        assert "returnTo" in response.text

    def test_bot_reaches_route_without_cookie(self, client):
        response = client.get(
            "/bot", headers={"User-Agent": "Mozilla/5.0 (compatible; Discordbot/2.0;)"}
        )

        assert response.text == "bot page"

    def test_unguarded_path_is_untouched(self, client):
        response = client.get("/about", headers={"User-Agent": HUMAN_UA})

        assert response.text == "about page"

    def test_missing_document_degrades_to_plain_text(self, tmp_path):
        client = TestClient(
            build_app(GateSettings(document_path=tmp_path / "missing.html"))
        )

        response = client.get("/bot", headers={"User-Agent": HUMAN_UA})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == MISSING_DOCUMENT_NOTICE
