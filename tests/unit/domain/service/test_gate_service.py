"""Tests for the terms gate domain service."""

import pytest

from waypoint.config import GateSettings
from waypoint.domain.service import GateService
from waypoint.domain.value import GateDecision

HUMAN_UA = "Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0"


@pytest.fixture
def gate() -> GateService:
    return GateService(GateSettings())


class TestIsBot:
    """Tests for crawler detection."""

    @pytest.mark.parametrize(
        "user_agent",
        [
            "Mozilla/5.0 (compatible; Discordbot/2.0; +https://discordapp.com)",
            "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)",
            "facebookexternalhit/1.1",
            "TelegramBot (like TwitterBot)",
            "curl/8.5.0",
            "python-requests/2.32.3",
            "Go-http-client/2.0",
            "WhatsApp/2.23.20.0",
            "Java/17.0.2",
        ],
    )
    def test_known_crawlers_are_bots(self, gate, user_agent):
        assert gate.is_bot(user_agent) is True

    def test_match_ignores_case(self, gate):
        assert gate.is_bot("SOME-SPIDER/1.0") is True

    def test_browser_is_not_bot(self, gate):
        assert gate.is_bot(HUMAN_UA) is False

    def test_missing_user_agent_is_not_bot(self, gate):
        assert gate.is_bot(None) is False
        assert gate.is_bot("") is False

    def test_custom_keywords(self):
        gate = GateService(GateSettings(bot_keywords=["Preview"]))

        assert gate.is_bot("LinkPreviewer/1.0") is True
        assert gate.is_bot("curl/8.5.0") is False


class TestDecide:
    """Tests for the gate decision."""

    def test_accept_path_always_passes(self, gate):
        assert gate.decide("/__accept-terms", HUMAN_UA, None) == GateDecision.PASS

    def test_unguarded_paths_pass(self, gate):
        assert gate.decide("/", HUMAN_UA, None) == GateDecision.PASS
        assert gate.decide("/keys", HUMAN_UA, None) == GateDecision.PASS
        assert gate.decide("/discord/community", HUMAN_UA, None) == GateDecision.PASS

    def test_guarded_human_without_cookie_is_intercepted(self, gate):
        assert gate.decide("/bot", HUMAN_UA, None) == GateDecision.INTERCEPT

    def test_prefix_match_covers_subpaths(self, gate):
        assert gate.decide("/bot/callback", HUMAN_UA, None) == GateDecision.INTERCEPT
        assert gate.decide("/bots", HUMAN_UA, None) == GateDecision.INTERCEPT

    def test_bot_passes_regardless_of_cookie(self, gate):
        ua = "Mozilla/5.0 (compatible; Discordbot/2.0;)"

        assert gate.decide("/bot", ua, None) == GateDecision.PASS
        assert gate.decide("/bot", ua, "false") == GateDecision.PASS

    def test_accepted_cookie_passes(self, gate):
        assert gate.decide("/bot", HUMAN_UA, "true") == GateDecision.PASS

    def test_wrong_cookie_value_is_intercepted(self, gate):
        assert gate.decide("/bot", HUMAN_UA, "yes") == GateDecision.INTERCEPT
        assert gate.decide("/bot", HUMAN_UA, "TRUE") == GateDecision.INTERCEPT


class TestRenderInterstitial:
    """Tests for interstitial rendering."""

    def test_replaces_placeholder_with_encoded_url(self, gate):
        html = '<input type="hidden" name="returnTo" value="%%RETURN_TO%%">'

        rendered = gate.render_interstitial(html, "/bot?code=abc&state=x y")

        assert rendered == (
            '<input type="hidden" name="returnTo" '
            'value="%2Fbot%3Fcode%3Dabc%26state%3Dx%20y">'
        )

    def test_replaces_every_occurrence(self, gate):
        rendered = gate.render_interstitial("%%RETURN_TO%%|%%RETURN_TO%%", "/bot")

        assert rendered == "%2Fbot|%2Fbot"

    def test_keeps_uri_component_safe_characters(self, gate):
        rendered = gate.render_interstitial("%%RETURN_TO%%", "/bot?a=(x)!*'~_.-")

        assert rendered == "%2Fbot%3Fa%3D(x)!*'~_.-"

    def test_document_without_placeholder_is_unchanged(self, gate):
        assert gate.render_interstitial("<p>terms</p>", "/bot") == "<p>terms</p>"


class TestResolveReturnTo:
    """Tests for the post-acceptance redirect target."""

    def test_missing_value_defaults_to_guarded_prefix(self, gate):
        assert gate.resolve_return_to(None) == "/bot"
        assert gate.resolve_return_to("") == "/bot"

    def test_decodes_relative_path(self, gate):
        assert gate.resolve_return_to("%2Fbot%3Fcode%3Dabc") == "/bot?code=abc"

    def test_rejects_absolute_url(self, gate):
        assert gate.resolve_return_to("https%3A%2F%2Fevil.example") == "/bot"

    def test_rejects_protocol_relative_url(self, gate):
        assert gate.resolve_return_to("%2F%2Fevil.example") == "/bot"
        assert gate.resolve_return_to("%2F%5Cevil.example") == "/bot"

    def test_rejects_undecodable_value(self, gate):
        assert gate.resolve_return_to("%E0%A4%A") == "/bot"

    def test_rejects_malformed_escapes(self, gate):
        assert gate.resolve_return_to("%2Fbot%zz") == "/bot"
        assert gate.resolve_return_to("%2Fbot%2") == "/bot"
        assert gate.resolve_return_to("/bot/100%") == "/bot"

    def test_accepts_lowercase_escapes(self, gate):
        assert gate.resolve_return_to("%2fbot%3fcode%3dabc") == "/bot?code=abc"

    def test_rejects_relative_path_without_slash(self, gate):
        assert gate.resolve_return_to("bot") == "/bot"

    def test_default_follows_configured_prefix(self):
        gate = GateService(GateSettings(guarded_prefix="/members"))

        assert gate.resolve_return_to("javascript%3Aalert(1)") == "/members"
