"""Terms gate domain service."""

import re
from urllib.parse import quote, unquote

import logfire

from waypoint.config import GateSettings
from waypoint.domain.value import GateDecision

from .base import Service

# Characters encodeURIComponent leaves alone, besides alphanumerics and "-_.~"
_URI_COMPONENT_SAFE = "!*'()"

# A "%" that does not start a two-digit hex escape
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class GateService(Service):
    """Decides whether a request may reach the guarded prefix.

    Crawlers always pass so link previews see the real page. Humans see the
    interstitial until they present the acceptance cookie. No state is kept
    server-side; the cookie is the whole acceptance record.
    """

    def __init__(self, settings: GateSettings) -> None:
        """Initialize gate service.

        Args:
            settings: Gate configuration
        """
        self.settings = settings
        self._bot_keywords = [k.lower() for k in settings.bot_keywords]

    def is_bot(self, user_agent: str | None) -> bool:
        """Check a user-agent string against the crawler keyword list.

        Args:
            user_agent: Raw ``User-Agent`` header, if any

        Returns:
            True if any keyword occurs in the user-agent, ignoring case
        """
        if not user_agent:
            return False
        ua = user_agent.lower()
        return any(keyword in ua for keyword in self._bot_keywords)

    def has_accepted(self, cookie: str | None) -> bool:
        """Whether the acceptance cookie carries the expected value."""
        return cookie == self.settings.cookie_value

    def decide(
        self, path: str, user_agent: str | None, cookie: str | None
    ) -> GateDecision:
        """Decide whether a request passes the gate.

        Args:
            path: Request path (no query string)
            user_agent: Raw ``User-Agent`` header
            cookie: Value of the acceptance cookie, if sent

        Returns:
            PASS to route normally, INTERCEPT to serve the interstitial
        """
        if path == self.settings.accept_path:
            return GateDecision.PASS
        if not path.startswith(self.settings.guarded_prefix):
            return GateDecision.PASS
        if self.is_bot(user_agent):
            return GateDecision.PASS
        if self.has_accepted(cookie):
            return GateDecision.PASS
        return GateDecision.INTERCEPT

    def render_interstitial(self, document: str, original_url: str) -> str:
        """Fill the interstitial document with the encoded return URL.

        Args:
            document: Interstitial HTML containing the placeholder
            original_url: Path plus query of the intercepted request

        Returns:
            HTML with every placeholder replaced
        """
        encoded = quote(original_url, safe=_URI_COMPONENT_SAFE)
        return document.replace(self.settings.placeholder, encoded)

    def resolve_return_to(self, encoded: str | None) -> str:
        """Decode and validate the post-acceptance redirect target.

        Only same-origin relative paths are allowed. Anything that would be
        read as an absolute or protocol-relative URL falls back to the
        guarded prefix.

        Args:
            encoded: Percent-encoded ``returnTo`` form value

        Returns:
            A path starting with a single ``/``
        """
        default = self.settings.guarded_prefix
        if not encoded:
            return default

        if _MALFORMED_ESCAPE.search(encoded):
            logfire.warn("Malformed returnTo escape", return_to=encoded)
            return default

        try:
            return_to = unquote(encoded, errors="strict")
        except UnicodeDecodeError:
            logfire.warn("Undecodable returnTo", return_to=encoded)
            return default

        if not return_to.startswith("/") or return_to.startswith(("//", "/\\")):
            logfire.warn("Rejected returnTo", return_to=return_to)
            return default

        return return_to
