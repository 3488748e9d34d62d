"""Discord invite-creation client.

Creates channel invites through the Discord REST API on behalf of a link,
authenticating with the link's stored credential.
"""

import httpx
import logfire
from pydantic import ValidationError

from waypoint.domain.error import UpstreamError
from waypoint.domain.service.invite_broker import InviteClient
from waypoint.domain.value.types import UpstreamInvite


class DiscordInviteClient(InviteClient):
    """Base class for Discord invite clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealDiscordInviteClient(DiscordInviteClient):
    """Discord invite client backed by httpx."""

    def __init__(self, create_url: str) -> None:
        """Initialize Discord invite client.

        Args:
            create_url: Invite-creation endpoint to POST to
        """
        self.create_url = create_url

    async def create_invite(self, credential: str) -> UpstreamInvite:
        """Create a new invite.

        Args:
            credential: ``Authorization`` header value

        Returns:
            Parsed invite payload

        Raises:
            UpstreamError: If the request fails or the payload has no code
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.create_url,
                    json={},
                    headers={"Authorization": credential},
                )
        except httpx.HTTPError as e:
            logfire.error("Discord invite HTTP error", error=str(e))
            raise UpstreamError(None, f"HTTP error creating invite: {e}") from e

        if not response.is_success:
            logfire.error(
                "Discord invite creation failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise UpstreamError(response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as e:
            logfire.error("Discord invite response is not JSON", body=response.text)
            raise UpstreamError(None, "Invalid response from Discord API") from e

        if not isinstance(payload, dict):
            raise UpstreamError(None, "Invalid response from Discord API")

        try:
            return UpstreamInvite.model_validate(payload)
        except ValidationError as e:
            logfire.error("Discord invite response missing code", payload=payload)
            raise UpstreamError(None, "Invalid response from Discord API") from e


class MockDiscordInviteClient(DiscordInviteClient):
    """Mock Discord invite client for testing.

    Hands out ``mock-1``, ``mock-2``, ... unless told to fail. Every call is
    recorded in ``calls``.
    """

    def __init__(self) -> None:
        """Initialize mock client without real configuration."""
        self.calls: list[str] = []
        self.max_age: int | None = 3600
        self.max_uses: int | None = None
        self.error: UpstreamError | None = None

    def fail_with(self, status_code: int | None, detail: str = "mock failure") -> None:
        """Make subsequent calls raise an upstream error."""
        self.error = UpstreamError(status_code, detail)

    def succeed(self) -> None:
        """Make subsequent calls succeed again."""
        self.error = None

    async def create_invite(self, credential: str) -> UpstreamInvite:
        """Return a deterministic invite, or raise the configured error.

        Args:
            credential: Authorization value (recorded, otherwise unused)

        Returns:
            Mock invite payload
        """
        self.calls.append(credential)
        if self.error is not None:
            raise self.error
        return UpstreamInvite(
            code=f"mock-{len(self.calls)}",
            max_age=self.max_age,
            max_uses=self.max_uses,
        )
