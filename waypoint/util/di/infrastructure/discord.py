"""Discord infrastructure providers."""

from dishka import Scope, provide

from waypoint.adapter.discord.client import RealDiscordInviteClient
from waypoint.config import InviteSettings
from waypoint.domain.service import InviteClient
from waypoint.util.di.base import ProviderBase


class DiscordProvider(ProviderBase):
    """Discord component base."""

    __mock_component__ = "discord"


class ProdDiscordProvider(DiscordProvider):
    """Production Discord provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_invite_client(self, settings: InviteSettings) -> InviteClient:
        """Provide Discord invite-creation client.

        Raises:
            ValueError: If the invite-creation URL is not configured
        """
        if not settings.create_url:
            raise ValueError("Invite creation URL must be configured")

        return RealDiscordInviteClient(create_url=settings.create_url)
