"""Discord invite adapter."""

from .client import (
    DiscordInviteClient,
    MockDiscordInviteClient,
    RealDiscordInviteClient,
)

__all__ = ["DiscordInviteClient", "RealDiscordInviteClient", "MockDiscordInviteClient"]
