"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from waypoint.config import GateSettings, InviteSettings, KeySettings, Settings
from waypoint.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    The ``Settings`` instance is handed to the container as context, so the
    app and every provider share the configuration ``create_app`` was given.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_gate_settings(self, settings: Settings) -> GateSettings:
        """Provide gate settings."""
        return settings.gate

    @provide(scope=Scope.APP)
    def provide_invite_settings(self, settings: Settings) -> InviteSettings:
        """Provide invite settings."""
        return settings.invites

    @provide(scope=Scope.APP)
    def provide_key_settings(self, settings: Settings) -> KeySettings:
        """Provide key directory settings."""
        return settings.keys
