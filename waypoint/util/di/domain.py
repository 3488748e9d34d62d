"""Domain layer DI providers."""

from dishka import Scope, provide

from waypoint.config import GateSettings, InviteSettings
from waypoint.domain.repository import (
    CredentialRepository,
    InviteCacheRepository,
    KeyRepository,
)
from waypoint.domain.service import (
    GateService,
    InviteBroker,
    InviteClient,
    KeyService,
)
from waypoint.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    The gate and the invite broker are APP-scoped: the broker owns the
    in-flight refresh registry, which must be shared by every request.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_gate_service(self, settings: GateSettings) -> GateService:
        """Provide terms gate domain service."""
        return GateService(settings=settings)

    @provide(scope=Scope.APP)
    def get_invite_broker(
        self,
        invite_cache: InviteCacheRepository,
        credential_repository: CredentialRepository,
        invite_client: InviteClient,
        settings: InviteSettings,
    ) -> InviteBroker:
        """Provide invite broker domain service."""
        return InviteBroker(
            invite_cache=invite_cache,
            credential_repository=credential_repository,
            invite_client=invite_client,
            settings=settings,
        )

    @provide
    def get_key_service(self, key_repository: KeyRepository) -> KeyService:
        """Provide key directory domain service."""
        return KeyService(key_repository=key_repository)
