"""Application layer DI providers."""

from dishka import Scope, provide

from waypoint.application.usecase.gate import AcceptTermsUseCase
from waypoint.application.usecase.invite import (
    InspectInviteUseCase,
    ResolveInviteUseCase,
)
from waypoint.application.usecase.key import GetKeyUseCase, ListKeysUseCase
from waypoint.config import GateSettings
from waypoint.domain.service import GateService, InviteBroker, KeyService
from waypoint.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Gate use cases
    @provide(scope=Scope.REQUEST)
    def get_accept_terms_use_case(
        self, gate_service: GateService, settings: GateSettings
    ) -> AcceptTermsUseCase:
        """Provide accept terms use case."""
        return AcceptTermsUseCase(gate_service=gate_service, settings=settings)

    # Invite use cases
    @provide(scope=Scope.REQUEST)
    def get_resolve_invite_use_case(
        self, invite_broker: InviteBroker
    ) -> ResolveInviteUseCase:
        """Provide resolve invite use case."""
        return ResolveInviteUseCase(invite_broker=invite_broker)

    @provide(scope=Scope.REQUEST)
    def get_inspect_invite_use_case(
        self, invite_broker: InviteBroker
    ) -> InspectInviteUseCase:
        """Provide inspect invite use case."""
        return InspectInviteUseCase(invite_broker=invite_broker)

    # Key use cases
    @provide(scope=Scope.REQUEST)
    def get_list_keys_use_case(self, key_service: KeyService) -> ListKeysUseCase:
        """Provide list keys use case."""
        return ListKeysUseCase(key_service=key_service)

    @provide(scope=Scope.REQUEST)
    def get_get_key_use_case(self, key_service: KeyService) -> GetKeyUseCase:
        """Provide get key use case."""
        return GetKeyUseCase(key_service=key_service)
