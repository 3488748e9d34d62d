"""Persistence infrastructure providers."""

from dishka import Scope, provide

from waypoint.config import InviteSettings, KeySettings
from waypoint.domain.repository import (
    CredentialRepository,
    InviteCacheRepository,
    KeyRepository,
)
from waypoint.persistence.repository import (
    JsonCredentialRepository,
    JsonKeyRepository,
)
from waypoint.persistence.repository.inmemory import InMemoryInviteCache
from waypoint.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    The invite cache is memory-only: it lives for the process and is shared
    by every request.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_invite_cache(self) -> InviteCacheRepository:
        """Provide the process-wide invite cache."""
        return InMemoryInviteCache()

    @provide(scope=Scope.APP)
    def get_credential_repository(
        self, settings: InviteSettings
    ) -> CredentialRepository:
        """Provide the credential table, loaded once."""
        return JsonCredentialRepository.load(settings.credentials_path)

    @provide(scope=Scope.APP)
    def get_key_repository(self, settings: KeySettings) -> KeyRepository:
        """Provide the PGP key directory."""
        return JsonKeyRepository(
            settings.directory, settings.index_file, site_root=settings.site_root
        )
