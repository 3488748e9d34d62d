"""Mock persistence providers for testing."""

from dishka import Scope, provide

from waypoint.domain.model import PgpKey
from waypoint.domain.repository import (
    CredentialRepository,
    InviteCacheRepository,
    KeyRepository,
)
from waypoint.persistence.repository.inmemory import (
    InMemoryCredentialRepository,
    InMemoryInviteCache,
    InMemoryKeyRepository,
)
from waypoint.util.di.infrastructure.persistence import PersistenceProvider

MOCK_CREDENTIALS = {
    "community": "Bot mock-community-token",
    "friends": "Bot mock-friends-token",
}

MOCK_KEY = PgpKey(
    id="Main",
    name="Main key",
    desc="Everyday signing and encryption",
    fingerprint="0123 4567 89AB CDEF 0123  4567 89AB CDEF 0123 4567",
    pubkey_url="/keys/main.asc",
)

MOCK_ARMORED_KEY = (
    "-----BEGIN PGP PUBLIC KEY BLOCK-----\n"
    "\n"
    "mDMEZmockkeyAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA=\n"
    "-----END PGP PUBLIC KEY BLOCK-----\n"
)


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP scope matches production (the broker is APP-scoped); each test
    builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_invite_cache(self) -> InviteCacheRepository:
        """Provide in-memory invite cache."""
        return InMemoryInviteCache()

    @provide(scope=Scope.APP)
    def get_credential_repository(self) -> CredentialRepository:
        """Provide in-memory credential table."""
        return InMemoryCredentialRepository(MOCK_CREDENTIALS)

    @provide(scope=Scope.APP)
    def get_key_repository(self) -> KeyRepository:
        """Provide in-memory key directory."""
        return InMemoryKeyRepository(
            keys=[MOCK_KEY], armored={MOCK_KEY.pubkey_url: MOCK_ARMORED_KEY}
        )
