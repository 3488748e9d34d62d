"""In-memory credential repository for testing."""

from waypoint.domain.repository.credential import CredentialRepository


class InMemoryCredentialRepository(CredentialRepository):
    """In-memory implementation of CredentialRepository for testing."""

    def __init__(self, credentials: dict[str, str] | None = None) -> None:
        self._credentials = dict(credentials or {})

    async def find_by_link_id(self, link_id: str) -> str | None:
        """Find the credential for a link id."""
        return self._credentials.get(link_id)
