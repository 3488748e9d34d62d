"""PGP key repository interface."""

from abc import ABC, abstractmethod

from waypoint.domain.model.key import PgpKey


class KeyRepository(ABC):
    """Read-only directory of published PGP keys."""

    @abstractmethod
    async def list_all(self) -> list[PgpKey]:
        """List every key in directory order."""
        pass

    @abstractmethod
    async def find_by_id(self, key_id: str) -> PgpKey | None:
        """Find a key by id, ignoring case.

        Args:
            key_id: The key identifier

        Returns:
            The key if found, None otherwise
        """
        pass

    @abstractmethod
    async def read_public_key(self, key: PgpKey) -> str:
        """Read the armored public key text for a key.

        Raises:
            OSError: If the key file cannot be read
        """
        pass
