"""PGP key directory domain service."""

import logfire

from waypoint.domain.error import NotFoundError
from waypoint.domain.model.key import PgpKey
from waypoint.domain.repository import KeyRepository

from .base import Service


class KeyService(Service):
    """Lookups over the published PGP key directory."""

    def __init__(self, key_repository: KeyRepository) -> None:
        """Initialize key service.

        Args:
            key_repository: Key directory repository
        """
        self.key_repository = key_repository

    async def list_keys(self) -> list[PgpKey]:
        """List all published keys."""
        return await self.key_repository.list_all()

    async def get_key(self, key_id: str) -> PgpKey:
        """Get a key by id, ignoring case.

        Raises:
            NotFoundError: If no key has that id
        """
        key = await self.key_repository.find_by_id(key_id)
        if key is None:
            logfire.info("Key not found", key_id=key_id)
            raise NotFoundError("Key", key_id)
        return key

    async def read_public_key(self, key_id: str) -> tuple[PgpKey, str]:
        """Get a key and its armored public key text.

        Raises:
            NotFoundError: If no key has that id, or its key file is missing
        """
        key = await self.get_key(key_id)
        try:
            armored = await self.key_repository.read_public_key(key)
        except OSError as e:
            logfire.error(
                "Key file unreadable",
                key_id=key.id,
                pubkey_url=key.pubkey_url,
                error=str(e),
            )
            raise NotFoundError("Key file", key.pubkey_url) from e
        return key, armored
