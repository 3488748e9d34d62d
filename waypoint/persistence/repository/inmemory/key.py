"""In-memory key repository for testing."""

from waypoint.domain.model.key import PgpKey
from waypoint.domain.repository.key import KeyRepository


class InMemoryKeyRepository(KeyRepository):
    """In-memory implementation of KeyRepository for testing.

    Armored key text is looked up by ``pubkey_url``.
    """

    def __init__(
        self,
        keys: list[PgpKey] | None = None,
        armored: dict[str, str] | None = None,
    ) -> None:
        self._keys = list(keys or [])
        self._armored = dict(armored or {})

    async def list_all(self) -> list[PgpKey]:
        """List every key."""
        return list(self._keys)

    async def find_by_id(self, key_id: str) -> PgpKey | None:
        """Find a key by id, ignoring case."""
        for key in self._keys:
            if key.id.lower() == key_id.lower():
                return key
        return None

    async def read_public_key(self, key: PgpKey) -> str:
        """Return the stored armored key text."""
        try:
            return self._armored[key.pubkey_url]
        except KeyError:
            raise FileNotFoundError(key.pubkey_url) from None
