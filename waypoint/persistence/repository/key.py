"""JSON-file PGP key repository."""

import json
from pathlib import Path

import logfire
from pydantic import TypeAdapter
from starlette.concurrency import run_in_threadpool

from waypoint.domain.model.key import PgpKey
from waypoint.domain.repository.key import KeyRepository

_KEY_LIST = TypeAdapter(list[PgpKey])


class JsonKeyRepository(KeyRepository):
    """Key directory described by a ``keys.json`` array.

    The index is re-read on every call so edits show up without a restart.
    """

    def __init__(
        self,
        directory: Path,
        index_file: str = "keys.json",
        site_root: Path = Path("."),
    ) -> None:
        self.directory = directory
        self.index_path = directory / index_file
        self.site_root = site_root

    def _load(self) -> list[PgpKey]:
        try:
            raw = self.index_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logfire.warn("Key index not found", path=str(self.index_path))
            return []
        return _KEY_LIST.validate_python(json.loads(raw))

    async def list_all(self) -> list[PgpKey]:
        """List every key in index order."""
        return await run_in_threadpool(self._load)

    async def find_by_id(self, key_id: str) -> PgpKey | None:
        """Find a key by id, ignoring case."""
        for key in await self.list_all():
            if key.id.lower() == key_id.lower():
                return key
        return None

    async def read_public_key(self, key: PgpKey) -> str:
        """Read the armored key file a key's pubkey_url points at."""
        path = self.site_root / key.pubkey_url.lstrip("/")
        return await run_in_threadpool(path.read_text, encoding="utf-8")
