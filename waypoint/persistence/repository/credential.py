"""JSON-file credential repository."""

import json
from pathlib import Path

import logfire

from waypoint.domain.repository.credential import CredentialRepository
from waypoint.util.error import ConfigurationError


class JsonCredentialRepository(CredentialRepository):
    """Credential table read once from a JSON object ``{link_id: credential}``."""

    def __init__(self, credentials: dict[str, str]) -> None:
        self._credentials = credentials

    @classmethod
    def load(cls, path: Path) -> "JsonCredentialRepository":
        """Load the credential table from disk.

        A missing file gives an empty table, so every link id is unknown.

        Args:
            path: Path of the JSON file

        Returns:
            Repository over the loaded table

        Raises:
            ConfigurationError: If the file is not a JSON object of strings
        """
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logfire.warn("Invite credential file not found", path=str(path))
            return cls({})

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in data.items()
        ):
            raise ConfigurationError(
                f"{path} must map link ids to credential strings"
            )

        logfire.info("Invite credentials loaded", path=str(path), links=len(data))
        return cls(data)

    async def find_by_link_id(self, link_id: str) -> str | None:
        """Find the credential for a link id."""
        return self._credentials.get(link_id)
