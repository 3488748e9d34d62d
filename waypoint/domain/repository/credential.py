"""Upstream credential repository interface."""

from abc import ABC, abstractmethod


class CredentialRepository(ABC):
    """Read-only table of upstream credentials, keyed by link id.

    A link id without a credential is not a known invite link.
    """

    @abstractmethod
    async def find_by_link_id(self, link_id: str) -> str | None:
        """Find the credential for a link id.

        Args:
            link_id: The short link identifier

        Returns:
            The ``Authorization`` header value if registered, None otherwise
        """
        pass
