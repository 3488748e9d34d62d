"""List keys use case."""

from pydantic import BaseModel

from waypoint.application.usecase.base import BaseUseCase
from waypoint.domain.service import KeyService


class KeyItem(BaseModel):
    """Key item in response."""

    id: str
    name: str
    desc: str
    fingerprint: str


class ListKeysResponse(BaseModel):
    """List keys response."""

    keys: list[KeyItem]


class ListKeysUseCase(BaseUseCase):
    """Use case for listing the published keys."""

    def __init__(self, key_service: KeyService) -> None:
        """Initialize list keys use case.

        Args:
            key_service: Key domain service
        """
        self.key_service = key_service

    async def execute(self, request: None = None) -> ListKeysResponse:
        """List keys in index order, without their key blocks.

        Args:
            request: Unused; the listing takes no parameters

        Returns:
            Summary of every published key
        """
        keys = await self.key_service.list_keys()
        return ListKeysResponse(
            keys=[
                KeyItem(
                    id=key.id,
                    name=key.name,
                    desc=key.desc,
                    fingerprint=key.fingerprint,
                )
                for key in keys
            ]
        )
