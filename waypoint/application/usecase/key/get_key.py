"""Get key use case."""

from pydantic import BaseModel

from waypoint.domain.service import KeyService

from waypoint.application.usecase.base import BaseUseCase


class GetKeyRequest(BaseModel):
    """Get key request."""

    key_id: str


class GetKeyResponse(BaseModel):
    """A key with its armored public key block."""

    id: str
    name: str
    desc: str
    fingerprint: str
    pubkey_url: str
    public_key: str


class GetKeyUseCase(BaseUseCase):
    """Use case for fetching one key, matched by id ignoring case."""

    def __init__(self, key_service: KeyService) -> None:
        """Initialize get key use case.

        Args:
            key_service: Key domain service
        """
        self.key_service = key_service

    async def execute(self, request: GetKeyRequest) -> GetKeyResponse:
        """Fetch the key and its public key text.

        Raises:
            NotFoundError: If the key or its key file does not exist
        """
        key, armored = await self.key_service.read_public_key(request.key_id)
        return GetKeyResponse(
            id=key.id,
            name=key.name,
            desc=key.desc,
            fingerprint=key.fingerprint,
            pubkey_url=key.pubkey_url,
            public_key=armored,
        )
