"""Key directory use cases."""

from waypoint.application.usecase.key.get_key import (
    GetKeyRequest,
    GetKeyResponse,
    GetKeyUseCase,
)
from waypoint.application.usecase.key.list_keys import (
    KeyItem,
    ListKeysResponse,
    ListKeysUseCase,
)

__all__ = [
    "GetKeyRequest",
    "GetKeyResponse",
    "GetKeyUseCase",
    "KeyItem",
    "ListKeysResponse",
    "ListKeysUseCase",
]
