"""PGP key directory routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from waypoint.application.usecase.key import (
    GetKeyRequest,
    GetKeyResponse,
    GetKeyUseCase,
    ListKeysResponse,
    ListKeysUseCase,
)
from waypoint.domain.error import NotFoundError
from waypoint.interface.error import to_http_exception

router = APIRouter(tags=["keys"], route_class=DishkaRoute)


@router.get("/keys", response_model=ListKeysResponse)
async def list_keys(
    list_keys_use_case: FromDishka[ListKeysUseCase],
) -> ListKeysResponse:
    """List published keys."""
    return await list_keys_use_case.execute()


@router.get("/key/raw/{key_id}", response_class=PlainTextResponse)
async def get_raw_key(
    key_id: str,
    get_key_use_case: FromDishka[GetKeyUseCase],
) -> PlainTextResponse:
    """Serve the armored public key as plain text."""
    try:
        response = await get_key_use_case.execute(GetKeyRequest(key_id=key_id))
    except NotFoundError as e:
        raise to_http_exception(e)
    return PlainTextResponse(response.public_key)


@router.get("/key/{key_id}", response_model=GetKeyResponse)
async def get_key(
    key_id: str,
    get_key_use_case: FromDishka[GetKeyUseCase],
) -> GetKeyResponse:
    """Get a key with its public key block.

    Args:
        key_id: Key identifier, matched ignoring case
        get_key_use_case: Get key use case from DI

    Raises:
        HTTPException: 404 if the key is unknown
    """
    try:
        return await get_key_use_case.execute(GetKeyRequest(key_id=key_id))
    except NotFoundError as e:
        raise to_http_exception(e)
