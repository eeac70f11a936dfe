from fastapi import HTTPException

from realmquest.services.errors import (
    ConcurrentModificationError,
    EquipmentError,
    HeroNotFoundError,
    IncompatibleSlotError,
    ItemNotFoundError,
    ItemNotOwnedError,
    StoreUnavailableError,
)

STATUS_BY_ERROR = {
    IncompatibleSlotError: 400,
    ItemNotOwnedError: 403,
    ItemNotFoundError: 404,
    HeroNotFoundError: 404,
    ConcurrentModificationError: 409,
    StoreUnavailableError: 503,
}


def to_http(e: EquipmentError) -> HTTPException:
    return HTTPException(status_code=STATUS_BY_ERROR.get(type(e), 500), detail=str(e))
