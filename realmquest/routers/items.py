import uuid

from fastapi import APIRouter, Depends

from realmquest.deps import get_item_catalog
from realmquest.routers.errors import to_http
from realmquest.schemas.item import ItemOut
from realmquest.services.equipment_rules import ItemDefinition, compatible_slots
from realmquest.services.errors import ItemNotFoundError
from realmquest.services.item_catalog import SqlItemCatalog

router = APIRouter(prefix="/items", tags=["items"])


def _item_out(item: ItemDefinition) -> ItemOut:
    return ItemOut(
        id=item.id,
        name=item.name,
        description=item.description,
        item_types=sorted(item.item_types, key=lambda t: t.value),
        compatible_slots=compatible_slots(item),
    )


@router.get("", response_model=list[ItemOut])
def list_items(catalog: SqlItemCatalog = Depends(get_item_catalog)):
    return [_item_out(i) for i in catalog.list_items()]


@router.get("/{item_id}", response_model=ItemOut)
def get_item(item_id: uuid.UUID, catalog: SqlItemCatalog = Depends(get_item_catalog)):
    try:
        item = catalog.get_item(item_id)
    except ItemNotFoundError as e:
        raise to_http(e)
    return _item_out(item)
