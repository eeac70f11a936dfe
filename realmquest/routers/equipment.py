"""
Hero equipment endpoints.
Thin adapter over EquipmentService; callers are authenticated upstream.
"""
import uuid

from fastapi import APIRouter, Depends

from realmquest.deps import get_equipment_service
from realmquest.models.enums import EquipmentSlot
from realmquest.routers.errors import to_http
from realmquest.schemas.equipment import EquipIn, EquipResultOut, LoadoutOut
from realmquest.services.equipment_service import EquipmentService
from realmquest.services.errors import EquipmentError

router = APIRouter(prefix="/heroes", tags=["equipment"])


@router.get("/{hero_id}/equipment", response_model=LoadoutOut)
def get_equipment(
    hero_id: uuid.UUID,
    service: EquipmentService = Depends(get_equipment_service),
):
    try:
        slots = service.get_loadout(hero_id)
    except EquipmentError as e:
        raise to_http(e)
    return LoadoutOut(hero_id=hero_id, slots=slots)


@router.put("/{hero_id}/equipment/{slot}", response_model=EquipResultOut)
def equip(
    hero_id: uuid.UUID,
    slot: EquipmentSlot,
    payload: EquipIn,
    service: EquipmentService = Depends(get_equipment_service),
):
    try:
        result = service.equip_item(hero_id, payload.item_id, slot)
    except EquipmentError as e:
        raise to_http(e)

    return EquipResultOut(
        hero_id=result.hero_id,
        slot=result.slot,
        item_id=result.item_id,
        changed=result.changed,
        cleared_slots=result.cleared_slots,
        slots=result.snapshot,
    )


@router.delete("/{hero_id}/equipment/{slot}", response_model=LoadoutOut)
def unequip(
    hero_id: uuid.UUID,
    slot: EquipmentSlot,
    service: EquipmentService = Depends(get_equipment_service),
):
    try:
        service.unequip(hero_id, slot)
        slots = service.get_loadout(hero_id)
    except EquipmentError as e:
        raise to_http(e)
    return LoadoutOut(hero_id=hero_id, slots=slots)
