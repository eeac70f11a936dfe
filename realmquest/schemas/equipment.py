"""
RealmQuest - Equipment & Inventory Schemas
"""
from uuid import UUID

from pydantic import BaseModel

from realmquest.models.enums import EquipmentSlot


# ═══════════════════════════════════════════════════════════
# EQUIPMENT
# ═══════════════════════════════════════════════════════════

class EquipIn(BaseModel):
    item_id: UUID


class LoadoutOut(BaseModel):
    """All five slots of a hero, None when empty"""
    hero_id: UUID
    slots: dict[EquipmentSlot, UUID | None]


class EquipResultOut(BaseModel):
    hero_id: UUID
    slot: EquipmentSlot
    item_id: UUID
    changed: bool
    cleared_slots: list[EquipmentSlot]
    # Target slot + cleared siblings only
    slots: dict[EquipmentSlot, UUID | None]


# ═══════════════════════════════════════════════════════════
# INVENTORY
# ═══════════════════════════════════════════════════════════

class InventoryEntryOut(BaseModel):
    item_id: UUID
    item_name: str
    quantity: int
    equipped_in: list[EquipmentSlot]


class HeroInventoryOut(BaseModel):
    hero_id: UUID
    total_items: int
    items: list[InventoryEntryOut]
