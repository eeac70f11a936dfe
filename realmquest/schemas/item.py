from uuid import UUID

from pydantic import BaseModel

from realmquest.models.enums import EquipmentSlot, ItemType


class ItemOut(BaseModel):
    """Catalog entry with every slot it can be equipped in"""
    id: UUID
    name: str
    description: str | None = None
    item_types: list[ItemType]
    compatible_slots: list[EquipmentSlot]
