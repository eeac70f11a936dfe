"""
Item/slot compatibility rules.

Pure functions, no database access:
- can_equip: may this item go in this slot
- compatible_slots: every slot an item can go in
- slots_cleared_by: sibling slots emptied when the item is written to a slot
"""
import uuid
from dataclasses import dataclass

from realmquest.models.enums import EquipmentSlot, ItemType

TWO_HANDED_SLOTS = frozenset({EquipmentSlot.weapon, EquipmentSlot.shield})
ROBE_SLOTS = frozenset({EquipmentSlot.armor, EquipmentSlot.helm})


@dataclass(frozen=True)
class ItemDefinition:
    id: uuid.UUID
    name: str
    item_types: frozenset[ItemType]
    description: str | None = None

    def __post_init__(self):
        if not self.item_types:
            raise ValueError("item_types cannot be empty")
        object.__setattr__(self, "item_types", frozenset(ItemType(t) for t in self.item_types))

    @classmethod
    def from_model(cls, item) -> "ItemDefinition":
        return cls(
            id=item.id,
            name=item.name,
            description=item.description,
            item_types=item.types,
        )

    @property
    def is_two_handed(self) -> bool:
        return ItemType.two_handed_weapon in self.item_types


def can_equip(item: ItemDefinition, slot: EquipmentSlot) -> bool:
    if ItemType(slot.value) in item.item_types:
        return True
    if slot in TWO_HANDED_SLOTS and ItemType.two_handed_weapon in item.item_types:
        return True
    if slot in ROBE_SLOTS and ItemType.robe in item.item_types:
        return True
    return False


def compatible_slots(item: ItemDefinition) -> list[EquipmentSlot]:
    return [slot for slot in EquipmentSlot if can_equip(item, slot)]


def slots_cleared_by(item: ItemDefinition, slot: EquipmentSlot) -> list[EquipmentSlot]:
    """
    A two-handed item written to weapon or shield empties the other one,
    whatever it holds. Writes to any other slot clear nothing.
    """
    if not item.is_two_handed or slot not in TWO_HANDED_SLOTS:
        return []
    return [s for s in EquipmentSlot if s in TWO_HANDED_SLOTS and s != slot]
