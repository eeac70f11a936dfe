"""
Equipment rules engine.

Validates item/slot compatibility and keeps a hero's equipped set consistent:
- an item only goes in a slot its types allow (see equipment_rules)
- a two-handed item written to weapon or shield empties the other one
- equip and unequip are idempotent
Every write happens inside a single per-hero transaction of the store,
so a rejected or failed call leaves the equipment untouched.
"""
import logging
import uuid
from dataclasses import dataclass, field

from realmquest.core.config import settings
from realmquest.models.enums import EquipmentSlot
from realmquest.services.equipment_rules import (
    ItemDefinition,
    can_equip,
    slots_cleared_by,
)
from realmquest.services.errors import (
    HeroNotFoundError,
    IncompatibleSlotError,
    ItemNotOwnedError,
)

logger = logging.getLogger(__name__)


@dataclass
class EquipResult:
    hero_id: uuid.UUID
    slot: EquipmentSlot
    item_id: uuid.UUID
    cleared_slots: list[EquipmentSlot] = field(default_factory=list)
    # Affected slots only: the target slot and any cleared sibling
    snapshot: dict[EquipmentSlot, uuid.UUID | None] = field(default_factory=dict)
    # False when the item was already in the slot
    changed: bool = True
    # Cleared siblings that actually held an item -> that item
    evicted: dict[EquipmentSlot, uuid.UUID] = field(default_factory=dict)


class EquipmentService:
    def __init__(self, catalog, store, require_ownership: bool | None = None):
        self.catalog = catalog
        self.store = store
        self.require_ownership = (
            require_ownership if require_ownership is not None else settings.EQUIP_REQUIRES_OWNERSHIP
        )

    def can_equip(self, item: ItemDefinition, slot: EquipmentSlot) -> bool:
        return can_equip(item, slot)

    def equip_item(self, hero_id: uuid.UUID, item_id: uuid.UUID, slot: EquipmentSlot) -> EquipResult:
        """Look the item up in the catalog, then equip it."""
        item = self.catalog.get_item(item_id)
        return self.equip(hero_id, item, slot)

    def equip(self, hero_id: uuid.UUID, item: ItemDefinition, slot: EquipmentSlot) -> EquipResult:
        if not can_equip(item, slot):
            logger.warning(f"[Equipment] Rejected: hero={hero_id} item={item.id} ({item.name}) slot={slot.value}")
            raise IncompatibleSlotError(item.id, slot)

        to_clear = slots_cleared_by(item, slot)

        def apply() -> EquipResult:
            if self.require_ownership and self.store.owned_quantity(hero_id, item.id) <= 0:
                raise ItemNotOwnedError(hero_id, item.id)

            # Sibling first: a two-handed item never sits in weapon and shield at once
            evicted = {}
            for sibling in to_clear:
                occupant = self.store.get_equipped(hero_id, sibling)
                if occupant is not None:
                    evicted[sibling] = occupant
                    self.store.clear_equipped(hero_id, sibling)

            changed = self.store.get_equipped(hero_id, slot) != item.id
            if changed:
                self.store.set_equipped(hero_id, slot, item.id)

            snapshot = {slot: item.id}
            for sibling in to_clear:
                snapshot[sibling] = self.store.get_equipped(hero_id, sibling)

            return EquipResult(
                hero_id=hero_id,
                slot=slot,
                item_id=item.id,
                cleared_slots=list(to_clear),
                snapshot=snapshot,
                changed=changed,
                evicted=evicted,
            )

        result = self.store.with_transaction(hero_id, apply)

        if result.changed:
            logger.info(f"[Equipment] Hero {hero_id} equipped {item.name} in {slot.value}")
        if result.evicted:
            logger.info(f"[Equipment] Hero {hero_id} two-handed: cleared {[s.value for s in result.evicted]}")
        return result

    def unequip(self, hero_id: uuid.UUID, slot: EquipmentSlot) -> None:
        def apply() -> None:
            self.store.clear_equipped(hero_id, slot)

        self.store.with_transaction(hero_id, apply)
        logger.info(f"[Equipment] Hero {hero_id} unequipped {slot.value}")

    def get_loadout(self, hero_id: uuid.UUID) -> dict[EquipmentSlot, uuid.UUID | None]:
        if not self.store.hero_exists(hero_id):
            raise HeroNotFoundError(hero_id)
        equipped = self.store.list_equipped(hero_id)
        return {slot: equipped.get(slot) for slot in EquipmentSlot}
