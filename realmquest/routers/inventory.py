import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from realmquest.deps import get_db
from realmquest.models.enums import EquipmentSlot
from realmquest.models.hero import Hero
from realmquest.models.hero_equipment import HeroEquipment
from realmquest.models.hero_inventory import HeroInventory
from realmquest.models.item import Item
from realmquest.schemas.equipment import HeroInventoryOut, InventoryEntryOut

router = APIRouter(prefix="/heroes", tags=["inventory"])


@router.get("/{hero_id}/inventory", response_model=HeroInventoryOut)
def get_hero_inventory(hero_id: uuid.UUID, db: Session = Depends(get_db)):
    hero = db.query(Hero).filter(Hero.id == hero_id).first()
    if not hero:
        raise HTTPException(status_code=404, detail=f"Hero {hero_id} not found")

    rows = (
        db.query(HeroInventory, Item)
        .join(Item, Item.id == HeroInventory.item_id)
        .filter(HeroInventory.hero_id == hero_id)
        .order_by(Item.name)
        .all()
    )

    # item_id -> slots it currently occupies
    equipped: dict[uuid.UUID, list[EquipmentSlot]] = {}
    for eq in db.query(HeroEquipment).filter(HeroEquipment.hero_id == hero_id).all():
        equipped.setdefault(eq.item_id, []).append(eq.slot)

    items = [
        InventoryEntryOut(
            item_id=it.id,
            item_name=it.name,
            quantity=inv.quantity,
            equipped_in=[s for s in EquipmentSlot if s in equipped.get(it.id, [])],
        )
        for inv, it in rows
    ]

    return HeroInventoryOut(
        hero_id=hero_id,
        total_items=sum(i.quantity for i in items),
        items=items,
    )
