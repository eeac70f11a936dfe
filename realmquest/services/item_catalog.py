"""Item catalog backed by the items table (read-only)."""
import uuid

from sqlalchemy.orm import Session

from realmquest.models.item import Item
from realmquest.services.equipment_rules import ItemDefinition
from realmquest.services.errors import ItemNotFoundError


class SqlItemCatalog:
    def __init__(self, db: Session):
        self.db = db

    def get_item(self, item_id: uuid.UUID) -> ItemDefinition:
        item = self.db.query(Item).filter(Item.id == item_id).one_or_none()
        if not item:
            raise ItemNotFoundError(item_id)
        return ItemDefinition.from_model(item)

    def list_items(self) -> list[ItemDefinition]:
        rows = self.db.query(Item).order_by(Item.name).all()
        return [ItemDefinition.from_model(r) for r in rows]
