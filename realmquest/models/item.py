import uuid
from datetime import datetime

from sqlalchemy import JSON, DateTime, String, Text, func, inspect, ARRAY
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, validates

from realmquest.core.db import Base
from realmquest.models.enums import ItemType


class Item(Base):
    """
    Items catalog.
    item_types lists every slot tag the item can fill (e.g. a robe is ["robe"],
    a greatsword ["two_handed_weapon"]). Tags are fixed once the item exists.
    """
    __tablename__ = "items"
    __table_args__ = {"schema": "game"}

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text)
    item_types: Mapped[list[str]] = mapped_column(
        ARRAY(String).with_variant(JSON(), "sqlite"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    @validates("item_types")
    def validate_item_types(self, key, value):
        if inspect(self).has_identity or self.__dict__.get(key) is not None:
            raise ValueError("item_types cannot be changed once set")

        tags = [ItemType(v).value for v in value]
        if not tags:
            raise ValueError("item_types cannot be empty")

        # Keep a stable order without duplicates
        return sorted(set(tags))

    @property
    def types(self) -> frozenset[ItemType]:
        return frozenset(ItemType(t) for t in self.item_types)
