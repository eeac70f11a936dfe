import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from realmquest.core.db import Base


class HeroInventory(Base):
    """Items owned by a hero. Equipping references this but never consumes it."""
    __tablename__ = "hero_inventory"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_hero_inventory_quantity_non_negative"),
        {"schema": "game"},
    )

    hero_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), ForeignKey("game.heroes.id", ondelete="CASCADE"), primary_key=True)
    item_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), ForeignKey("game.items.id", ondelete="CASCADE"), primary_key=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    acquired_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
