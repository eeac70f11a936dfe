import uuid
from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from realmquest.core.db import Base
from realmquest.models.enums import EquipmentSlot, enum_values


class HeroEquipment(Base):
    """Currently equipped item, one row per (hero, slot)."""
    __tablename__ = "hero_equipment"
    __table_args__ = {"schema": "game"}

    hero_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), ForeignKey("game.heroes.id", ondelete="CASCADE"), primary_key=True)
    slot: Mapped[EquipmentSlot] = mapped_column(
        Enum(EquipmentSlot, name="equipment_slot", values_callable=enum_values),
        primary_key=True,
    )
    item_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), ForeignKey("game.items.id", ondelete="CASCADE"), nullable=False, index=True)
    equipped_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
