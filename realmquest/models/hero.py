import uuid
from datetime import datetime

from sqlalchemy import Boolean, CheckConstraint, DateTime, Enum, Integer, String, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from realmquest.core.db import Base
from realmquest.models.enums import HeroRace, enum_values


class Hero(Base):
    """
    Player account. Rows are created by the auth layer,
    the equipment service only reads and locks them.
    """
    __tablename__ = "heroes"
    __table_args__ = (
        CheckConstraint("coins >= 0", name="ck_heroes_coins_non_negative"),
        {"schema": "game"},
    )

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(String, unique=True, index=True, nullable=False)
    display_name: Mapped[str] = mapped_column(String, nullable=False)
    race: Mapped[HeroRace] = mapped_column(
        Enum(HeroRace, name="hero_race", values_callable=enum_values),
        nullable=False,
        default=HeroRace.human,
    )
    coins: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    is_developer: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_paying_customer: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
