"""
Hero equipment store on top of the hero_equipment table.

All writes for one hero go through with_transaction(), which locks the hero
row so that concurrent equips for the same hero are serialized. Conflicts the
lock cannot prevent (two first-time inserts of the same slot, Postgres
serialization failures, deadlocks) are retried a bounded number of times.
"""
import logging
import uuid
from typing import Callable, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import DBAPIError, IntegrityError, InterfaceError, OperationalError
from sqlalchemy.orm import Session

from realmquest.core.config import settings
from realmquest.models.enums import EquipmentSlot
from realmquest.models.hero import Hero
from realmquest.models.hero_equipment import HeroEquipment
from realmquest.models.hero_inventory import HeroInventory
from realmquest.services.errors import (
    ConcurrentModificationError,
    HeroNotFoundError,
    ItemNotFoundError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# unique_violation, serialization_failure, deadlock_detected
RETRYABLE_PGCODES = {"23505", "40001", "40P01"}
FOREIGN_KEY_PGCODE = "23503"


def _pgcode(exc: DBAPIError) -> str | None:
    return getattr(exc.orig, "pgcode", None)


def _is_write_conflict(exc: DBAPIError) -> bool:
    code = _pgcode(exc)
    if code is not None:
        return code in RETRYABLE_PGCODES
    # SQLite reports constraint failures by message only
    return isinstance(exc, IntegrityError) and "UNIQUE constraint failed" in str(exc.orig)


def _is_foreign_key_violation(exc: IntegrityError) -> bool:
    code = _pgcode(exc)
    if code is not None:
        return code == FOREIGN_KEY_PGCODE
    return "FOREIGN KEY constraint failed" in str(exc.orig)


class SqlHeroEquipmentStore:
    def __init__(self, db: Session, max_retries: int | None = None):
        self.db = db
        self.max_retries = max_retries if max_retries is not None else settings.EQUIP_MAX_RETRIES
        if self.max_retries < 1:
            raise ValueError("max_retries must be >= 1")

    # ─────────────────────────────────────────────
    # Reads
    # ─────────────────────────────────────────────

    def hero_exists(self, hero_id: uuid.UUID) -> bool:
        return self.db.query(Hero.id).filter(Hero.id == hero_id).first() is not None

    def get_equipped(self, hero_id: uuid.UUID, slot: EquipmentSlot) -> uuid.UUID | None:
        row = self._get_row(hero_id, slot)
        return row.item_id if row else None

    def list_equipped(self, hero_id: uuid.UUID) -> dict[EquipmentSlot, uuid.UUID]:
        rows = self.db.query(HeroEquipment).filter(HeroEquipment.hero_id == hero_id).all()
        return {r.slot: r.item_id for r in rows}

    def owned_quantity(self, hero_id: uuid.UUID, item_id: uuid.UUID) -> int:
        row = self.db.query(HeroInventory).filter(
            HeroInventory.hero_id == hero_id,
            HeroInventory.item_id == item_id,
        ).one_or_none()
        return row.quantity if row else 0

    # ─────────────────────────────────────────────
    # Writes (call inside with_transaction)
    # ─────────────────────────────────────────────

    def set_equipped(self, hero_id: uuid.UUID, slot: EquipmentSlot, item_id: uuid.UUID) -> None:
        row = self._get_row(hero_id, slot)
        if row:
            row.item_id = item_id
            row.equipped_at = func.now()
        else:
            self.db.add(HeroEquipment(hero_id=hero_id, slot=slot, item_id=item_id))
        try:
            self.db.flush()
        except IntegrityError as e:
            # The hero row is locked, so a dangling reference can only be the item
            if _is_foreign_key_violation(e):
                raise ItemNotFoundError(item_id) from e
            raise

    def clear_equipped(self, hero_id: uuid.UUID, slot: EquipmentSlot) -> None:
        self.db.query(HeroEquipment).filter(
            HeroEquipment.hero_id == hero_id,
            HeroEquipment.slot == slot,
        ).delete(synchronize_session="fetch")
        self.db.flush()

    # ─────────────────────────────────────────────
    # Transaction
    # ─────────────────────────────────────────────

    def with_transaction(self, hero_id: uuid.UUID, fn: Callable[[], T]) -> T:
        """
        Run fn atomically for one hero and commit.
        fn is re-run from scratch on a write conflict, so it must re-read what it needs.
        """
        last_conflict = None
        for attempt in range(1, self.max_retries + 1):
            try:
                self._lock_hero(hero_id)
                result = fn()
                self.db.commit()
                return result
            except DBAPIError as e:
                self.db.rollback()
                if _is_write_conflict(e):
                    last_conflict = e
                    logger.warning(
                        f"[Store] Write conflict on hero {hero_id} (attempt {attempt}/{self.max_retries}): {e.orig}"
                    )
                    continue
                if isinstance(e, (OperationalError, InterfaceError)):
                    logger.error(f"[Store] Database unavailable for hero {hero_id}: {e.orig}")
                    raise StoreUnavailableError(str(e.orig)) from e
                raise
            except Exception:
                self.db.rollback()
                raise

        raise ConcurrentModificationError(hero_id, self.max_retries) from last_conflict

    def _lock_hero(self, hero_id: uuid.UUID) -> None:
        hero = self.db.query(Hero.id).filter(Hero.id == hero_id).with_for_update().one_or_none()
        if hero is None:
            raise HeroNotFoundError(hero_id)

    def _get_row(self, hero_id: uuid.UUID, slot: EquipmentSlot) -> HeroEquipment | None:
        return self.db.query(HeroEquipment).filter(
            HeroEquipment.hero_id == hero_id,
            HeroEquipment.slot == slot,
        ).one_or_none()
