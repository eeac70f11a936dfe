from fastapi import Depends
from sqlalchemy.orm import Session
from realmquest.core.db import SessionLocal
from realmquest.services.equipment_service import EquipmentService
from realmquest.services.equipment_store import SqlHeroEquipmentStore
from realmquest.services.item_catalog import SqlItemCatalog

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_item_catalog(db: Session = Depends(get_db)) -> SqlItemCatalog:
    return SqlItemCatalog(db)

def get_equipment_service(db: Session = Depends(get_db)) -> EquipmentService:
    return EquipmentService(SqlItemCatalog(db), SqlHeroEquipmentStore(db))
