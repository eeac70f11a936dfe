from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from realmquest.core.config import settings

SCHEMA = "game"

# Models always declare the "game" schema; an empty DB_SCHEMA maps it to the default one
_target_schema = settings.DB_SCHEMA or None
_execution_options = {}
if _target_schema != SCHEMA:
    _execution_options["schema_translate_map"] = {SCHEMA: _target_schema}

engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True, execution_options=_execution_options)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

class Base(DeclarativeBase):
    pass
