import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy import text

from realmquest.core.config import settings

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

from realmquest import models  # noqa: F401  (register tables on Base.metadata)
from realmquest.core.db import engine, Base
from realmquest.routers import equipment, inventory, items


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown events"""
    if settings.AUTO_CREATE_TABLES:
        if settings.DB_SCHEMA and engine.dialect.name == "postgresql":
            with engine.begin() as conn:
                conn.execute(text(f'CREATE SCHEMA IF NOT EXISTS "{settings.DB_SCHEMA}"'))
        Base.metadata.create_all(bind=engine)
        logger.info("[DB] Tables created")

    yield

    engine.dispose()


app = FastAPI(
    title="RealmQuest API",
    version="0.1",
    root_path=settings.ROOT_PATH,
    lifespan=lifespan,
)


@app.get("/health", tags=["system"])
def health():
    return {"ok": True}


@app.get("/", tags=["system"])
def root():
    return {"service": "realmquest-api"}


app.include_router(items.router)
app.include_router(equipment.router)
app.include_router(inventory.router)
