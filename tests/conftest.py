import os

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DB_SCHEMA", "")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from realmquest.core.db import Base
from realmquest.deps import get_db
from realmquest.main import app
from realmquest.models import Hero, HeroInventory, Item


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        execution_options={"schema_translate_map": {"game": None}},
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_hero(db):
    counter = {"n": 0}

    def _make(**kwargs) -> Hero:
        counter["n"] += 1
        n = counter["n"]
        hero = Hero(
            email=kwargs.pop("email", f"hero{n}@example.com"),
            display_name=kwargs.pop("display_name", f"Hero {n}"),
            **kwargs,
        )
        db.add(hero)
        db.commit()
        return hero

    return _make


@pytest.fixture
def make_item(db):
    def _make(name: str, item_types: list[str], description: str | None = None) -> Item:
        item = Item(name=name, description=description, item_types=item_types)
        db.add(item)
        db.commit()
        return item

    return _make


@pytest.fixture
def give_item(db):
    def _give(hero: Hero, item: Item, quantity: int = 1) -> HeroInventory:
        row = HeroInventory(hero_id=hero.id, item_id=item.id, quantity=quantity)
        db.add(row)
        db.commit()
        return row

    return _give
