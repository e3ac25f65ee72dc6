import os

# Must be set before app.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db
from app.core.database import create_database_tables, drop_database_tables
from app.main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False,
)


@pytest.fixture()
def db():
    """Fresh tables for every test."""
    create_database_tables(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        drop_database_tables(bind=engine)


@pytest.fixture()
def client(db):
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager: the lifespan would connect to the real DB
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def asha():
    return {"name": "Asha", "age": 20, "class": "CS101"}
