"""Shared fixtures: an in-memory database and an API client bound to it."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from fitstreak.database import create_tables, get_db
from fitstreak.main import app
from fitstreak.models.base import Base
from fitstreak.services.log_store import SQLLogStore, get_log_store


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_log_store] = lambda: SQLLogStore(db_session)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
