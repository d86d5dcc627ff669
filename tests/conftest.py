# ruff: noqa: E402
# File: /tests/conftest.py
import os
import pathlib
import sys
from typing import Any, Dict, List

# Settings are read at import time; point them at the test database first
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_users.db")
os.environ.setdefault("SEED_DEMO_USERS", "false")

# Make repo root importable as "listview"
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from listview.api_client import UsersApiClient
from listview.db.base_class import Base
from listview.main import app
from tests.fakes import FakeUsersSource, make_user

TEST_DATABASE_URL = "sqlite:///./test_users.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def _create_schema():
    Base.metadata.create_all(bind=engine)
    try:
        yield
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session():
    connection = engine.connect()
    trans = connection.begin()
    try:
        session = TestingSessionLocal(bind=connection)
        yield session
    finally:
        session.close()
        trans.rollback()
        connection.close()


@pytest.fixture()
def override_db(db_session):
    from listview.db.session import get_db  # late import to avoid circulars

    def _override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = _override_get_db
    yield
    app.dependency_overrides.clear()


@pytest.fixture()
def client(override_db):
    with TestClient(app) as c:
        yield c


@pytest_asyncio.fixture()
async def api_client(override_db):
    transport = httpx.ASGITransport(app=app)
    async with UsersApiClient(base_url="http://testserver", transport=transport) as c:
        yield c


@pytest.fixture()
def sample_users() -> List[Dict[str, Any]]:
    return [
        make_user(1, "Zara", "Quinn", role="admin", gender="female", age=41),
        make_user(2, "alice", "Smith", role="user", gender="female", age=25),
        make_user(3, "Bob", "Jones", role="moderator", gender="male", age=33),
        make_user(4, "Carl", "Brown", role="user", gender="male", age=25),
        make_user(5, "Alice", "Adams", role="admin", gender="female", age=52),
    ]


@pytest.fixture()
def source(sample_users) -> FakeUsersSource:
    return FakeUsersSource(sample_users)
