import asyncio
import os
from datetime import datetime, timedelta, timezone

os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient
from pymongo.errors import ServerSelectionTimeoutError

from entrelinhas.api.deps import get_clock
from entrelinhas.db.client import ensure_indexes, get_db
from entrelinhas.main import app

SAO_PAULO = timezone(timedelta(hours=-3))


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


class BrokenCollection:
    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise ServerSelectionTimeoutError("mongo down")

        return fail


class BrokenDatabase:
    """Stands in for a database whose server cannot be reached."""

    def __getitem__(self, name):
        return BrokenCollection()

    async def command(self, *args, **kwargs):
        raise ServerSelectionTimeoutError("mongo down")


@pytest.fixture
def db():
    database = AsyncMongoMockClient()["entrelinhas_test"]
    asyncio.run(ensure_indexes(database))
    return database


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 3, 10, 12, 0, 0, tzinfo=SAO_PAULO))


@pytest.fixture
def client(db, clock):
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_clock] = lambda: clock
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client, username, password="p", email=None):
    return client.post(
        "/auth/register",
        json={
            "email": email or f"{username}@x.com",
            "username": username,
            "password": password,
            "grade": "5",
            "region": "SP",
        },
    )


def login(client, username, password="p", email=None):
    return client.post("/auth/login", json={"email": email or f"{username}@x.com", "password": password})


def auth_headers(client, username) -> dict:
    register(client, username)
    token = login(client, username).json()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice(client):
    return auth_headers(client, "alice")


@pytest.fixture
def bob(client):
    return auth_headers(client, "bob")


@pytest.fixture
def post(client, alice):
    response = client.post("/posts", json={"content": "dia bom", "mood": "feliz"}, headers=alice)
    assert response.status_code == 200
    return response.json()
