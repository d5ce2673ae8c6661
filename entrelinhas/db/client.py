"""MongoDB client, database dependency and indexes."""
from bson import ObjectId
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from entrelinhas.core.config import settings
from entrelinhas.models.post import POSTS
from entrelinhas.models.user import USERS


def _log(msg: str, *args):
    print(f"[DB] {msg}", *args)


def masked_uri(uri: str) -> str:
    """Host/db part of a connection string, without credentials or options."""
    return "...@" + uri.split("@")[-1].split("?")[0] if "@" in uri else uri.split("?")[0]


def create_client(uri: str | None = None) -> AsyncIOMotorClient:
    uri = uri or settings.MONGO_URI
    _log(f"Database URL: {masked_uri(uri)}")
    return AsyncIOMotorClient(uri)


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    await db[USERS].create_index("email", unique=True)
    await db[USERS].create_index("username", unique=True)
    await db[POSTS].create_index([("createdAt", DESCENDING)])
    await db[POSTS].create_index([("userId", ASCENDING), ("createdAt", DESCENDING)])
    await db[POSTS].create_index("comments.userId")


async def get_db(request: Request) -> AsyncIOMotorDatabase:
    """Database for the request; retries index creation until it has succeeded once."""
    db = request.app.state.db
    if not getattr(request.app.state, "indexes_ready", False):
        await ensure_indexes(db)
        request.app.state.indexes_ready = True
        _log("Indexes: OK")
    return db


def to_object_id(value: str | ObjectId | None) -> ObjectId | None:
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None
