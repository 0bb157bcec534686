from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ReturnDocument
from .config import get_settings

_settings = get_settings()
_client: AsyncIOMotorClient | None = None
_db: AsyncIOMotorDatabase | None = None

async def get_db() -> AsyncIOMotorDatabase:
    global _client, _db
    if _db is None:
        _client = AsyncIOMotorClient(_settings.mongodb_uri, tz_aware=True)
        _db = _client[_settings.db_name]
        await create_indexes(_db)
    return _db


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    await db.users.create_index("email", unique=True)
    await db.items.create_index([("owner_id", 1)])
    await db.items.create_index([("request_id", 1)])
    await db.bookings.create_index([("booker_id", 1), ("start", -1)])
    await db.bookings.create_index([("owner_id", 1), ("start", -1)])
    await db.bookings.create_index([("item_id", 1), ("status", 1)])
    # un comentario por usuario y cosa
    await db.comments.create_index([("item_id", 1), ("author_id", 1)], unique=True)
    await db.requests.create_index([("requester_id", 1), ("created", -1)])


async def next_id(db: AsyncIOMotorDatabase, sequence: str) -> int:
    """Devuelve el siguiente entero de la secuencia (atómico en Mongo)."""
    doc = await db.counters.find_one_and_update(
        {"_id": sequence},
        {"$inc": {"value": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return int(doc["value"])
