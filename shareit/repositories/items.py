import re
from typing import Any, Dict, Iterable, List, Optional
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..db import next_id
from ..models import Item
from ..utils import to_id


def _to_item(doc: Dict[str, Any]) -> Item:
    return Item.model_validate(to_id(doc))


class ItemRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def save(self, data: Dict[str, Any]) -> Item:
        doc = dict(data)
        doc["_id"] = await next_id(self.db, "items")
        await self.db.items.insert_one(doc)
        return _to_item(doc)

    async def get(self, item_id: int) -> Optional[Item]:
        doc = await self.db.items.find_one({"_id": item_id})
        return _to_item(doc) if doc else None

    async def exists(self, item_id: int) -> bool:
        return await self.db.items.count_documents({"_id": item_id}, limit=1) > 0

    async def is_owned_by(self, item_id: int, user_id: int) -> bool:
        return await self.db.items.count_documents({"_id": item_id, "owner_id": user_id}, limit=1) > 0

    async def exists_by_owner(self, owner_id: int) -> bool:
        return await self.db.items.count_documents({"owner_id": owner_id}, limit=1) > 0

    async def update(self, item_id: int, updates: Dict[str, Any]) -> Optional[Item]:
        if updates:
            await self.db.items.update_one({"_id": item_id}, {"$set": updates})
        return await self.get(item_id)

    async def list_by_owner(self, owner_id: int, offset: int, limit: int) -> List[Item]:
        cursor = self.db.items.find({"owner_id": owner_id}).sort("_id", 1).skip(offset).limit(limit)
        return [_to_item(d) async for d in cursor]

    async def search(self, text: str, offset: int, limit: int) -> List[Item]:
        pattern = {"$regex": re.escape(text), "$options": "i"}
        cursor = self.db.items.find({
            "available": True,
            "$or": [{"name": pattern}, {"description": pattern}],
        }).sort("_id", 1).skip(offset).limit(limit)
        return [_to_item(d) async for d in cursor]

    async def list_by_requests(self, request_ids: Iterable[int]) -> List[Item]:
        cursor = self.db.items.find({"request_id": {"$in": list(request_ids)}}).sort("_id", 1)
        return [_to_item(d) async for d in cursor]

    async def list_by_ids(self, item_ids: Iterable[int]) -> List[Item]:
        cursor = self.db.items.find({"_id": {"$in": list(item_ids)}})
        return [_to_item(d) async for d in cursor]
