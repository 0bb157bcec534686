from typing import Any, Dict, List, Optional
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..db import next_id
from ..models import ItemRequest
from ..utils import to_id


class ItemRequestRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def save(self, data: Dict[str, Any]) -> ItemRequest:
        doc = dict(data)
        doc["_id"] = await next_id(self.db, "requests")
        await self.db.requests.insert_one(doc)
        return ItemRequest.model_validate(to_id(doc))

    async def get(self, request_id: int) -> Optional[ItemRequest]:
        doc = await self.db.requests.find_one({"_id": request_id})
        return ItemRequest.model_validate(to_id(doc)) if doc else None

    async def exists(self, request_id: int) -> bool:
        return await self.db.requests.count_documents({"_id": request_id}, limit=1) > 0

    async def list_by_requester(self, requester_id: int) -> List[ItemRequest]:
        cursor = self.db.requests.find({"requester_id": requester_id}).sort("created", -1)
        return [ItemRequest.model_validate(to_id(d)) async for d in cursor]

    async def list_others(self, user_id: int, offset: int, limit: int) -> List[ItemRequest]:
        cursor = (
            self.db.requests.find({"requester_id": {"$ne": user_id}})
            .sort("created", -1).skip(offset).limit(limit)
        )
        return [ItemRequest.model_validate(to_id(d)) async for d in cursor]
