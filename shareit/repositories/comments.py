from typing import Any, Dict, Iterable, List
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from ..db import next_id
from ..errors import AlreadyExistsError
from ..models import Comment
from ..utils import to_id


class CommentRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def exists_by_item_and_author(self, item_id: int, author_id: int) -> bool:
        return await self.db.comments.count_documents(
            {"item_id": item_id, "author_id": author_id}, limit=1
        ) > 0

    async def save(self, data: Dict[str, Any]) -> Comment:
        doc = dict(data)
        doc["_id"] = await next_id(self.db, "comments")
        try:
            await self.db.comments.insert_one(doc)
        except DuplicateKeyError:
            # otra petición concurrente insertó antes
            raise AlreadyExistsError(
                f"User with id = {doc['author_id']} already commented item with id = {doc['item_id']}"
            )
        return Comment.model_validate(to_id(doc))

    async def list_by_items(self, item_ids: Iterable[int]) -> List[Comment]:
        cursor = self.db.comments.find({"item_id": {"$in": list(item_ids)}}).sort("created", 1)
        return [Comment.model_validate(to_id(d)) async for d in cursor]
