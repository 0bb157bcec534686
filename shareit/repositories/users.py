from typing import Any, Dict, List, Optional
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from ..db import next_id
from ..errors import AlreadyExistsError
from ..models import User
from ..utils import to_id


def _email_taken(email: str) -> AlreadyExistsError:
    return AlreadyExistsError(f"User with email {email} already exists")


class UserRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def save(self, data: Dict[str, Any]) -> User:
        doc = dict(data)
        doc["_id"] = await next_id(self.db, "users")
        try:
            await self.db.users.insert_one(doc)
        except DuplicateKeyError:
            # índice único de email; otra petición llegó antes
            raise _email_taken(doc.get("email"))
        return User.model_validate(to_id(doc))

    async def get(self, user_id: int) -> Optional[User]:
        doc = await self.db.users.find_one({"_id": user_id})
        return User.model_validate(to_id(doc)) if doc else None

    async def exists(self, user_id: int) -> bool:
        return await self.db.users.count_documents({"_id": user_id}, limit=1) > 0

    async def find_by_email(self, email: str) -> Optional[User]:
        doc = await self.db.users.find_one({"email": email})
        return User.model_validate(to_id(doc)) if doc else None

    async def list_all(self) -> List[User]:
        docs = await self.db.users.find().sort("_id", 1).to_list(None)
        return [User.model_validate(to_id(d)) for d in docs]

    async def list_by_ids(self, user_ids: List[int]) -> List[User]:
        docs = await self.db.users.find({"_id": {"$in": user_ids}}).to_list(None)
        return [User.model_validate(to_id(d)) for d in docs]

    async def update(self, user_id: int, updates: Dict[str, Any]) -> Optional[User]:
        if updates:
            try:
                await self.db.users.update_one({"_id": user_id}, {"$set": updates})
            except DuplicateKeyError:
                raise _email_taken(updates.get("email"))
        return await self.get(user_id)

    async def delete(self, user_id: int) -> bool:
        res = await self.db.users.delete_one({"_id": user_id})
        return res.deleted_count > 0
