from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..db import next_id
from ..models import Booking
from ..schemas.booking import BookingStatus
from ..services.search import SearchingState
from ..utils import to_id

_NEWEST_FIRST = [("start", -1), ("_id", -1)]


def _to_booking(doc: Dict[str, Any]) -> Booking:
    return Booking.model_validate(to_id(doc))


class BookingRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def save(self, data: Dict[str, Any]) -> Booking:
        doc = dict(data)
        doc["_id"] = await next_id(self.db, "bookings")
        if isinstance(doc.get("status"), BookingStatus):
            doc["status"] = doc["status"].value
        await self.db.bookings.insert_one(doc)
        return _to_booking(doc)

    async def find_by_id(self, booking_id: int) -> Optional[Booking]:
        doc = await self.db.bookings.find_one({"_id": booking_id})
        return _to_booking(doc) if doc else None

    async def update_status(
        self, booking_id: int, expected: BookingStatus, new: BookingStatus
    ) -> Optional[Booking]:
        """Cambia el estado sólo si sigue siendo ``expected``; None si otro llegó antes."""
        res = await self.db.bookings.update_one(
            {"_id": booking_id, "status": expected.value},
            {"$set": {"status": new.value}},
        )
        if res.modified_count == 0:
            return None
        return await self.find_by_id(booking_id)

    async def _page(self, query: Dict[str, Any], offset: int, limit: int) -> List[Booking]:
        cursor = self.db.bookings.find(query).sort(_NEWEST_FIRST).skip(offset).limit(limit)
        return [_to_booking(d) async for d in cursor]

    async def find_by_booker(
        self, booker_id: int, state: SearchingState, now: datetime, offset: int, limit: int
    ) -> List[Booking]:
        query = {"booker_id": booker_id, **state.to_query(now)}
        return await self._page(query, offset, limit)

    async def find_by_item_owner(
        self, owner_id: int, state: SearchingState, now: datetime, offset: int, limit: int
    ) -> List[Booking]:
        query = {"owner_id": owner_id, **state.to_query(now)}
        return await self._page(query, offset, limit)

    async def exists_by_user(self, user_id: int) -> bool:
        """True si el usuario aparece en alguna reserva, como inquilino o como propietario."""
        return await self.db.bookings.count_documents(
            {"$or": [{"booker_id": user_id}, {"owner_id": user_id}]}, limit=1
        ) > 0

    async def find_approved_by_item(self, item_id: int) -> List[Booking]:
        return await self.find_approved_by_items([item_id])

    async def find_approved_by_items(self, item_ids: Iterable[int]) -> List[Booking]:
        cursor = self.db.bookings.find({
            "item_id": {"$in": list(item_ids)},
            "status": BookingStatus.APPROVED.value,
        }).sort("start", 1)
        return [_to_booking(d) async for d in cursor]

    async def exists_completed_booking(self, item_id: int, booker_id: int, now: datetime) -> bool:
        doc = await self.db.bookings.find_one({
            "item_id": item_id,
            "booker_id": booker_id,
            "status": BookingStatus.APPROVED.value,
            "end": {"$lt": now},
        })
        return doc is not None
