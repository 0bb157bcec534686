import logging
from typing import List

from ..clock import SystemClock
from ..errors import NotFoundError
from ..models import Booking, Item
from ..repositories.bookings import BookingRepository
from ..repositories.comments import CommentRepository
from ..repositories.items import ItemRepository
from ..repositories.requests import ItemRequestRepository
from ..repositories.users import UserRepository
from ..schemas.booking import ItemWithBookingsOut
from ..schemas.comment import CommentOut
from ..schemas.item import ItemCreate, ItemOut, ItemUpdate
from ..utils import blank
from .availability import last_and_next

logger = logging.getLogger(__name__)


def to_item_out(item: Item) -> ItemOut:
    return ItemOut(**item.model_dump(exclude={"owner_id"}))


class ItemService:
    def __init__(self, items: ItemRepository, users: UserRepository, bookings: BookingRepository,
                 comments: CommentRepository, requests: ItemRequestRepository, clock: SystemClock):
        self.items = items
        self.users = users
        self.bookings = bookings
        self.comments = comments
        self.requests = requests
        self.clock = clock

    async def create_item(self, owner_id: int, payload: ItemCreate) -> ItemOut:
        if not await self.users.exists(owner_id):
            raise NotFoundError(f"User with id = {owner_id} not found")
        if payload.request_id is not None and not await self.requests.exists(payload.request_id):
            raise NotFoundError(f"Request with id = {payload.request_id} not found")
        item = await self.items.save({
            "name": payload.name,
            "description": payload.description,
            "available": payload.available,
            "owner_id": owner_id,
            "request_id": payload.request_id,
        })
        logger.info(f"Item {item.id} created by user {owner_id}")
        return to_item_out(item)

    async def update_item(self, owner_id: int, item_id: int, payload: ItemUpdate) -> ItemOut:
        item = await self.items.get(item_id)
        if item is None:
            raise NotFoundError(f"Item with id = {item_id} not found")
        if item.owner_id != owner_id:
            raise NotFoundError(f"Item with id = {item_id} not found for user with id = {owner_id}")

        updates = {}
        if not blank(payload.name):
            updates["name"] = payload.name
        if not blank(payload.description):
            updates["description"] = payload.description
        if payload.available is not None:
            updates["available"] = payload.available
        updated = await self.items.update(item_id, updates)
        return to_item_out(updated)

    async def get_item(self, item_id: int, user_id: int) -> ItemWithBookingsOut:
        item = await self.items.get(item_id)
        if item is None:
            raise NotFoundError(f"Item with id = {item_id} not found")
        # sólo el propietario ve las reservas
        approved = await self.bookings.find_approved_by_item(item.id) if item.owner_id == user_id else []
        return (await self._with_bookings([item], user_id, approved))[0]

    async def get_users_items(self, owner_id: int, offset: int, size: int) -> List[ItemWithBookingsOut]:
        if not await self.users.exists(owner_id):
            raise NotFoundError(f"User with id = {owner_id} not found")
        items = await self.items.list_by_owner(owner_id, offset, size)
        approved = await self.bookings.find_approved_by_items([i.id for i in items]) if items else []
        return await self._with_bookings(items, owner_id, approved)

    async def search_items(self, text: str, offset: int, size: int) -> List[ItemOut]:
        if blank(text):
            return []
        return [to_item_out(i) for i in await self.items.search(text.strip(), offset, size)]

    async def _with_bookings(self, items: List[Item], viewer_id: int,
                             approved: List[Booking]) -> List[ItemWithBookingsOut]:
        ids = [i.id for i in items]
        comments = await self.comments.list_by_items(ids) if ids else []
        authors = {u.id: u.name for u in await self.users.list_by_ids(list({c.author_id for c in comments}))}
        now = self.clock.now()

        out = []
        for item in items:
            view = ItemWithBookingsOut(**to_item_out(item).model_dump())
            if item.owner_id == viewer_id:
                view.last_booking, view.next_booking = last_and_next(
                    [b for b in approved if b.item_id == item.id], now
                )
            view.comments = [
                CommentOut(id=c.id, text=c.text, author_name=authors.get(c.author_id, ""), created=c.created)
                for c in comments if c.item_id == item.id
            ]
            out.append(view)
        return out
