"""
Quién puede comentar una cosa: sólo quien la tuvo alquilada (reserva
aprobada y ya terminada), y una sola vez.
"""
import logging
from datetime import datetime

from ..clock import SystemClock
from ..errors import AlreadyExistsError, NotAvailableError, NotFoundError
from ..repositories.bookings import BookingRepository
from ..repositories.comments import CommentRepository
from ..repositories.items import ItemRepository
from ..repositories.users import UserRepository
from ..schemas.comment import CommentCreate, CommentOut

logger = logging.getLogger(__name__)


class CommentService:
    def __init__(self, comments: CommentRepository, bookings: BookingRepository,
                 items: ItemRepository, users: UserRepository, clock: SystemClock):
        self.comments = comments
        self.bookings = bookings
        self.items = items
        self.users = users
        self.clock = clock

    async def can_comment(self, user_id: int, item_id: int, now: datetime) -> bool:
        return await self.bookings.exists_completed_booking(item_id, user_id, now)

    async def create_comment(self, user_id: int, item_id: int, payload: CommentCreate) -> CommentOut:
        author = await self.users.get(user_id)
        if author is None:
            raise NotFoundError(f"User with id = {user_id} not found")
        if not await self.items.exists(item_id):
            raise NotFoundError(f"Item with id = {item_id} not found")

        now = self.clock.now()
        if not await self.can_comment(user_id, item_id, now):
            logger.warning(f"User {user_id} has no completed booking of item {item_id}")
            raise NotAvailableError(
                f"User with id = {user_id} has not completed a booking of item with id = {item_id}"
            )
        if await self.comments.exists_by_item_and_author(item_id, user_id):
            raise AlreadyExistsError(f"User with id = {user_id} already commented item with id = {item_id}")

        comment = await self.comments.save({
            "text": payload.text,
            "item_id": item_id,
            "author_id": user_id,
            "created": now,
        })
        return CommentOut(id=comment.id, text=comment.text, author_name=author.name, created=comment.created)
