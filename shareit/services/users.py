import logging
from typing import List

from ..errors import AlreadyExistsError, InvalidStateError, NotFoundError
from ..repositories.bookings import BookingRepository
from ..repositories.items import ItemRepository
from ..repositories.users import UserRepository
from ..schemas.user import UserCreate, UserOut, UserUpdate
from ..utils import blank

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, users: UserRepository, items: ItemRepository, bookings: BookingRepository):
        self.users = users
        self.items = items
        self.bookings = bookings

    async def create_user(self, payload: UserCreate) -> UserOut:
        if await self.users.find_by_email(payload.email):
            raise AlreadyExistsError(f"User with email {payload.email} already exists")
        user = await self.users.save(payload.model_dump())
        logger.info(f"User {user.id} created")
        return UserOut(**user.model_dump())

    async def get_user(self, user_id: int) -> UserOut:
        user = await self.users.get(user_id)
        if user is None:
            raise NotFoundError(f"User with id = {user_id} not found")
        return UserOut(**user.model_dump())

    async def list_users(self) -> List[UserOut]:
        return [UserOut(**u.model_dump()) for u in await self.users.list_all()]

    async def update_user(self, user_id: int, payload: UserUpdate) -> UserOut:
        if await self.users.get(user_id) is None:
            raise NotFoundError(f"User with id = {user_id} not found")
        updates = {}
        if not blank(payload.name):
            updates["name"] = payload.name
        if payload.email is not None:
            other = await self.users.find_by_email(payload.email)
            if other is not None and other.id != user_id:
                raise AlreadyExistsError(f"User with email {payload.email} already exists")
            updates["email"] = payload.email
        user = await self.users.update(user_id, updates)
        return UserOut(**user.model_dump())

    async def delete_user(self, user_id: int) -> None:
        """Borra un usuario sin cosas ni reservas; con ellas la baja se rechaza."""
        if not await self.users.exists(user_id):
            raise NotFoundError(f"User with id = {user_id} not found")
        if await self.items.exists_by_owner(user_id) or await self.bookings.exists_by_user(user_id):
            logger.warning(f"Refused to delete user {user_id}: still has items or bookings")
            raise InvalidStateError(f"User with id = {user_id} still has items or bookings")
        if not await self.users.delete(user_id):
            raise NotFoundError(f"User with id = {user_id} not found")
        logger.info(f"User {user_id} deleted")
