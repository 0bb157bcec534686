from typing import List

from ..clock import SystemClock
from ..errors import NotFoundError
from ..models import ItemRequest
from ..repositories.items import ItemRepository
from ..repositories.requests import ItemRequestRepository
from ..repositories.users import UserRepository
from ..schemas.request import ItemRequestCreate, ItemRequestOut
from .items import to_item_out


class ItemRequestService:
    def __init__(self, requests: ItemRequestRepository, items: ItemRepository,
                 users: UserRepository, clock: SystemClock):
        self.requests = requests
        self.items = items
        self.users = users
        self.clock = clock

    async def _check_user(self, user_id: int) -> None:
        if not await self.users.exists(user_id):
            raise NotFoundError(f"User with id = {user_id} not found")

    async def create_request(self, user_id: int, payload: ItemRequestCreate) -> ItemRequestOut:
        await self._check_user(user_id)
        req = await self.requests.save({
            "description": payload.description,
            "requester_id": user_id,
            "created": self.clock.now(),
        })
        return ItemRequestOut(id=req.id, description=req.description, created=req.created)

    async def get_own_requests(self, user_id: int) -> List[ItemRequestOut]:
        await self._check_user(user_id)
        return await self._with_items(await self.requests.list_by_requester(user_id))

    async def get_other_requests(self, user_id: int, offset: int, size: int) -> List[ItemRequestOut]:
        await self._check_user(user_id)
        return await self._with_items(await self.requests.list_others(user_id, offset, size))

    async def get_request(self, user_id: int, request_id: int) -> ItemRequestOut:
        await self._check_user(user_id)
        req = await self.requests.get(request_id)
        if req is None:
            raise NotFoundError(f"Request with id = {request_id} not found")
        return (await self._with_items([req]))[0]

    async def _with_items(self, reqs: List[ItemRequest]) -> List[ItemRequestOut]:
        answers = await self.items.list_by_requests([r.id for r in reqs]) if reqs else []
        return [
            ItemRequestOut(
                id=r.id,
                description=r.description,
                created=r.created,
                items=[to_item_out(i) for i in answers if i.request_id == r.id],
            )
            for r in reqs
        ]
