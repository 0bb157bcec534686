"""
Ciclo de vida de las reservas: alta, decisión del propietario, consulta y
listados filtrados por ``SearchingState``.

Estados: WAITING -> APPROVED | REJECTED. Una vez decidida, una reserva no
vuelve a cambiar. No se comprueba solapamiento entre reservas de la misma
cosa.
"""
import logging
from typing import List

from ..clock import SystemClock
from ..errors import ForbiddenError, InvalidArgumentError, InvalidStateError, NotAvailableError, NotFoundError
from ..models import Booking
from ..repositories.bookings import BookingRepository
from ..repositories.items import ItemRepository
from ..repositories.users import UserRepository
from ..schemas.booking import BookingCreate, BookingOut, BookingStatus
from ..schemas.item import ItemOut
from ..schemas.user import UserOut
from ..utils import ensure_utc
from .search import SearchingState

logger = logging.getLogger(__name__)


class BookingService:
    def __init__(self, bookings: BookingRepository, items: ItemRepository,
                 users: UserRepository, clock: SystemClock):
        self.bookings = bookings
        self.items = items
        self.users = users
        self.clock = clock

    async def create_booking(self, payload: BookingCreate, renter_id: int) -> BookingOut:
        start, end = ensure_utc(payload.start), ensure_utc(payload.end)
        if start >= end:
            logger.warning(f"Rejected booking with start={start} end={end}")
            raise InvalidArgumentError("Booking start must be before its end")
        if start <= self.clock.now():
            raise InvalidArgumentError("Booking must start in the future")

        if not await self.users.exists(renter_id):
            raise NotFoundError(f"User with id = {renter_id} not found")
        item = await self.items.get(payload.item_id)
        if item is None:
            raise NotFoundError(f"Item with id = {payload.item_id} not found")
        if item.owner_id == renter_id:
            logger.warning(f"User {renter_id} tried to book own item {item.id}")
            raise ForbiddenError(f"Item with id = {item.id} not found for booking by its owner")
        if not item.available:
            raise NotAvailableError(f"Item with id = {item.id} is not available")

        booking = await self.bookings.save({
            "item_id": item.id,
            "booker_id": renter_id,
            "owner_id": item.owner_id,
            "start": start,
            "end": end,
            "status": BookingStatus.WAITING,
        })
        logger.info(f"Booking {booking.id} created for item {item.id} by user {renter_id}")
        return await self._one(booking)

    async def set_booking_status(self, owner_id: int, booking_id: int, approved: bool) -> BookingOut:
        booking = await self.bookings.find_by_id(booking_id)
        if booking is None:
            raise NotFoundError(f"Booking with id = {booking_id} not found")
        if not await self.items.is_owned_by(booking.item_id, owner_id):
            raise ForbiddenError(f"Booking with id = {booking_id} not found for owner with id = {owner_id}")
        if booking.status != BookingStatus.WAITING:
            raise InvalidStateError(f"Booking with id = {booking_id} is already {booking.status.value}")

        new = BookingStatus.APPROVED if approved else BookingStatus.REJECTED
        updated = await self.bookings.update_status(booking_id, BookingStatus.WAITING, new)
        if updated is None:
            # otra petición decidió entre la lectura y la escritura
            raise InvalidStateError(f"Booking with id = {booking_id} has already been decided")
        logger.info(f"Booking {booking_id} set to {new.value} by owner {owner_id}")
        return await self._one(updated)

    async def get_booking(self, user_id: int, booking_id: int) -> BookingOut:
        booking = await self.bookings.find_by_id(booking_id)
        if booking is None:
            raise NotFoundError(f"Booking with id = {booking_id} not found")
        if user_id != booking.booker_id and not await self.items.is_owned_by(booking.item_id, user_id):
            raise ForbiddenError(f"Booking with id = {booking_id} not found for user with id = {user_id}")
        return await self._one(booking)

    async def get_bookings_by_booker(self, user_id: int, state: SearchingState,
                                     offset: int, size: int) -> List[BookingOut]:
        if not await self.users.exists(user_id):
            raise NotFoundError(f"User with id = {user_id} not found")
        found = await self.bookings.find_by_booker(user_id, state, self.clock.now(), offset, size)
        return await self._to_out(found)

    async def get_bookings_by_owner(self, user_id: int, state: SearchingState,
                                    offset: int, size: int) -> List[BookingOut]:
        if not await self.users.exists(user_id):
            raise NotFoundError(f"User with id = {user_id} not found")
        if not await self.items.exists_by_owner(user_id):
            raise NotFoundError(f"User with id = {user_id} has no items")
        found = await self.bookings.find_by_item_owner(user_id, state, self.clock.now(), offset, size)
        return await self._to_out(found)

    async def _to_out(self, bookings: List[Booking]) -> List[BookingOut]:
        users = {u.id: u for u in await self.users.list_by_ids(list({b.booker_id for b in bookings}))}
        items = {i.id: i for i in await self.items.list_by_ids({b.item_id for b in bookings})}
        out = []
        for b in bookings:
            booker, item = users.get(b.booker_id), items.get(b.item_id)
            if booker is None or item is None:
                # fila huérfana: no tumba el listado entero
                logger.warning(f"Skipping booking {b.id}: user {b.booker_id} or item {b.item_id} is gone")
                continue
            out.append(BookingOut(
                id=b.id,
                start=b.start,
                end=b.end,
                status=b.status,
                booker=UserOut(**booker.model_dump()),
                item=ItemOut(**item.model_dump(exclude={"owner_id"})),
            ))
        return out

    async def _one(self, booking: Booking) -> BookingOut:
        out = await self._to_out([booking])
        if not out:
            raise NotFoundError(f"Booking with id = {booking.id} references a missing user or item")
        return out[0]
