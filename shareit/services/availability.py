"""
Última y próxima reserva aprobada de una cosa, relativas a "ahora".
"""
from datetime import datetime
from typing import Iterable, Optional, Tuple

from ..models import Booking
from ..schemas.booking import BookingShort, BookingStatus


def _approved(bookings: Iterable[Booking]) -> list[Booking]:
    return [b for b in bookings if b.status == BookingStatus.APPROVED]


def next_booking(bookings: Iterable[Booking], now: datetime) -> Optional[Booking]:
    """Aprobada con menor start entre las que empiezan después de now."""
    upcoming = [b for b in _approved(bookings) if b.start > now]
    if not upcoming:
        return None
    return min(upcoming, key=lambda b: (b.start, b.id))


def last_booking(bookings: Iterable[Booking], now: datetime) -> Optional[Booking]:
    """Aprobada con mayor start entre las que ya empezaron."""
    started = [b for b in _approved(bookings) if b.start <= now]
    if not started:
        return None
    # mismo start: gana el id menor
    return min(started, key=lambda b: (-b.start.timestamp(), b.id))


def to_short(booking: Optional[Booking]) -> Optional[BookingShort]:
    if booking is None:
        return None
    return BookingShort(
        id=booking.id,
        start=booking.start,
        end=booking.end,
        status=booking.status,
        booker_id=booking.booker_id,
    )


def last_and_next(
    bookings: Iterable[Booking], now: datetime
) -> Tuple[Optional[BookingShort], Optional[BookingShort]]:
    bookings = list(bookings)
    return to_short(last_booking(bookings, now)), to_short(next_booking(bookings, now))
