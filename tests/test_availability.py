from datetime import timedelta

from shareit.models import Booking
from shareit.schemas.booking import BookingStatus
from shareit.services.availability import last_and_next, last_booking, next_booking
from common import NOW


def _booking(id, start_days, end_days, status=BookingStatus.APPROVED):
    return Booking(id=id, item_id=1, booker_id=2, owner_id=1, status=status,
                   start=NOW + timedelta(days=start_days), end=NOW + timedelta(days=end_days))


def test_last_and_next_among_approved():
    bookings = [_booking(1, -5, -3), _booking(2, 1, 2), _booking(3, 3, 4)]
    assert last_booking(bookings, NOW).id == 1
    assert next_booking(bookings, NOW).id == 2


def test_last_is_latest_started():
    bookings = [_booking(1, -5, -3), _booking(2, -1, 1)]
    assert last_booking(bookings, NOW).id == 2
    assert next_booking(bookings, NOW) is None


def test_not_approved_ignored():
    bookings = [
        _booking(1, -5, -3, BookingStatus.REJECTED),
        _booking(2, 1, 2, BookingStatus.WAITING),
    ]
    assert last_and_next(bookings, NOW) == (None, None)


def test_same_start_prefers_smaller_id():
    bookings = [_booking(7, 2, 3), _booking(4, 2, 5), _booking(9, -2, -1), _booking(5, -2, 0)]
    assert next_booking(bookings, NOW).id == 4
    assert last_booking(bookings, NOW).id == 5


def test_short_view():
    last, nxt = last_and_next([_booking(1, -5, -3)], NOW)
    assert nxt is None
    assert last.id == 1 and last.booker_id == 2
    assert last.model_dump(by_alias=True)["bookerId"] == 2
