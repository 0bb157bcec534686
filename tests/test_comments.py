from datetime import timedelta

import pytest

from shareit.errors import AlreadyExistsError, NotAvailableError, NotFoundError
from shareit.schemas.booking import BookingCreate
from shareit.schemas.comment import CommentCreate
from common import NOW


@pytest.fixture
async def rented(repos, booking_service):
    """booker (2) alquila la cosa de owner (1) de +1h a +3h, aprobada"""
    owner = await repos["users"].save({"name": "Owner", "email": "owner@mail.com"})
    booker = await repos["users"].save({"name": "Booker", "email": "booker@mail.com"})
    item = await repos["items"].save({"name": "Tent", "description": "Two person tent",
                                      "available": True, "owner_id": owner.id})
    b = await booking_service.create_booking(
        BookingCreate(item_id=item.id, start=NOW + timedelta(hours=1), end=NOW + timedelta(hours=3)),
        booker.id,
    )
    await booking_service.set_booking_status(owner.id, b.id, True)
    return {"owner": owner, "booker": booker, "item": item}


async def test_can_comment_only_after_end(comment_service, rented):
    booker, item = rented["booker"], rented["item"]
    assert not await comment_service.can_comment(booker.id, item.id, NOW)
    assert not await comment_service.can_comment(booker.id, item.id, NOW + timedelta(hours=2))
    assert not await comment_service.can_comment(booker.id, item.id, NOW + timedelta(hours=3))
    assert await comment_service.can_comment(booker.id, item.id, NOW + timedelta(hours=4))


async def test_create_comment_after_rental(comment_service, rented, clock):
    clock.advance(timedelta(hours=4))
    out = await comment_service.create_comment(rented["booker"].id, rented["item"].id, CommentCreate(text="Great"))
    assert out.text == "Great"
    assert out.author_name == "Booker"
    assert out.created == clock.now()


async def test_comment_before_rental_ends(comment_service, rented):
    with pytest.raises(NotAvailableError):
        await comment_service.create_comment(rented["booker"].id, rented["item"].id, CommentCreate(text="Early"))


async def test_second_comment_rejected(comment_service, rented, clock):
    clock.advance(timedelta(days=1))
    await comment_service.create_comment(rented["booker"].id, rented["item"].id, CommentCreate(text="One"))
    with pytest.raises(AlreadyExistsError):
        await comment_service.create_comment(rented["booker"].id, rented["item"].id, CommentCreate(text="Two"))


async def test_non_renter_cannot_comment(comment_service, rented, clock, repos):
    stranger = await repos["users"].save({"name": "Stranger", "email": "stranger@mail.com"})
    clock.advance(timedelta(days=1))
    with pytest.raises(NotAvailableError):
        await comment_service.create_comment(stranger.id, rented["item"].id, CommentCreate(text="Hi"))
    # el propietario tampoco tiene reservas propias
    with pytest.raises(NotAvailableError):
        await comment_service.create_comment(rented["owner"].id, rented["item"].id, CommentCreate(text="Mine"))


async def test_rejected_booking_does_not_count(comment_service, booking_service, repos, clock):
    owner = await repos["users"].save({"name": "O", "email": "o@mail.com"})
    booker = await repos["users"].save({"name": "B", "email": "b@mail.com"})
    item = await repos["items"].save({"name": "Kayak", "description": "Sea kayak",
                                      "available": True, "owner_id": owner.id})
    b = await booking_service.create_booking(
        BookingCreate(item_id=item.id, start=NOW + timedelta(hours=1), end=NOW + timedelta(hours=2)), booker.id
    )
    await booking_service.set_booking_status(owner.id, b.id, False)
    clock.advance(timedelta(days=1))
    assert not await comment_service.can_comment(booker.id, item.id, clock.now())


async def test_comment_missing_entities(comment_service, rented):
    with pytest.raises(NotFoundError):
        await comment_service.create_comment(99, rented["item"].id, CommentCreate(text="x"))
    with pytest.raises(NotFoundError):
        await comment_service.create_comment(rented["booker"].id, 99, CommentCreate(text="x"))
