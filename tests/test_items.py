from datetime import timedelta

import pytest

from shareit.errors import NotFoundError
from shareit.schemas.booking import BookingCreate
from shareit.schemas.comment import CommentCreate
from shareit.schemas.item import ItemCreate, ItemUpdate
from common import NOW


@pytest.fixture
async def people(repos):
    owner = await repos["users"].save({"name": "Owner", "email": "owner@mail.com"})
    booker = await repos["users"].save({"name": "Booker", "email": "booker@mail.com"})
    return owner, booker


async def test_create_and_update_item(item_service, people):
    owner, _ = people
    item = await item_service.create_item(owner.id, ItemCreate(name="Drill", description="Power drill", available=True))
    assert item.id == 1 and item.request_id is None

    updated = await item_service.update_item(owner.id, item.id, ItemUpdate(name="  ", available=False))
    assert updated.name == "Drill"
    assert updated.available is False


async def test_create_item_checks_owner_and_request(item_service, people):
    with pytest.raises(NotFoundError):
        await item_service.create_item(99, ItemCreate(name="a", description="b", available=True))
    with pytest.raises(NotFoundError, match="Request with id = 5"):
        await item_service.create_item(people[0].id, ItemCreate(name="a", description="b",
                                                                available=True, request_id=5))


async def test_only_owner_updates(item_service, people):
    owner, booker = people
    item = await item_service.create_item(owner.id, ItemCreate(name="Drill", description="d", available=True))
    with pytest.raises(NotFoundError):
        await item_service.update_item(booker.id, item.id, ItemUpdate(name="Mine"))


async def test_search_available_substring(item_service, people):
    owner, _ = people
    await item_service.create_item(owner.id, ItemCreate(name="Drill", description="Power tool", available=True))
    await item_service.create_item(owner.id, ItemCreate(name="Ladder", description="Aluminium", available=True))
    await item_service.create_item(owner.id, ItemCreate(name="Old drill", description="broken", available=False))

    assert [i.name for i in await item_service.search_items("dRiLl", 0, 10)] == ["Drill"]
    assert [i.name for i in await item_service.search_items("alum", 0, 10)] == ["Ladder"]
    assert await item_service.search_items("   ", 0, 10) == []


async def test_owner_sees_last_and_next_others_do_not(item_service, booking_service, comment_service,
                                                      people, clock):
    owner, booker = people
    item = await item_service.create_item(owner.id, ItemCreate(name="Tent", description="Tent", available=True))
    for start_h, end_h in ((1, 2), (30, 40), (50, 60)):
        b = await booking_service.create_booking(
            BookingCreate(item_id=item.id, start=NOW + timedelta(hours=start_h), end=NOW + timedelta(hours=end_h)),
            booker.id,
        )
        await booking_service.set_booking_status(owner.id, b.id, True)
    clock.advance(timedelta(hours=3))
    await comment_service.create_comment(booker.id, item.id, CommentCreate(text="Dry and warm"))

    view = await item_service.get_item(item.id, owner.id)
    assert view.last_booking.id == 1
    assert view.next_booking.id == 2
    assert [c.text for c in view.comments] == ["Dry and warm"]

    other_view = await item_service.get_item(item.id, booker.id)
    assert other_view.last_booking is None and other_view.next_booking is None
    assert [c.author_name for c in other_view.comments] == ["Booker"]


async def test_users_items_paged(item_service, people):
    owner, booker = people
    for name in ("a", "b", "c"):
        await item_service.create_item(owner.id, ItemCreate(name=name, description=name, available=True))
    await item_service.create_item(booker.id, ItemCreate(name="z", description="z", available=True))

    page = await item_service.get_users_items(owner.id, 1, 5)
    assert [i.name for i in page] == ["b", "c"]
    with pytest.raises(NotFoundError):
        await item_service.get_item(99, owner.id)
