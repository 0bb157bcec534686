from datetime import timedelta

import pytest

from shareit.errors import NotFoundError
from shareit.schemas.item import ItemCreate
from shareit.schemas.request import ItemRequestCreate


async def test_requests_with_answers(request_service, item_service, repos, clock):
    asker = await repos["users"].save({"name": "Asker", "email": "asker@mail.com"})
    lender = await repos["users"].save({"name": "Lender", "email": "lender@mail.com"})

    first = await request_service.create_request(asker.id, ItemRequestCreate(description="Need a ladder"))
    clock.advance(timedelta(minutes=5))
    second = await request_service.create_request(asker.id, ItemRequestCreate(description="Need a drill"))
    await item_service.create_item(lender.id, ItemCreate(name="Ladder", description="3m", available=True,
                                                          request_id=first.id))

    own = await request_service.get_own_requests(asker.id)
    assert [r.id for r in own] == [second.id, first.id]
    assert [i.name for i in own[1].items] == ["Ladder"]

    others = await request_service.get_other_requests(lender.id, 0, 1)
    assert [r.id for r in others] == [second.id]
    assert await request_service.get_other_requests(asker.id, 0, 10) == []

    one = await request_service.get_request(lender.id, first.id)
    assert one.items[0].request_id == first.id


async def test_request_needs_user(request_service):
    with pytest.raises(NotFoundError):
        await request_service.create_request(7, ItemRequestCreate(description="x"))
    with pytest.raises(NotFoundError):
        await request_service.get_own_requests(7)


async def test_missing_request(request_service, repos):
    user = await repos["users"].save({"name": "U", "email": "u@mail.com"})
    with pytest.raises(NotFoundError):
        await request_service.get_request(user.id, 3)
