# shareit/routers/items.py
from fastapi import APIRouter, Depends, Path, Query, status
from typing import List
import logging

from ..config import get_settings
from ..dependencies import get_comment_service, get_item_service
from ..schemas.booking import ItemWithBookingsOut
from ..schemas.comment import CommentCreate, CommentOut
from ..schemas.item import ItemCreate, ItemOut, ItemUpdate
from ..security import get_current_user_id
from ..services.comments import CommentService
from ..services.items import ItemService

logger = logging.getLogger(__name__)

router = APIRouter()
settings = get_settings()

@router.post("", response_model=ItemOut, status_code=status.HTTP_201_CREATED)
async def create_item(
    payload: ItemCreate,
    user_id: int = Depends(get_current_user_id),
    service: ItemService = Depends(get_item_service),
):
    return await service.create_item(user_id, payload)

@router.get("/search", response_model=List[ItemOut])
async def search_items(
    text: str = Query(...),
    offset: int = Query(0, alias="from", ge=0),
    size: int = Query(settings.default_page_size, gt=0),
    service: ItemService = Depends(get_item_service),
):
    logger.info(f"Searching {size} items from {offset} by text {text!r}")
    return await service.search_items(text, offset, size)

@router.get("", response_model=List[ItemWithBookingsOut])
async def my_items(
    offset: int = Query(0, alias="from", ge=0),
    size: int = Query(settings.default_page_size, gt=0),
    user_id: int = Depends(get_current_user_id),
    service: ItemService = Depends(get_item_service),
):
    return await service.get_users_items(user_id, offset, size)

@router.get("/{item_id}", response_model=ItemWithBookingsOut)
async def get_item(
    item_id: int = Path(..., gt=0),
    user_id: int = Depends(get_current_user_id),
    service: ItemService = Depends(get_item_service),
):
    return await service.get_item(item_id, user_id)

@router.patch("/{item_id}", response_model=ItemOut)
async def update_item(
    payload: ItemUpdate,
    item_id: int = Path(..., gt=0),
    user_id: int = Depends(get_current_user_id),
    service: ItemService = Depends(get_item_service),
):
    return await service.update_item(user_id, item_id, payload)

@router.post("/{item_id}/comment", response_model=CommentOut, status_code=status.HTTP_201_CREATED)
async def create_comment(
    payload: CommentCreate,
    item_id: int = Path(..., gt=0),
    user_id: int = Depends(get_current_user_id),
    service: CommentService = Depends(get_comment_service),
):
    logger.info(f"User {user_id} comments item {item_id}")
    return await service.create_comment(user_id, item_id, payload)
