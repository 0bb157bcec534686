# shareit/routers/requests.py
from fastapi import APIRouter, Depends, Path, Query, status
from typing import List

from ..config import get_settings
from ..dependencies import get_request_service
from ..schemas.request import ItemRequestCreate, ItemRequestOut
from ..security import get_current_user_id
from ..services.requests import ItemRequestService

router = APIRouter()
settings = get_settings()

@router.post("", response_model=ItemRequestOut, status_code=status.HTTP_201_CREATED)
async def create_request(
    payload: ItemRequestCreate,
    user_id: int = Depends(get_current_user_id),
    service: ItemRequestService = Depends(get_request_service),
):
    return await service.create_request(user_id, payload)

@router.get("", response_model=List[ItemRequestOut])
async def my_requests(
    user_id: int = Depends(get_current_user_id),
    service: ItemRequestService = Depends(get_request_service),
):
    return await service.get_own_requests(user_id)

@router.get("/all", response_model=List[ItemRequestOut])
async def other_requests(
    offset: int = Query(0, alias="from", ge=0),
    size: int = Query(settings.default_page_size, gt=0),
    user_id: int = Depends(get_current_user_id),
    service: ItemRequestService = Depends(get_request_service),
):
    return await service.get_other_requests(user_id, offset, size)

@router.get("/{request_id}", response_model=ItemRequestOut)
async def get_request(
    request_id: int = Path(..., gt=0),
    user_id: int = Depends(get_current_user_id),
    service: ItemRequestService = Depends(get_request_service),
):
    return await service.get_request(user_id, request_id)
