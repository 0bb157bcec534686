# shareit/routers/bookings.py
from fastapi import APIRouter, Depends, Path, Query, Request, status
from typing import List, Optional
import logging

from ..config import get_settings
from ..dependencies import get_booking_service
from ..schemas.booking import BookingCreate, BookingOut
from ..security import get_current_user_id
from ..services.bookings import BookingService
from ..services.search import SearchingState
from ..middleware.rate_limit import apply_rate_limit

logger = logging.getLogger(__name__)

router = APIRouter()
settings = get_settings()

@router.post("", response_model=BookingOut, status_code=status.HTTP_201_CREATED)
async def create_booking(
    request: Request,
    payload: BookingCreate,
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    apply_rate_limit(request, settings.booking_rate_limit)
    logger.info(f"User {user_id} books item {payload.item_id}")
    return await service.create_booking(payload, user_id)

@router.get("/owner", response_model=List[BookingOut])
async def list_owner_bookings(
    state: Optional[str] = Query(None),
    offset: int = Query(0, alias="from", ge=0),
    size: int = Query(settings.default_page_size, gt=0),
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    logger.info(f"Listing {size} bookings from {offset} with state {state} for owner {user_id}")
    return await service.get_bookings_by_owner(user_id, SearchingState.parse(state), offset, size)

@router.get("", response_model=List[BookingOut])
async def list_my_bookings(
    state: Optional[str] = Query(None),
    offset: int = Query(0, alias="from", ge=0),
    size: int = Query(settings.default_page_size, gt=0),
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    logger.info(f"Listing {size} bookings from {offset} with state {state} for booker {user_id}")
    return await service.get_bookings_by_booker(user_id, SearchingState.parse(state), offset, size)

@router.get("/{booking_id}", response_model=BookingOut)
async def get_booking(
    booking_id: int = Path(..., gt=0),
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    return await service.get_booking(user_id, booking_id)

@router.patch("/{booking_id}", response_model=BookingOut)
async def patch_status(
    approved: bool = Query(...),
    booking_id: int = Path(..., gt=0),
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    logger.info(f"User {user_id} sets booking {booking_id} approved={approved}")
    return await service.set_booking_status(user_id, booking_id, approved)
