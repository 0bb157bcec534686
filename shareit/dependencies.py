"""
Proveedores para Depends(). Los tests sustituyen get_db/get_clock o los
repositorios vía app.dependency_overrides.
"""
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from .clock import SystemClock, get_clock
from .db import get_db
from .repositories.bookings import BookingRepository
from .repositories.comments import CommentRepository
from .repositories.items import ItemRepository
from .repositories.requests import ItemRequestRepository
from .repositories.users import UserRepository
from .services.bookings import BookingService
from .services.comments import CommentService
from .services.items import ItemService
from .services.requests import ItemRequestService
from .services.users import UserService


def get_user_repo(db: AsyncIOMotorDatabase = Depends(get_db)) -> UserRepository:
    return UserRepository(db)

def get_item_repo(db: AsyncIOMotorDatabase = Depends(get_db)) -> ItemRepository:
    return ItemRepository(db)

def get_booking_repo(db: AsyncIOMotorDatabase = Depends(get_db)) -> BookingRepository:
    return BookingRepository(db)

def get_comment_repo(db: AsyncIOMotorDatabase = Depends(get_db)) -> CommentRepository:
    return CommentRepository(db)

def get_request_repo(db: AsyncIOMotorDatabase = Depends(get_db)) -> ItemRequestRepository:
    return ItemRequestRepository(db)


def get_user_service(
    users: UserRepository = Depends(get_user_repo),
    items: ItemRepository = Depends(get_item_repo),
    bookings: BookingRepository = Depends(get_booking_repo),
) -> UserService:
    return UserService(users, items, bookings)

def get_booking_service(
    bookings: BookingRepository = Depends(get_booking_repo),
    items: ItemRepository = Depends(get_item_repo),
    users: UserRepository = Depends(get_user_repo),
    clock: SystemClock = Depends(get_clock),
) -> BookingService:
    return BookingService(bookings, items, users, clock)

def get_item_service(
    items: ItemRepository = Depends(get_item_repo),
    users: UserRepository = Depends(get_user_repo),
    bookings: BookingRepository = Depends(get_booking_repo),
    comments: CommentRepository = Depends(get_comment_repo),
    requests: ItemRequestRepository = Depends(get_request_repo),
    clock: SystemClock = Depends(get_clock),
) -> ItemService:
    return ItemService(items, users, bookings, comments, requests, clock)

def get_comment_service(
    comments: CommentRepository = Depends(get_comment_repo),
    bookings: BookingRepository = Depends(get_booking_repo),
    items: ItemRepository = Depends(get_item_repo),
    users: UserRepository = Depends(get_user_repo),
    clock: SystemClock = Depends(get_clock),
) -> CommentService:
    return CommentService(comments, bookings, items, users, clock)

def get_request_service(
    requests: ItemRequestRepository = Depends(get_request_repo),
    items: ItemRepository = Depends(get_item_repo),
    users: UserRepository = Depends(get_user_repo),
    clock: SystemClock = Depends(get_clock),
) -> ItemRequestService:
    return ItemRequestService(requests, items, users, clock)
