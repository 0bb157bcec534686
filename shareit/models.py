"""
Registros tal como se guardan. Las relaciones son ids explícitos; quien
necesite la entidad relacionada la pide a su repositorio.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from .schemas.booking import BookingStatus


class User(BaseModel):
    id: int
    name: str
    email: str


class Item(BaseModel):
    id: int
    name: str
    description: str
    available: bool
    owner_id: int
    request_id: Optional[int] = None


class Booking(BaseModel):
    id: int
    item_id: int
    booker_id: int
    owner_id: int
    start: datetime
    end: datetime
    status: BookingStatus


class Comment(BaseModel):
    id: int
    text: str
    item_id: int
    author_id: int
    created: datetime


class ItemRequest(BaseModel):
    id: int
    description: str
    requester_id: int
    created: datetime
