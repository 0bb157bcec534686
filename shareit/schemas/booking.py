from pydantic import BaseModel, Field
from enum import Enum
from datetime import datetime
from typing import Optional

from .user import UserOut
from .item import ItemOut
from .comment import CommentOut

class BookingStatus(str, Enum):
    WAITING  = "WAITING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELED = "CANCELED"

class BookingCreate(BaseModel):
    item_id: int = Field(alias="itemId")
    start: datetime
    end: datetime

    model_config = {"populate_by_name": True}

class BookingShort(BaseModel):
    id: int
    start: datetime
    end: datetime
    status: BookingStatus
    booker_id: int = Field(alias="bookerId")

    model_config = {"populate_by_name": True}

class BookingOut(BaseModel):
    id: int
    start: datetime
    end: datetime
    status: BookingStatus
    booker: UserOut
    item: ItemOut

class ItemWithBookingsOut(ItemOut):
    """Vista de la cosa con su última/próxima reserva y los comentarios."""
    last_booking: Optional[BookingShort] = Field(default=None, alias="lastBooking")
    next_booking: Optional[BookingShort] = Field(default=None, alias="nextBooking")
    comments: list[CommentOut] = []
