"""
Filtro de listados de reservas (parámetro ``state``).

Cada valor sabe evaluarse sobre una reserva concreta y traducirse a un
filtro de Mongo equivalente, para que el paginado se haga en la base.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from ..errors import InvalidArgumentError
from ..models import Booking
from ..schemas.booking import BookingStatus


class SearchingState(str, Enum):
    ALL = "ALL"
    CURRENT = "CURRENT"
    PAST = "PAST"
    FUTURE = "FUTURE"
    WAITING = "WAITING"
    REJECTED = "REJECTED"

    @classmethod
    def parse(cls, token: Optional[str]) -> "SearchingState":
        if token is None or token == "":
            return cls.ALL
        try:
            return cls(token)
        except ValueError:
            raise InvalidArgumentError(f"Unknown state: {token}")

    def matches(self, booking: Booking, now: datetime) -> bool:
        if self is SearchingState.CURRENT:
            return booking.start <= now < booking.end
        if self is SearchingState.PAST:
            return booking.end <= now
        if self is SearchingState.FUTURE:
            return booking.start > now
        if self is SearchingState.WAITING:
            return booking.status == BookingStatus.WAITING
        if self is SearchingState.REJECTED:
            return booking.status == BookingStatus.REJECTED
        return True

    def to_query(self, now: datetime) -> Dict[str, Any]:
        if self is SearchingState.CURRENT:
            return {"start": {"$lte": now}, "end": {"$gt": now}}
        if self is SearchingState.PAST:
            return {"end": {"$lte": now}}
        if self is SearchingState.FUTURE:
            return {"start": {"$gt": now}}
        if self is SearchingState.WAITING:
            return {"status": BookingStatus.WAITING.value}
        if self is SearchingState.REJECTED:
            return {"status": BookingStatus.REJECTED.value}
        return {}
