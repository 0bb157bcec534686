"""
Fuente única de "ahora" para toda la lógica temporal.
"""
from datetime import datetime, timedelta, timezone


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Reloj controlable para tests y scripts."""

    def __init__(self, instant: datetime):
        self._now = instant

    def now(self) -> datetime:
        return self._now

    def advance(self, delta: timedelta) -> None:
        self._now = self._now + delta


_clock = SystemClock()

def get_clock() -> SystemClock:
    return _clock
