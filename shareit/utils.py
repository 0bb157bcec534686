# shareit/utils.py
from typing import Any, Dict, Optional
from datetime import datetime, timezone


def to_id(doc: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Convierte _id -> id.
    Si doc es None, devuelve {}.
    """
    if doc is None:
        return {}
    d = dict(doc)
    if "_id" in d:
        d["id"] = d.pop("_id")
    for key, value in d.items():
        if isinstance(value, datetime):
            d[key] = ensure_utc(value)
    return d


def ensure_utc(value: datetime) -> datetime:
    """Fechas sin zona se interpretan como UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()
