from pydantic import BaseModel, Field, field_validator
from datetime import datetime

from .item import ItemOut

class ItemRequestCreate(BaseModel):
    description: str = Field(min_length=1)

    @field_validator("description")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("description must not be blank")
        return v

class ItemRequestOut(BaseModel):
    id: int
    description: str
    created: datetime
    items: list[ItemOut] = []
