from pydantic import BaseModel, Field
from typing import Optional

class ItemCreate(BaseModel):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    available: bool
    request_id: Optional[int] = Field(default=None, alias="requestId")

    model_config = {"populate_by_name": True}

class ItemUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    available: Optional[bool] = None

class ItemOut(BaseModel):
    id: int
    name: str
    description: str
    available: bool
    request_id: Optional[int] = Field(default=None, alias="requestId")

    model_config = {"populate_by_name": True}
