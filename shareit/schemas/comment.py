from pydantic import BaseModel, Field, field_validator
from datetime import datetime

class CommentCreate(BaseModel):
    text: str = Field(min_length=1)

    @field_validator("text")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("text must not be blank")
        return v

class CommentOut(BaseModel):
    id: int
    text: str
    author_name: str = Field(alias="authorName")
    created: datetime

    model_config = {"populate_by_name": True}
