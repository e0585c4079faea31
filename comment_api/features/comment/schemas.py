from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


# Схема для создания/обновления комментария
class CommentIn(BaseModel):
    slug: str = Field("", max_length=255, description="Slug комментария")
    body: str = Field("", description="Текст комментария")
    author: str = Field("", max_length=255, description="Автор комментария")


class CommentResponse(BaseModel):
    id: int
    slug: str
    body: str
    author: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    model_config = {"from_attributes": True}
