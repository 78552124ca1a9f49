"""Comment request/response schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import StringConstraints

from app.schemas.common import CamelModel
from app.schemas.user import UserBrief


class CommentCreate(CamelModel):
    text: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=2000)]


class CommentResponse(CamelModel):
    id: int
    item_id: int
    user_id: int
    text: str
    is_system: bool = False
    created_at: datetime | None = None
    user: UserBrief
