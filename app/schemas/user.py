"""User request/response schemas - identification by first name."""

from datetime import datetime
from typing import Annotated, Literal

from pydantic import StringConstraints

from app.schemas.common import CamelModel

Role = Literal["parent", "enfant"]
FirstName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=50)]


class UserCreate(CamelModel):
    name: FirstName
    role: Role


class UserResponse(CamelModel):
    id: int
    name: str
    role: str
    created_at: datetime | None = None


class UserBrief(CamelModel):
    """Author/owner reference embedded in other resources."""

    id: int
    name: str
    role: str | None = None
