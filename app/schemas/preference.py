"""Preference request/response schemas."""

from datetime import datetime
from typing import Literal

from app.schemas.common import CamelModel
from app.schemas.user import UserBrief

Level = Literal["love", "maybe", "no"]


class PreferenceSet(CamelModel):
    level: Level


class PreferenceResponse(CamelModel):
    id: int
    item_id: int
    user_id: int
    level: str
    updated_at: datetime | None = None


class PreferenceWithUserResponse(PreferenceResponse):
    user: UserBrief
