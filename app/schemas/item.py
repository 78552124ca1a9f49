"""Item and photo request/response schemas - REST API contract."""

from datetime import datetime
from typing import Annotated

from pydantic import Field, StringConstraints, field_validator

from app.schemas.common import CamelModel

PhotoData = Annotated[str, StringConstraints(min_length=1)]


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class PhotoResponse(CamelModel):
    id: int
    item_id: int
    data: str
    position: int
    created_at: datetime | None = None


class PhotoCreate(CamelModel):
    photo: PhotoData


class PhotoReorder(CamelModel):
    photo_ids: list[int]


class ItemCreate(CamelModel):
    photo: PhotoData
    title: str | None = Field(default=None, max_length=100)
    description: str | None = None
    value: float | None = Field(default=None, ge=0)

    @field_validator("title", "description", mode="after")
    @classmethod
    def normalize_text(cls, value: str | None) -> str | None:
        return _blank_to_none(value)


class ItemUpdate(CamelModel):
    """Partial update: only fields present in the body are applied (see model_fields_set)."""

    title: str | None = Field(default=None, max_length=100)
    description: str | None = None
    value: float | None = Field(default=None, ge=0)

    @field_validator("title", "description", mode="after")
    @classmethod
    def normalize_text(cls, value: str | None) -> str | None:
        return _blank_to_none(value)


class ItemResponse(CamelModel):
    """One canonical item shape; the enrichment fields are filled only by the views that compute them."""

    id: int
    number: int
    title: str | None = None
    description: str | None = None
    value: float | None = None
    created_by: int
    created_at: datetime | None = None
    deleted_at: datetime | None = None
    deleted_by: int | None = None
    photos: list[PhotoResponse] = []

    deleted_by_name: str | None = None
    lovers: list[str] | None = None
    love_count: int | None = None
    user_preference: str | None = None
