"""
Photo endpoints - add, remove and reorder the photos of an item.
"""

from fastapi import APIRouter, status

from app.config import get_settings
from app.core.dependencies import CurrentUser
from app.db.repositories.item_repository import ItemRepository
from app.db.repositories.photo_repository import PhotoRepository
from app.db.session import DbSession
from app.schemas.item import PhotoCreate, PhotoReorder, PhotoResponse
from app.services.item_service import ItemService

router = APIRouter()
settings = get_settings()


def _get_item_service(session: DbSession) -> ItemService:
    return ItemService(ItemRepository(session), PhotoRepository(session), settings.max_photo_bytes)


@router.post("/{item_id}/photos", response_model=PhotoResponse, status_code=status.HTTP_201_CREATED)
async def add_photo(session: DbSession, item_id: int, data: PhotoCreate, user: CurrentUser):
    """Append a photo after the current last position."""
    return await _get_item_service(session).add_photo(item_id, data.photo)


@router.patch("/{item_id}/photos/reorder", response_model=list[PhotoResponse])
async def reorder_photos(session: DbSession, item_id: int, data: PhotoReorder, user: CurrentUser):
    return await _get_item_service(session).reorder_photos(item_id, data.photo_ids)


@router.delete("/{item_id}/photos/{photo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_photo(session: DbSession, item_id: int, photo_id: int, user: CurrentUser):
    """400 when it is the item's only photo."""
    await _get_item_service(session).delete_photo(item_id, photo_id)
