"""
Item endpoints - fiches: list/filter, detail, create, edit, soft delete and restore.
Thin controllers; ItemService and AggregationService hold the logic.
"""

from fastapi import APIRouter, Query, status

from app.config import get_settings
from app.core.dependencies import CurrentUser, OptionalUser
from app.db.repositories.item_repository import ItemRepository
from app.db.repositories.photo_repository import PhotoRepository
from app.db.repositories.preference_repository import PreferenceRepository
from app.db.repositories.user_repository import UserRepository
from app.db.session import DbSession
from app.schemas.item import ItemCreate, ItemResponse, ItemUpdate
from app.services.aggregation_service import AggregationService
from app.services.item_service import ItemService

router = APIRouter()
settings = get_settings()


def _get_item_service(session: DbSession) -> ItemService:
    """Factory for service with repository injection."""
    return ItemService(ItemRepository(session), PhotoRepository(session), settings.max_photo_bytes)


def _get_aggregation_service(session: DbSession) -> AggregationService:
    return AggregationService(ItemRepository(session), PreferenceRepository(session), UserRepository(session))


@router.get("", response_model=list[ItemResponse])
async def list_items(
    session: DbSession,
    caller: OptionalUser,
    filter_: str | None = Query(None, alias="filter"),
    user_id: int | None = Query(None, alias="userId"),
    show_deleted: bool = Query(True, alias="showDeleted"),
):
    """
    Without filter: active items then deleted ones, each by number (showDeleted=false hides deleted).
    With filter: my-love, user-love, user-preferences, conflicts, to-review or deleted.
    """
    if filter_:
        return await _get_aggregation_service(session).filter_items(filter_, caller=caller, user_id=user_id)
    return await _get_item_service(session).list_items(show_deleted=show_deleted)


@router.get("/{item_id}", response_model=ItemResponse)
async def get_item(session: DbSession, item_id: int):
    return await _get_item_service(session).get(item_id)


@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item(session: DbSession, data: ItemCreate, user: CurrentUser):
    """Create a fiche from its first photo. The number is assigned by the server."""
    return await _get_item_service(session).create(data, user)


@router.patch("/{item_id}", response_model=ItemResponse)
async def update_item(session: DbSession, item_id: int, data: ItemUpdate, user: CurrentUser):
    return await _get_item_service(session).update(item_id, data)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(session: DbSession, item_id: int, user: CurrentUser):
    """Soft delete: the fiche stays listed, marked with who deleted it and when."""
    await _get_item_service(session).soft_delete(item_id, user)


@router.api_route("/{item_id}/restore", methods=["PATCH", "PUT"], response_model=ItemResponse)
async def restore_item(session: DbSession, item_id: int, user: CurrentUser):
    return await _get_item_service(session).restore(item_id)
