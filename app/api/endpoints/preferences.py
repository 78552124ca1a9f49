"""
Preference endpoints - who wants what on an item.
"""

from fastapi import APIRouter

from app.core.dependencies import CurrentUser
from app.db.repositories.comment_repository import CommentRepository
from app.db.repositories.item_repository import ItemRepository
from app.db.repositories.preference_repository import PreferenceRepository
from app.db.session import DbSession
from app.schemas.preference import PreferenceResponse, PreferenceSet, PreferenceWithUserResponse
from app.services.comment_service import CommentService
from app.services.preference_service import PreferenceService

router = APIRouter()


def _get_preference_service(session: DbSession) -> PreferenceService:
    item_repo = ItemRepository(session)
    return PreferenceService(
        item_repo,
        PreferenceRepository(session),
        CommentService(item_repo, CommentRepository(session)),
    )


@router.get("/{item_id}/preferences", response_model=list[PreferenceWithUserResponse])
async def list_preferences(session: DbSession, item_id: int):
    return await _get_preference_service(session).list_for_item(item_id)


@router.get("/{item_id}/preferences/me", response_model=PreferenceResponse | None)
async def get_my_preference(session: DbSession, item_id: int, user: CurrentUser):
    """The caller's preference, or null when none is recorded."""
    return await _get_preference_service(session).get_mine(item_id, user)


@router.post("/{item_id}/preferences", response_model=PreferenceResponse)
async def set_preference(session: DbSession, item_id: int, data: PreferenceSet, user: CurrentUser):
    """Upsert the caller's level; a change is announced in the comments."""
    return await _get_preference_service(session).set_level(item_id, user, data.level)
