"""
Comment endpoints - item discussion thread.
"""

from fastapi import APIRouter, status

from app.core.dependencies import CurrentUser
from app.db.repositories.comment_repository import CommentRepository
from app.db.repositories.item_repository import ItemRepository
from app.db.session import DbSession
from app.schemas.comment import CommentCreate, CommentResponse
from app.services.comment_service import CommentService

router = APIRouter()


def _get_comment_service(session: DbSession) -> CommentService:
    return CommentService(ItemRepository(session), CommentRepository(session))


@router.get("/{item_id}/comments", response_model=list[CommentResponse])
async def list_comments(session: DbSession, item_id: int):
    return await _get_comment_service(session).list_for_item(item_id)


@router.post("/{item_id}/comments", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def create_comment(session: DbSession, item_id: int, data: CommentCreate, user: CurrentUser):
    return await _get_comment_service(session).create(item_id, user, data.text)


@router.delete("/{item_id}/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(session: DbSession, item_id: int, comment_id: int, user: CurrentUser):
    """Only the author may delete; anyone else gets 403."""
    await _get_comment_service(session).delete(item_id, comment_id, user)
