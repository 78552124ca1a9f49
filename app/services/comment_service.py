"""
Comment service - item discussion threads. Only the author may delete a comment.
"""

import logging

from app.core.exceptions import Forbidden, NotFound
from app.db.models.comment import Comment
from app.db.models.user import User
from app.db.repositories.comment_repository import CommentRepository
from app.db.repositories.item_repository import ItemRepository
from app.schemas.comment import CommentResponse
from app.schemas.user import UserBrief

logger = logging.getLogger(__name__)


def _comment_to_response(comment: Comment, author: User) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        item_id=comment.item_id,
        user_id=comment.user_id,
        text=comment.text,
        is_system=comment.is_system,
        created_at=comment.created_at,
        user=UserBrief(id=author.id, name=author.name, role=author.role),
    )


class CommentService:
    def __init__(self, item_repo: ItemRepository, comment_repo: CommentRepository):
        self.item_repo = item_repo
        self.comment_repo = comment_repo

    async def _ensure_item(self, item_id: int) -> None:
        if await self.item_repo.get_by_id(item_id) is None:
            raise NotFound("Item not found")

    async def list_for_item(self, item_id: int) -> list[CommentResponse]:
        """Oldest first, each with its author."""
        await self._ensure_item(item_id)
        comments = await self.comment_repo.list_for_item(item_id)
        return [_comment_to_response(c, c.user) for c in comments]

    async def create(self, item_id: int, user: User, text: str, *, is_system: bool = False) -> CommentResponse:
        await self._ensure_item(item_id)
        comment = await self.comment_repo.add(
            Comment(item_id=item_id, user_id=user.id, text=text, is_system=is_system)
        )
        return _comment_to_response(comment, user)

    async def delete(self, item_id: int, comment_id: int, user: User) -> None:
        comment = await self.comment_repo.get_for_item(item_id, comment_id)
        if comment is None:
            raise NotFound("Comment not found")
        if comment.user_id != user.id:
            logger.warning("User %s tried to delete comment %s of user %s", user.id, comment_id, comment.user_id)
            raise Forbidden("Only the author can delete this comment")
        await self.comment_repo.delete(comment)
