"""
Comment repository - chronological comment threads with their authors loaded.
"""

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.db.models.comment import Comment
from app.db.repositories.base_repository import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    def __init__(self, session):
        super().__init__(session, Comment)

    async def list_for_item(self, item_id: int) -> list[Comment]:
        result = await self.session.execute(
            select(Comment)
            .where(Comment.item_id == item_id)
            .options(selectinload(Comment.user))
            .order_by(Comment.created_at, Comment.id)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def get_for_item(self, item_id: int, comment_id: int) -> Comment | None:
        result = await self.session.execute(
            select(Comment)
            .where(Comment.id == comment_id, Comment.item_id == item_id)
        )
        return result.scalar_one_or_none()
